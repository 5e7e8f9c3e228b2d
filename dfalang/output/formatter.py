"""Output formatting for validation results and graphs."""

import json
from typing import Literal

from ..graph.model_graph import AutomatonGraph
from ..validators.base import Severity, ValidationIssue, ValidationResult

# Document section each issue code belongs to
SECTIONS = {
    "INVALID_STARTING_STATE": "starting_state",
    "INVALID_ACCEPTING_STATE": "accepting_states",
    "INVALID_TRANSITION": "transitions",
    "REDECLARED_TRANSITION": "transitions",
    "DUPLICATE_STATE": "states",
    "UNREACHABLE_STATE": "states",
    "DUPLICATE_SYMBOL": "alphabet",
    "EMPTY_IDENTIFIER": "identifiers",
}


def format_validation_result(
    result: ValidationResult,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format a validation result for output.

    Args:
        result: The validation result to format.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return _format_json(result)
    return _format_text(result)


def _format_text(result: ValidationResult) -> str:
    """Format result as human-readable text, grouped by automaton section."""
    lines: list[str] = []

    errors = result.errors
    warnings = result.warnings

    lines.append("ERRORS:")
    lines.extend(_format_sections(errors))
    lines.append("")
    lines.append("WARNINGS:")
    lines.extend(_format_sections(warnings))

    lines.append("")
    if result.is_valid:
        if warnings:
            lines.append(f"Validation passed with {len(warnings)} warning(s)")
        else:
            lines.append("Validation passed")
    else:
        lines.append(
            f"Validation failed: {len(errors)} error(s), {len(warnings)} warning(s)"
        )

    return "\n".join(lines)


def _format_sections(issues: list[ValidationIssue]) -> list[str]:
    """Group issues under the section of the document they concern."""
    if not issues:
        return ["  (none)"]

    grouped: dict[str, list[ValidationIssue]] = {}
    for issue in issues:
        section = SECTIONS.get(issue.code, "other")
        grouped.setdefault(section, []).append(issue)

    lines = []
    for section, section_issues in grouped.items():
        lines.append(f"  {section} ({len(section_issues)}):")
        for issue in section_issues:
            lines.append(f"    {_format_issue_text(issue)}")
    return lines


def _format_issue_text(issue: ValidationIssue) -> str:
    """Format a single issue as text."""
    location = f"[{issue.location}] " if issue.location else ""
    symbol = "✘" if issue.severity == Severity.ERROR else "⚠"
    return f"{symbol} {issue.code}: {location}{issue.message}"


def _format_json(result: ValidationResult) -> str:
    """Format result as JSON."""
    data = {
        "valid": result.is_valid,
        "error_count": len(result.errors),
        "warning_count": len(result.warnings),
        "issues": [
            {
                "code": issue.code,
                "message": issue.message,
                "severity": issue.severity.value,
                "section": SECTIONS.get(issue.code, "other"),
                "state": issue.state,
                "symbol": issue.symbol,
                "details": issue.details,
            }
            for issue in result.issues
        ],
    }
    return json.dumps(data, indent=2)


def format_graph(
    graph: AutomatonGraph,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format a graph projection for output.

    The text form lists one edge per line as ``source -> destination: a, b``.
    """
    if format == "json":
        return json.dumps(graph.to_dict(), indent=2)

    lines = [f"nodes: {', '.join(graph.nodes)}", "edges:"]
    if graph.edges:
        for (source, destination), symbols in graph.edges.items():
            lines.append(f"  {source} -> {destination}: {', '.join(symbols)}")
    else:
        lines.append("  (none)")
    return "\n".join(lines)
