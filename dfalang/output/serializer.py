"""Rendering automata back to the DFA description language."""

from pathlib import Path

from ..schema.models import Automaton
from ..schema.reader import is_word_char

INDENT = "    "


def _word(name: str, field: str) -> str:
    if not all(is_word_char(ch) for ch in name):
        raise ValueError(f"Cannot write {field} {name!r}: not an identifier")
    return name


def _list(items: tuple[str, ...], field: str) -> str:
    # "[]" reads back as a single empty word, so an empty list has no spelling.
    if not items:
        raise ValueError(f"Cannot write an empty {field} list")
    return f"[{', '.join(_word(item, field) for item in items)}]"


def dump_automaton(automaton: Automaton) -> str:
    """Render an automaton in canonical text form.

    Transition lines follow the automaton's transition order, which is the
    order in which each (source, symbol) pair was first declared. Parsing
    the output yields an automaton with the same transitions.

    Args:
        automaton: The automaton to render.

    Returns:
        The document text, ending with a newline.

    Raises:
        ValueError: If the automaton holds something the language cannot
            express: an empty states, alphabet or accepting_states list, an
            empty starting state, or a name with non-identifier characters.
    """
    if not automaton.starting_state:
        raise ValueError("Cannot write an empty starting state")

    lines = [
        f"states = {_list(automaton.states, 'states')}",
        f"alphabet = {_list(automaton.alphabet, 'alphabet')}",
        f"starting_state = {_word(automaton.starting_state, 'starting_state')}",
        f"accepting_states = {_list(automaton.accepting_states, 'accepting_states')}",
        "transitions =",
    ]
    lines.extend(
        f"{INDENT}{_word(t.source, 'state')},{_word(t.symbol, 'symbol')} = "
        f"{_word(t.destination, 'state')};"
        for t in automaton.transitions
    )
    return "\n".join(lines) + "\n"


def write_automaton(automaton: Automaton, path: str | Path) -> None:
    """Write an automaton to a file in canonical text form."""
    Path(path).write_text(dump_automaton(automaton), encoding="utf-8")
