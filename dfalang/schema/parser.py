"""Recursive-descent parser for the DFA description language.

A document consists of five sections in a fixed order::

    states = [q1, q2]
    alphabet = [a, b]
    starting_state = q1
    accepting_states = [q2]
    transitions =
        q1,a = q2;
        q2,b = q1;

The transitions section has no closing delimiter and runs until the end of
the input.
"""

import logging

from .models import RawAutomaton
from .reader import Reader

logger = logging.getLogger(__name__)


def parse_raw(text: str) -> RawAutomaton:
    """Parse a DFA document into its raw fields.

    Args:
        text: The complete document.

    Returns:
        The unvalidated fields, in declaration order.

    Raises:
        DfaSyntaxError: If the document does not follow the grammar.
    """
    reader = Reader(text)
    states = parse_states(reader)
    alphabet = parse_alphabet(reader)
    starting_state = parse_starting_state(reader)
    accepting_states = parse_accepting_states(reader)
    transitions, redeclared = parse_transitions(reader)

    logger.debug(
        "Parsed %d state(s), %d symbol(s), %d transition(s)",
        len(states),
        len(alphabet),
        len(transitions),
    )
    return RawAutomaton(
        states=states,
        alphabet=alphabet,
        starting_state=starting_state,
        accepting_states=accepting_states,
        transitions=transitions,
        redeclared=redeclared,
    )


def parse_list(reader: Reader) -> list[str]:
    """Parse ``[word, word, ...]``.

    An empty pair of brackets yields a single empty word.
    """
    reader.exact("[")
    items = []
    while True:
        items.append(reader.word())
        if reader.one_of(",]") == "]":
            return items


def _declaration(reader: Reader, keyword: str) -> None:
    reader.keyword(keyword)
    reader.exact("=")


def parse_states(reader: Reader) -> list[str]:
    """Parse ``states = [...]``."""
    _declaration(reader, "states")
    return parse_list(reader)


def parse_alphabet(reader: Reader) -> list[str]:
    """Parse ``alphabet = [...]``."""
    _declaration(reader, "alphabet")
    return parse_list(reader)


def parse_starting_state(reader: Reader) -> str:
    """Parse ``starting_state = word``."""
    _declaration(reader, "starting_state")
    return reader.word()


def parse_accepting_states(reader: Reader) -> list[str]:
    """Parse ``accepting_states = [...]``."""
    _declaration(reader, "accepting_states")
    return parse_list(reader)


def parse_transitions(
    reader: Reader,
) -> tuple[dict[tuple[str, str], str], list[tuple[str, str]]]:
    """Parse ``transitions =`` followed by lines up to the end of input.

    Each line has the form ``source,symbol = destination;``. A later line
    for the same (source, symbol) pair replaces the earlier destination.

    Returns:
        Tuple of (transitions, redeclared pairs).
    """
    _declaration(reader, "transitions")

    transitions: dict[tuple[str, str], str] = {}
    redeclared: list[tuple[str, str]] = []
    while not reader.at_end:
        source = reader.word()
        reader.exact(",")
        symbol = reader.word()
        reader.exact("=")
        destination = reader.word()
        reader.exact(";")

        key = (source, symbol)
        if key in transitions:
            logger.debug(
                "Transition %s,%s redeclared: %s replaced by %s",
                source,
                symbol,
                transitions[key],
                destination,
            )
            redeclared.append(key)
        transitions[key] = destination

    return transitions, redeclared
