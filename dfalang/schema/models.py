"""Data models for DFA documents."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, PrivateAttr, model_validator


@dataclass
class RawAutomaton:
    """Fields of a DFA document as written, before any validation."""

    states: list[str] = field(default_factory=list)
    alphabet: list[str] = field(default_factory=list)
    starting_state: str = ""
    accepting_states: list[str] = field(default_factory=list)
    transitions: dict[tuple[str, str], str] = field(default_factory=dict)
    redeclared: list[tuple[str, str]] = field(default_factory=list)


class Transition(BaseModel):
    """A single ``source,symbol = destination`` entry."""

    model_config = ConfigDict(frozen=True)

    source: str
    symbol: str
    destination: str

    def __str__(self) -> str:
        return f"{self.source},{self.symbol} -> {self.destination}"


class Automaton(BaseModel):
    """A validated deterministic finite automaton.

    Instances are immutable. Duplicate states or symbols from the source
    document are kept in declaration order; transitions hold at most one
    destination per (source, symbol) pair.
    """

    model_config = ConfigDict(frozen=True)

    states: tuple[str, ...] = ()
    alphabet: tuple[str, ...] = ()
    starting_state: str
    accepting_states: tuple[str, ...] = ()
    transitions: tuple[Transition, ...] = ()

    _transition_map: dict[tuple[str, str], str] = PrivateAttr(default_factory=dict)

    @model_validator(mode="after")
    def check_references(self) -> "Automaton":
        """Reject undeclared references and repeated (source, symbol) pairs."""
        states = set(self.states)
        alphabet = set(self.alphabet)

        if self.starting_state not in states:
            raise ValueError(f"{self.starting_state} is not a valid State.")

        for state in self.accepting_states:
            if state not in states:
                raise ValueError(f"Accepting State {state} is not a valid state.")

        seen = set()
        for t in self.transitions:
            if t.source not in states or t.destination not in states:
                raise ValueError(f"Transition {t} references an undeclared state")
            if t.symbol not in alphabet:
                raise ValueError(f"Transition {t} uses an undeclared symbol")
            if (t.source, t.symbol) in seen:
                raise ValueError(
                    f"Transition {t.source},{t.symbol} has more than one destination"
                )
            seen.add((t.source, t.symbol))

        return self

    def model_post_init(self, __context: Any) -> None:
        self._transition_map = {
            (t.source, t.symbol): t.destination for t in self.transitions
        }

    @classmethod
    def from_raw(cls, raw: RawAutomaton) -> "Automaton":
        """Copy raw parsed fields into a new automaton.

        Raises:
            pydantic.ValidationError: If ``raw`` breaks a reference invariant.
        """
        return cls(
            states=tuple(raw.states),
            alphabet=tuple(raw.alphabet),
            starting_state=raw.starting_state,
            accepting_states=tuple(raw.accepting_states),
            transitions=tuple(
                Transition(source=source, symbol=symbol, destination=destination)
                for (source, symbol), destination in raw.transitions.items()
            ),
        )

    @property
    def transition_map(self) -> Mapping[tuple[str, str], str]:
        """Get a read-only mapping of (source, symbol) to destination."""
        return MappingProxyType(self._transition_map)

    def destination(self, source: str, symbol: str) -> str | None:
        """Get the destination for a (source, symbol) pair, if defined."""
        return self._transition_map.get((source, symbol))

    def is_accepting(self, state: str) -> bool:
        """Check if a state is declared as accepting."""
        return state in self.accepting_states

    def triples(self) -> set[tuple[str, str, str]]:
        """Get all transitions as (source, symbol, destination) triples."""
        return {(t.source, t.symbol, t.destination) for t in self.transitions}
