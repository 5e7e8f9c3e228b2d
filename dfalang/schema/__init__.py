"""Schema layer for reading and parsing DFA documents."""

from .errors import (
    AutomatonValidationError,
    DfaLoadError,
    DfaSyntaxError,
    KeywordMismatchError,
    UnexpectedEndOfFileError,
    UnexpectedSymbolError,
)
from .models import Automaton, RawAutomaton, Transition
from .reader import Reader
from .parser import parse_raw
from .loader import load_text, parse_raw_file

__all__ = [
    "AutomatonValidationError",
    "DfaLoadError",
    "DfaSyntaxError",
    "KeywordMismatchError",
    "UnexpectedEndOfFileError",
    "UnexpectedSymbolError",
    "Automaton",
    "RawAutomaton",
    "Transition",
    "Reader",
    "parse_raw",
    "load_text",
    "parse_raw_file",
]
