"""Reading DFA documents from disk."""

import logging
from pathlib import Path

from .errors import DfaLoadError
from .models import RawAutomaton
from .parser import parse_raw

logger = logging.getLogger(__name__)


def load_text(path: str | Path) -> str:
    """Read a DFA document and return its text.

    Args:
        path: Path to the document.

    Returns:
        The complete document as a string.

    Raises:
        DfaLoadError: If the file cannot be read.
    """
    path = Path(path)

    if not path.exists():
        raise DfaLoadError(f"File not found: {path}", str(path))

    if not path.is_file():
        raise DfaLoadError(f"Not a file: {path}", str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise DfaLoadError(f"File is not valid UTF-8: {e}", str(path)) from e
    except OSError as e:
        raise DfaLoadError(f"Cannot read file: {e}", str(path)) from e

    logger.debug("Read %d character(s) from %s", len(text), path)
    return text


def parse_raw_file(path: str | Path) -> RawAutomaton:
    """Load and parse a DFA document into its raw fields.

    Raises:
        DfaLoadError: If the file cannot be read.
        DfaSyntaxError: If the document does not follow the grammar.
    """
    return parse_raw(load_text(path))
