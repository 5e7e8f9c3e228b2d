"""Errors raised while loading and parsing DFA documents."""


class DfaLoadError(Exception):
    """Raised when a DFA document cannot be read."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class DfaSyntaxError(Exception):
    """Raised when a DFA document does not follow the grammar."""

    def __init__(self, message: str, position: int | None = None):
        self.position = position
        super().__init__(message)


class UnexpectedSymbolError(DfaSyntaxError):
    """A character other than the expected one was found."""

    def __init__(self, found: str, expected: str, position: int | None = None):
        self.found = found
        self.expected = expected
        super().__init__(f"Unexpected Symbol '{found}' Expected {expected}", position)


class UnexpectedEndOfFileError(DfaSyntaxError):
    """Input ran out where more tokens were required."""

    def __init__(self, position: int | None = None):
        super().__init__("Unexpected End of File", position)


class KeywordMismatchError(DfaSyntaxError):
    """A section keyword was missing or misspelled."""

    def __init__(self, expected: str, found: str, position: int | None = None):
        self.expected = expected
        self.found = found
        super().__init__(f"Expected {expected}", position)


class AutomatonValidationError(Exception):
    """Raised when parsed fields fail referential integrity checks."""

    def __init__(self, message: str, issues: list | None = None):
        self.issues = issues or []
        super().__init__(message)

    @property
    def report(self) -> str:
        """One line per violation."""
        return "\n".join(issue.message for issue in self.issues)
