"""Character cursor used by the DFA parser."""

from .errors import KeywordMismatchError, UnexpectedEndOfFileError, UnexpectedSymbolError


def is_word_char(ch: str) -> bool:
    """Check if a character may appear in an identifier."""
    return ch.isalnum() or ch == "_"


class Reader:
    """A forward-only cursor over source text with one character of lookahead.

    Consumed characters are never un-read, so every decision made on top of
    the reader has to be settled by looking at the next character only.
    """

    def __init__(self, text: str):
        self._text = text
        self._pos = 0

    @property
    def position(self) -> int:
        """Offset of the next unread character."""
        return self._pos

    @property
    def at_end(self) -> bool:
        """Check if all input has been consumed."""
        return self._pos >= len(self._text)

    def peek(self) -> str | None:
        """Return the next character without consuming it."""
        if self.at_end:
            return None
        return self._text[self._pos]

    def advance(self) -> str | None:
        """Consume and return the next character."""
        ch = self.peek()
        if ch is not None:
            self._pos += 1
        return ch

    def skip_whitespace(self) -> None:
        """Consume a run of whitespace, including newlines."""
        while not self.at_end and self._text[self._pos].isspace():
            self._pos += 1

    def word(self) -> str:
        """Read an identifier surrounded by optional whitespace.

        Returns:
            The identifier, which is empty when the cursor does not sit on
            an identifier character.
        """
        self.skip_whitespace()
        start = self._pos
        while not self.at_end and is_word_char(self._text[self._pos]):
            self._pos += 1
        token = self._text[start:self._pos]
        self.skip_whitespace()
        return token

    def one_of(self, chars: str) -> str:
        """Consume one of ``chars`` surrounded by optional whitespace.

        Args:
            chars: The accepted punctuation characters.

        Returns:
            The character that was consumed.

        Raises:
            UnexpectedSymbolError: If another character is found.
            UnexpectedEndOfFileError: If input is exhausted.
        """
        self.skip_whitespace()
        position = self._pos
        ch = self.advance()
        if ch is None:
            raise UnexpectedEndOfFileError(position)
        if ch not in chars:
            raise UnexpectedSymbolError(ch, " or ".join(chars), position)
        self.skip_whitespace()
        return ch

    def exact(self, ch: str) -> None:
        """Consume exactly ``ch`` surrounded by optional whitespace."""
        self.one_of(ch)

    def keyword(self, kw: str) -> None:
        """Read a word and require it to equal ``kw``.

        Raises:
            KeywordMismatchError: If the word differs from ``kw``.
        """
        position = self._pos
        found = self.word()
        if found != kw:
            raise KeywordMismatchError(kw, found, position)
