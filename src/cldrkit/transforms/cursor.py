"""Mutable cursor over a text buffer under transformation.

Unlike a parsing cursor, transform rules rewrite the buffer in place, so
Cursor is a mutable (position, text) pair. Position marks the next unit
to process and always stays within [0, len(text)].

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

__all__ = ["Cursor"]


@dataclass(slots=True)
class Cursor:
    """Position plus the text buffer it indexes.

    Example:
        >>> cursor = Cursor("abc")
        >>> cursor.advance()
        >>> cursor.current
        'b'
        >>> cursor.replace(1, "BB")
        >>> cursor.snapshot()
        (1, 'aBBc')
    """

    text: str
    position: int = 0

    def __post_init__(self) -> None:
        """Validate position.

        Raises:
            ValueError: If position lies outside [0, len(text)]
        """
        if not 0 <= self.position <= len(self.text):
            msg = f"Cursor position {self.position} outside text of length {len(self.text)}"
            raise ValueError(msg)

    @property
    def is_eof(self) -> bool:
        """True when every unit has been processed."""
        return self.position >= len(self.text)

    @property
    def current(self) -> str:
        """Character at position.

        Raises:
            EOFError: If at end of text
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.position}"
            raise EOFError(msg)
        return self.text[self.position]

    def advance(self, count: int = 1) -> None:
        """Move position forward by count, stopping at end of text."""
        if count < 0:
            msg = "count must be non-negative"
            raise ValueError(msg)
        self.position = min(self.position + count, len(self.text))

    def replace(self, length: int, replacement: str) -> None:
        """Replace length characters at position with replacement.

        Position is unchanged; advance past the replacement explicitly.

        Raises:
            ValueError: If length is negative or runs past end of text
        """
        end = self.position + length
        if length < 0 or end > len(self.text):
            msg = f"Cannot replace {length} characters at position {self.position}"
            raise ValueError(msg)
        self.text = self.text[: self.position] + replacement + self.text[end:]

    def snapshot(self) -> tuple[int, str]:
        """Return the current (position, text) pair."""
        return (self.position, self.text)
