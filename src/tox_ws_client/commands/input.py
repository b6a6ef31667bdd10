"""Cursor over a single line of command input."""

from __future__ import annotations

DELIMITER = " "


class Input:
    """Reads space-delimited words, or the rest of the line, from a string.

    Only the space character delimits words. Runs of spaces are skipped
    before a word, and exactly one space after it is consumed.
    """

    def __init__(self, text: str) -> None:
        self._text = text

    @property
    def remaining(self) -> str:
        return self._text

    def read_word(self) -> str | None:
        """Return the next word and advance past it, or None if none remain."""
        parts = self._text.split(DELIMITER)
        for index, part in enumerate(parts):
            if part:
                self._text = DELIMITER.join(parts[index + 1 :])
                return part
        return None

    def read_line(self) -> str | None:
        """Return all remaining text verbatim and empty the cursor.

        Leading spaces are kept so that a message body is passed through
        untouched. Returns None if no word remains.
        """
        if self.is_over():
            return None

        line = self._text
        self._text = ""
        return line

    def is_over(self) -> bool:
        """True if no word remains."""
        return not any(self._text.split(DELIMITER))
