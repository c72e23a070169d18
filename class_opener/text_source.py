"""Buffer capability consumed by the resolver."""

import re
from typing import Protocol


class TextSource(Protocol):
    """Protocol for an addressable text document with a point."""

    file_path: str | None

    def current_word_at(self, offset: int) -> str:
        """Return the identifier touching *offset*, or an empty string."""
        ...

    def line_at(self, offset: int) -> str:
        """Return the full line containing *offset* without its newline."""
        ...

    def text_from(self, start: int, end: int) -> str:
        """Return the text between two offsets."""
        ...

    def go_to_buffer_start(self) -> None:
        """Move the point to the start of the buffer."""
        ...

    def search_forward(self, pattern: str | re.Pattern[str]) -> re.Match[str] | None:
        """Search from the point; on a match move the point past it."""
        ...
