"""In-memory buffer implementing the TextSource protocol."""

import re
from pathlib import Path

IDENTIFIER_CHAR_RE = re.compile(r"[\w$]")


class StringBuffer:
    """Holds buffer text, a point and the path of the visited file."""

    def __init__(self, text: str, file_path: str | None = None) -> None:
        """Initialize the buffer with the point at the start."""
        self.text = text
        self.file_path = file_path
        self.point = 0

    @classmethod
    def from_file(cls, path: str | Path) -> "StringBuffer":
        """Visit a file on disk."""
        p = Path(path)
        return cls(p.read_text(encoding="utf-8"), str(p))

    def current_word_at(self, offset: int) -> str:
        offset = max(0, min(offset, len(self.text)))
        # Cursor just after a word still counts as being on it
        if not self._is_word_char(offset) and self._is_word_char(offset - 1):
            offset -= 1
        if not self._is_word_char(offset):
            return ""
        start = offset
        while self._is_word_char(start - 1):
            start -= 1
        end = offset
        while self._is_word_char(end):
            end += 1
        return self.text[start:end]

    def line_at(self, offset: int) -> str:
        offset = max(0, min(offset, len(self.text)))
        start = self.text.rfind("\n", 0, offset) + 1
        end = self.text.find("\n", offset)
        if end == -1:
            end = len(self.text)
        return self.text[start:end].rstrip("\r")

    def text_from(self, start: int, end: int) -> str:
        return self.text[start:end]

    def go_to_buffer_start(self) -> None:
        self.point = 0

    def search_forward(self, pattern: str | re.Pattern[str]) -> re.Match[str] | None:
        regex = re.compile(pattern, re.MULTILINE) if isinstance(pattern, str) else pattern
        match = regex.search(self.text, self.point)
        if match is None:
            return None
        # Never leave the point in place, or repeated searches would loop
        self.point = max(match.end(), self.point + 1)
        return match

    def _is_word_char(self, index: int) -> bool:
        if index < 0 or index >= len(self.text):
            return False
        return IDENTIFIER_CHAR_RE.match(self.text[index]) is not None
