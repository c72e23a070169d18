"""Parsing of cursor positions given on the command line."""


def parse_offset(text: str, position: str) -> int:
    """Convert 'OFFSET' or 'LINE:COLUMN' (1-based) into a character offset."""
    position = position.strip()
    if ":" not in position:
        offset = int(position)
        if not 0 <= offset <= len(text):
            msg = f"Offset {offset} is outside the buffer (0..{len(text)})"
            raise ValueError(msg)
        return offset

    line_str, column_str = position.split(":", 1)
    line, column = int(line_str), int(column_str)
    lines = text.split("\n")
    if not 1 <= line <= len(lines):
        msg = f"Line {line} is outside the buffer (1..{len(lines)})"
        raise ValueError(msg)
    if not 1 <= column <= len(lines[line - 1]) + 1:
        msg = f"Column {column} is outside line {line}"
        raise ValueError(msg)
    # Each preceding line contributes its length plus the newline
    return sum(len(ln) + 1 for ln in lines[: line - 1]) + column - 1
