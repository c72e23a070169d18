"""Lookup of the single-type import that names a class."""

from class_opener.import_patterns import single_import_pattern
from class_opener.text_source import TextSource


def find_import_for_class(buffer: TextSource, class_name: str) -> str | None:
    """Return the fully qualified name from 'import a.b.ClassName;', if any."""
    buffer.go_to_buffer_start()
    match = buffer.search_forward(single_import_pattern(class_name))
    if match is None:
        return None
    return match.group(1)
