"""Convert resolution results into single-line user messages."""

from class_opener.result import Ok, Result


def format_result(result: Result) -> str:
    """Return the status line for a result."""
    if isinstance(result, Ok):
        return f"Opened {result.path}"
    return result.detail
