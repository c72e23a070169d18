"""Assembling the ordered list of source roots."""

import os
from collections.abc import Iterable

SEARCH_PATH_ENV = "CLASS_OPENER_PATH"


def split_path_list(value: str | None) -> list[str]:
    """Split an os.pathsep separated list, dropping empty entries."""
    if not value:
        return []
    return [p for p in value.split(os.pathsep) if p.strip()]


def merge_search_path(*sources: Iterable[str]) -> tuple[str, ...]:
    """Concatenate root lists in precedence order, keeping first occurrences."""
    seen: set[str] = set()
    roots: list[str] = []
    for source in sources:
        for root in source:
            root = str(root)
            if root in seen:
                continue
            seen.add(root)
            roots.append(root)
    return tuple(roots)
