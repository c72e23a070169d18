"""Utility for determining the source file path of a qualified class name."""


def relative_path_for_class(full_name: str, extension: str) -> str:
    """Map a dotted class name to its path below a source root."""
    # a.b.C -> a/b/C.java
    parts = [p for p in full_name.strip().split(".") if p]
    return "/".join(parts) + f".{extension.lstrip('.')}"
