"""Regular expressions for import and class declarations."""

import re

# import a.b.*;
WILDCARD_IMPORT_RE = re.compile(r"^\s*import\s+([\w$.]+)\.\*\s*;", re.MULTILINE)

# import a.b.C;  (the whole line)
SINGLE_IMPORT_LINE_RE = re.compile(r"^\s*import\s+([\w$]+(?:\.[\w$]+)+)\s*;")


def single_import_pattern(class_name: str) -> str:
    """Pattern for 'import <anything>.<class_name>;'."""
    return rf"^\s*import\s+([\w$.]+\.{re.escape(class_name)})\s*;"


def extends_pattern(class_name: str) -> str:
    """Pattern for 'class <class_name> extends <Identifier>' at line start."""
    # Leading modifiers: public abstract class Foo extends Base
    # Optional type parameters: class Foo<T extends Bar> extends Base
    return (
        rf"^\s*(?:[\w@]+\s+)*class\s+{re.escape(class_name)}"
        r"(?:\s*<[^{]*?>)?\s+extends\s+([\w$]+(?:\.[\w$]+)*)"
    )
