"""Tagged outcomes of a class resolution."""

from dataclasses import dataclass
from enum import Enum


class Strategy(Enum):
    """Which step of the lookup chain produced the file."""

    SEARCH_PATH = "search_path"  # Fully qualified name looked up directly
    SINGLE_IMPORT = "single_import"  # import a.b.C;
    WILDCARD_IMPORT = "wildcard_import"  # import a.b.*;
    IMPLICIT_PACKAGE = "implicit_package"  # java.lang.C
    SAME_DIRECTORY = "same_directory"  # C.java next to the buffer


class ErrorKind(Enum):
    """Reasons an open command can fail."""

    IMPORT_NOT_PARSABLE = "import_not_parsable"
    CLASS_NOT_FOUND = "class_not_found"
    BASE_CLASS_NOT_DETERMINED = "base_class_not_determined"


@dataclass(frozen=True)
class Ok:
    """A readable source file was found and opened.

    class_name is the name the lookup was asked for: the token under the
    cursor for the import chain, the dotted name for a direct lookup.
    """

    path: str
    strategy: Strategy
    class_name: str


@dataclass(frozen=True)
class Err:
    """Resolution failed; detail is the message shown to the user."""

    kind: ErrorKind
    detail: str


Result = Ok | Err
