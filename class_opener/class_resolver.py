"""Resolution of class names in a buffer to source files on the search path."""

import dataclasses
import logging
import os
from pathlib import Path

from class_opener.file_system import FileSystem
from class_opener.find_import_for_class import find_import_for_class
from class_opener.import_patterns import (
    SINGLE_IMPORT_LINE_RE,
    WILDCARD_IMPORT_RE,
    extends_pattern,
)
from class_opener.relative_path_for_class import relative_path_for_class
from class_opener.resolver_config import ResolverConfig
from class_opener.result import Err, ErrorKind, Ok, Result, Strategy
from class_opener.text_source import TextSource

logger = logging.getLogger(__name__)


class ClassResolver:
    """Finds and opens the source file for a class referenced in a buffer.

    Lookup order for an unqualified name, first success wins:

    1. a single-type import naming the class;
    2. wildcard imports, tried in source order;
    3. the implicit package (java.lang by default);
    4. a file named after the class next to the buffer's own file.
    """

    def __init__(self, config: ResolverConfig, file_system: FileSystem) -> None:
        """Initialize with an immutable config and a filesystem adapter."""
        self.config = config
        self.file_system = file_system

    def resolve_path_for_class(self, full_name: str) -> Result:
        """Open the first readable root/a/b/C.<ext> for 'a.b.C'."""
        relative = relative_path_for_class(full_name, self.config.extension)
        for root in self.config.search_path:
            candidate = os.path.join(root, relative)
            logger.debug("Trying %s", candidate)
            if self.file_system.is_readable(candidate):
                return self._open(candidate, Strategy.SEARCH_PATH, full_name)
        return Err(
            ErrorKind.CLASS_NOT_FOUND,
            f"no source file for class {full_name} on the search path",
        )

    def find_import_for_class(self, buffer: TextSource, class_name: str) -> str | None:
        """Return the name imported by 'import a.b.ClassName;', if present."""
        return find_import_for_class(buffer, class_name)

    def find_wildcard_import_for_class(
        self, buffer: TextSource, class_name: str
    ) -> Ok | None:
        """Try each 'import pkg.*;' in source order until one resolves."""
        buffer.go_to_buffer_start()
        while True:
            match = buffer.search_forward(WILDCARD_IMPORT_RE)
            if match is None:
                return None
            full_name = f"{match.group(1)}.{class_name}"
            result = self.resolve_path_for_class(full_name)
            if isinstance(result, Ok):
                return dataclasses.replace(
                    result, strategy=Strategy.WILDCARD_IMPORT, class_name=class_name
                )

    def open_class_at_cursor(self, buffer: TextSource, offset: int) -> Result:
        """Open the class whose name is under the cursor."""
        class_name = buffer.current_word_at(offset)
        if not class_name:
            return Err(ErrorKind.CLASS_NOT_FOUND, "no class name at cursor")
        return self._resolve_class_name(buffer, class_name)

    def open_base_class_of_current_buffer(self, buffer: TextSource) -> Result:
        """Open the superclass named in 'class <ThisFile> extends <Base>'."""
        if not buffer.file_path:
            return Err(
                ErrorKind.BASE_CLASS_NOT_DETERMINED, "buffer is not visiting a file"
            )
        this_class = Path(buffer.file_path).stem
        buffer.go_to_buffer_start()
        match = buffer.search_forward(extends_pattern(this_class))
        if match is None:
            return Err(
                ErrorKind.BASE_CLASS_NOT_DETERMINED,
                f"no base class found for class {this_class}",
            )
        base_name = match.group(1)
        if "." in base_name:
            # extends a.b.Base names the class directly
            return self.resolve_path_for_class(base_name)
        return self._resolve_class_name(buffer, base_name)

    def open_import_at_cursor(self, buffer: TextSource, offset: int) -> Result:
        """Open the class named by the single-type import on the cursor line."""
        line = buffer.line_at(offset)
        match = SINGLE_IMPORT_LINE_RE.match(line)
        if match is None:
            return Err(
                ErrorKind.IMPORT_NOT_PARSABLE,
                f"cannot parse import declaration: {line.strip()}",
            )
        result = self.resolve_path_for_class(match.group(1))
        if isinstance(result, Ok):
            return dataclasses.replace(result, strategy=Strategy.SINGLE_IMPORT)
        return result

    def _resolve_class_name(self, buffer: TextSource, class_name: str) -> Result:
        full_name = find_import_for_class(buffer, class_name)
        if full_name:
            result = self.resolve_path_for_class(full_name)
            if isinstance(result, Ok):
                return dataclasses.replace(
                    result, strategy=Strategy.SINGLE_IMPORT, class_name=class_name
                )
            logger.debug("Import %s not found on the search path", full_name)

        wildcard = self.find_wildcard_import_for_class(buffer, class_name)
        if wildcard is not None:
            return wildcard

        if self.config.implicit_package:
            result = self.resolve_path_for_class(
                f"{self.config.implicit_package}.{class_name}"
            )
            if isinstance(result, Ok):
                return dataclasses.replace(
                    result, strategy=Strategy.IMPLICIT_PACKAGE, class_name=class_name
                )

        sibling = self._find_in_buffer_directory(buffer, class_name)
        if sibling is not None:
            return sibling

        return Err(
            ErrorKind.CLASS_NOT_FOUND,
            f"no import declaration found for class {class_name}",
        )

    def _find_in_buffer_directory(
        self, buffer: TextSource, class_name: str
    ) -> Ok | None:
        if not buffer.file_path:
            return None
        directory = os.path.dirname(buffer.file_path)
        candidate = os.path.join(directory, f"{class_name}.{self.config.extension}")
        logger.debug("Trying %s", candidate)
        if not self.file_system.is_readable(candidate):
            return None
        absolute = self.file_system.expand_to_absolute(candidate)
        return self._open(absolute, Strategy.SAME_DIRECTORY, class_name)

    def _open(self, path: str, strategy: Strategy, class_name: str) -> Ok:
        self.file_system.open(path)
        logger.info("Opening %s for class %s", path, class_name)
        return Ok(path, strategy, class_name)
