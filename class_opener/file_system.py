"""Filesystem access used while resolving and opening source files."""

import logging
import os
import shlex
import subprocess
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class FileSystem(Protocol):
    """Protocol for the filesystem operations the resolver needs."""

    def is_readable(self, path: str) -> bool:
        """Return True if *path* is a readable regular file."""
        ...

    def open(self, path: str) -> None:
        """Make *path* the active document."""
        ...

    def expand_to_absolute(self, path: str) -> str:
        """Return the absolute form of *path*."""
        ...


class LocalFileSystem:
    """Local disk, optionally handing opened files to an editor command."""

    def __init__(self, editor: str | None = None) -> None:
        """Initialize with an editor command line such as 'code -g'."""
        self.editor_argv = shlex.split(editor) if editor else []
        self.opened: list[str] = []

    def is_readable(self, path: str) -> bool:
        return os.path.isfile(path) and os.access(path, os.R_OK)

    def open(self, path: str) -> None:
        self.opened.append(path)
        if not self.editor_argv:
            return
        cmd = [*self.editor_argv, path]
        logger.debug("Running: %s", " ".join(cmd))
        subprocess.run(cmd, check=True)

    def expand_to_absolute(self, path: str) -> str:
        return str(Path(path).expanduser().absolute())
