"""Command-line front end standing in for the editor's bound commands."""

import argparse
import logging
import os
import subprocess
from pathlib import Path
from typing import Any

import yaml

from class_opener.class_resolver import ClassResolver
from class_opener.file_system import LocalFileSystem
from class_opener.format_result import format_result
from class_opener.load_config import DEFAULT_CONFIG_FILE, load_config
from class_opener.parse_offset import parse_offset
from class_opener.resolver_config import ResolverConfig
from class_opener.result import Err, Result
from class_opener.search_path import SEARCH_PATH_ENV
from class_opener.string_buffer import StringBuffer


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with one subcommand per open command."""
    parser = argparse.ArgumentParser(
        prog="class-opener",
        description="Open the source file of a class referenced in a Java file.",
    )
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG_FILE,
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_FILE})",
    )
    parser.add_argument(
        "-s",
        "--search-path",
        action="append",
        default=[],
        metavar="DIR",
        help="Source root to search; repeat to add more, earlier wins",
    )
    parser.add_argument(
        "--editor",
        default=None,
        help="Command used to open the resolved file, e.g. 'code -g'",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) output",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    at_point = sub.add_parser("at-point", help="Open the class named under the cursor")
    at_point.add_argument("file", type=Path, help="Java file being edited")
    at_point.add_argument("position", help="Cursor as OFFSET or LINE:COLUMN")

    base = sub.add_parser("base-class", help="Open the superclass of the file's class")
    base.add_argument("file", type=Path, help="Java file being edited")

    import_at = sub.add_parser(
        "import-at-point", help="Open the class named by the import on the cursor line"
    )
    import_at.add_argument("file", type=Path, help="Java file being edited")
    import_at.add_argument("position", help="Cursor as OFFSET or LINE:COLUMN")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one open command and print its status line."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(message)s")
    if args.verbose:
        logging.getLogger("class_opener").setLevel(logging.DEBUG)

    try:
        config = load_config(args.config)
    except (OSError, ValueError, yaml.YAMLError) as e:
        msg = f"Error loading configuration: {e}"
        raise SystemExit(msg) from e

    resolver_config = ResolverConfig.from_config(
        config,
        cli_roots=args.search_path,
        env_value=os.environ.get(SEARCH_PATH_ENV),
    )
    file_system = LocalFileSystem(args.editor or _editor_command(config))
    resolver = ClassResolver(resolver_config, file_system)

    try:
        buffer = StringBuffer.from_file(args.file)
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Cannot read {args.file}: {e}"
        raise SystemExit(msg) from e

    try:
        result = _run_command(args, resolver, buffer)
    except (OSError, subprocess.CalledProcessError) as e:
        msg = f"Error launching editor: {e}"
        raise SystemExit(msg) from e

    message = format_result(result)
    if isinstance(result, Err):
        raise SystemExit(message)
    print(message)
    return 0


def _run_command(
    args: argparse.Namespace, resolver: ClassResolver, buffer: StringBuffer
) -> Result:
    if args.command == "base-class":
        return resolver.open_base_class_of_current_buffer(buffer)

    try:
        offset = parse_offset(buffer.text, args.position)
    except ValueError as e:
        msg = f"Invalid cursor position {args.position!r}: {e}"
        raise SystemExit(msg) from e

    if args.command == "import-at-point":
        return resolver.open_import_at_cursor(buffer, offset)
    return resolver.open_class_at_cursor(buffer, offset)


def _editor_command(config: dict[str, Any]) -> str | None:
    editor = config.get("editor")
    # Accept both "editor: code -g" and "editor: {command: code -g}"
    command = editor.get("command") if isinstance(editor, dict) else editor
    return str(command) if command else None
