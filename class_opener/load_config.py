"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from class_opener.deep_merge import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = ".class-opener.yml"

DEFAULT_CONFIG: dict[str, Any] = {
    "search_path": [],
    "language": {
        "extension": "java",
        "implicit_package": "java.lang",
    },
    "editor": {
        "command": None,
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                msg = f"Configuration file {p} must contain a mapping"
                raise ValueError(msg)
            logger.debug("Loaded configuration from %s", p)
            config = deep_merge(config, user_config)
    return _check_sections(config, path)


def _check_sections(config: dict[str, Any], source: str | None) -> dict[str, Any]:
    """Normalize scalar shorthands and reject sections of the wrong type."""
    search_path = config.get("search_path") or []
    if isinstance(search_path, str):
        # "search_path: src/main/java" names a single root
        search_path = [search_path]
    if not isinstance(search_path, list) or not all(
        isinstance(root, str) for root in search_path
    ):
        msg = f"{source}: search_path must be a directory or a list of directories"
        raise ValueError(msg)
    config["search_path"] = search_path

    if not isinstance(config.get("language"), dict):
        msg = f"{source}: language must be a mapping"
        raise ValueError(msg)

    editor = config.get("editor")
    if editor is not None and not isinstance(editor, (dict, str)):
        msg = f"{source}: editor must be a command string or a mapping with command"
        raise ValueError(msg)
    return config
