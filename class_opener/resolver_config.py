"""Immutable settings injected into the class resolver."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from class_opener.search_path import merge_search_path, split_path_list


@dataclass(frozen=True)
class ResolverConfig:
    """Search roots plus the language conventions used to build file names."""

    search_path: tuple[str, ...] = ()
    extension: str = "java"
    implicit_package: str | None = "java.lang"  # e.g. java.lang.String

    @classmethod
    def from_config(
        cls,
        config: dict[str, Any],
        *,
        cli_roots: Iterable[str] = (),
        env_value: str | None = None,
    ) -> "ResolverConfig":
        """Build from a loaded config dict.

        Roots given on the command line come first, then the environment
        variable, then the configuration file.
        """
        language = config.get("language", {})
        config_roots = config.get("search_path") or []
        if isinstance(config_roots, str):
            config_roots = [config_roots]
        search_path = merge_search_path(
            cli_roots,
            split_path_list(env_value),
            config_roots,
        )
        return cls(
            search_path=search_path,
            extension=str(language.get("extension", "java")).lstrip("."),
            implicit_package=language.get("implicit_package") or None,
        )
