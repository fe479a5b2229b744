"""Configuration for the fonts-loaded class transform."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CLASS_NAME = "wf-loaded"


class ConfigError(ValueError):
    """Raised when transform options are malformed."""


@dataclass(frozen=True)
class FontsLoadedConfig:
    """Options for gating web-font declarations behind a marker class.

    Attributes:
        families: Family names treated as web fonts. A declaration matches
            when one of its comma-separated tokens contains a family name.
        class_name: Marker class set on the document once fonts have loaded.
    """

    families: tuple[str, ...] = ()
    class_name: str = DEFAULT_CLASS_NAME

    @classmethod
    def from_options(cls, options: Mapping[str, object] | None) -> FontsLoadedConfig:
        """Build a config from a ``{"families": [...], "className": "..."}`` mapping.

        Missing keys fall back to defaults and unknown keys are ignored.
        """
        options = options or {}
        if not isinstance(options, Mapping):
            raise ConfigError(f"Options must be a mapping, got {type(options).__name__}")

        raw_families = options.get("families") or ()
        if isinstance(raw_families, str):
            raw_families = (raw_families,)
        if not isinstance(raw_families, (list, tuple)):
            raise ConfigError(
                f"families must be a list of strings, got {type(raw_families).__name__}"
            )
        families: list[str] = []
        for family in raw_families:
            if not isinstance(family, str):
                raise ConfigError(f"Font family names must be strings, got {family!r}")
            families.append(family)

        class_name = options.get("className") or options.get("class_name")
        if class_name and not isinstance(class_name, str):
            raise ConfigError(f"className must be a string, got {class_name!r}")

        return cls(
            families=tuple(families),
            class_name=class_name or DEFAULT_CLASS_NAME,  # type: ignore[arg-type]
        )

    def merged(
        self, families: tuple[str, ...] = (), class_name: str | None = None
    ) -> FontsLoadedConfig:
        """Return a copy with extra *families* appended and *class_name* overridden."""
        return FontsLoadedConfig(
            families=self.families + tuple(f for f in families if f not in self.families),
            class_name=class_name or self.class_name,
        )


def load_config(path: str | Path) -> FontsLoadedConfig:
    """Read a JSON options object from *path*."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise ConfigError(f"{path}: not valid UTF-8: {e.reason}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"{path}: invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a JSON object")
    return FontsLoadedConfig.from_options(data)
