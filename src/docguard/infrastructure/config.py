"""Settings loading for DocGuard."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import jsonschema

from docguard.domain.exceptions import ConfigurationError
from docguard.schemas import validate_config

logger = logging.getLogger("docguard.config")

DEFAULT_CONFIG_FILE = "docguard.json"


@dataclass(frozen=True)
class DocGuardSettings:
    """Effective settings for one run."""

    docs_dir: str = "./docs"
    extensions: tuple[str, ...] = (".md", ".mdx")
    section_prefix: str = "chapter"
    intro_file: str = "intro.md"
    min_sections: int = 3
    min_section_entries: int = 2
    diagram_tags: tuple[str, ...] = ("mermaid",)
    principles: tuple[str, ...] = ()  # Empty runs every principle

    def with_overrides(self, **overrides: Any) -> DocGuardSettings:
        """Return a copy with every non-None, non-empty override applied."""
        changes = {k: v for k, v in overrides.items() if v not in (None, ())}
        return replace(self, **changes)


def _settings_from_dict(data: dict[str, Any]) -> DocGuardSettings:
    # Lists in JSON become tuples so settings stay hashable and immutable
    values = {k: tuple(v) if isinstance(v, list) else v for k, v in data.items()}
    return DocGuardSettings(**values)


def load_settings(path: Path) -> DocGuardSettings:
    """
    Load settings from a JSON file.

    Args:
        path: Path to the settings file

    Returns:
        DocGuardSettings with file values over the defaults

    Raises:
        ConfigurationError: If the file is missing, not JSON, or violates the schema
    """
    if not path.exists():
        raise ConfigurationError(f"Settings file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigurationError(f"Settings file is not UTF-8: {path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Could not read settings file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected object in {path}, got {type(data).__name__}")

    try:
        validate_config(data)
    except jsonschema.ValidationError as e:
        location = "/".join(str(p) for p in e.absolute_path) or "(root)"
        raise ConfigurationError(f"Invalid settings in {path} at {location}: {e.message}") from e

    logger.debug("Loaded settings from %s", path)
    return _settings_from_dict(data)


def resolve_settings(config_path: Path | None, cwd: Path | None = None) -> DocGuardSettings:
    """
    Find and load the settings for a run.

    An explicit path must exist. Without one, ``docguard.json`` in the
    working directory is used if present, else the defaults.
    """
    if config_path is not None:
        return load_settings(config_path)

    candidate = (cwd or Path.cwd()) / DEFAULT_CONFIG_FILE
    if candidate.is_file():
        return load_settings(candidate)

    logger.debug("No %s found, using defaults", DEFAULT_CONFIG_FILE)
    return DocGuardSettings()
