"""Configuration loading from ``[tool.die]`` in pyproject.toml."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

PYPROJECT = "pyproject.toml"


class ConfigError(ValueError):
    """Raised when configuration is invalid."""


@dataclass(frozen=True)
class DieConfig:
    """Harness settings.

    Attributes
    ----------
    verbosity
        0 prints only the summary; 1 and above also print a line per test.
    capture_output
        Capture stdout/stderr written by test bodies.
    show_output
        When capturing, also pass output through to the real streams.
    color
        Allow ANSI colors in console output.
    """

    verbosity: int = 0
    capture_output: bool = True
    show_output: bool = False
    color: bool = True


DEFAULT_CONFIG = DieConfig()


def find_pyproject(start: Path | None = None) -> Path | None:
    """Return the nearest pyproject.toml at or above ``start``."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / PYPROJECT
        if candidate.is_file():
            return candidate
    return None


def _parse(section: dict[str, Any], source: Path) -> DieConfig:
    known = {f.name: f for f in fields(DieConfig)}
    unknown = sorted(set(section) - set(known))
    if unknown:
        msg = f"{source}: unknown [tool.die] keys: {', '.join(unknown)}"
        raise ConfigError(msg)

    values: dict[str, Any] = {}
    for key, value in section.items():
        expected = type(getattr(DEFAULT_CONFIG, key))
        # bool is an int subclass; reject it for integer settings
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            msg = f"{source}: [tool.die] {key} must be {expected.__name__}, got {type(value).__name__}"
            raise ConfigError(msg)
        values[key] = value

    if values.get("verbosity", 0) < 0:
        msg = f"{source}: [tool.die] verbosity must be >= 0"
        raise ConfigError(msg)
    return DieConfig(**values)


def load_config(start: Path | None = None) -> DieConfig:
    """Load configuration from the nearest pyproject.toml.

    Returns the defaults when no file or no ``[tool.die]`` table exists.

    Raises:
        ConfigError: If the file cannot be parsed or the table is invalid.
    """
    path = find_pyproject(start)
    if path is None:
        return DEFAULT_CONFIG

    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        msg = f"{path}: invalid TOML: {exc}"
        raise ConfigError(msg) from exc

    section = data.get("tool", {}).get("die")
    if section is None:
        return DEFAULT_CONFIG
    if not isinstance(section, dict):
        msg = f"{path}: [tool.die] must be a table"
        raise ConfigError(msg)

    config = _parse(section, path)
    logger.debug("Loaded config from %s: %s", path, config)
    return config
