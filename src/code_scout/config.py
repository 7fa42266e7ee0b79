"""Configuration loading and management for Code Scout.

Configuration sources are merged in priority order:
    1. Defaults (defined in ScanConfig)
    2. Global config (~/.code-scout.toml)
    3. Project config (./code-scout.toml)
    4. Explicit config file
    5. Environment variables (CODE_SCOUT_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(verbose=True, max_scan_lines=200)
    >>> config.verbosity
    'verbose'
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigFileError, ConfigurationError, InvalidConfigError
from .scanning.functions import MAX_SCAN_LINES
from .scanning.resolver import RESOLVE_EXTENSIONS

Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "CODE_SCOUT_"
GLOBAL_CONFIG_NAME = ".code-scout.toml"
PROJECT_CONFIG_NAME = "code-scout.toml"


@dataclass(frozen=True)
class ScanConfig:
    """Settings for scanning.

    Attributes:
        exclude_patterns: Extra ignore tokens added to the default list
            (plain tokens match as substrings, ``*.ext`` by extension)
        max_file_size_mb: Files larger than this are skipped by directory scans
        max_scan_lines: Runaway cap for the brace boundary scan
        include_comments: Keep comments when printing or counting tokens
        resolve_extensions: Extensions tried by the import resolver, in order
        verbosity: Logging verbosity level
    """

    exclude_patterns: list[str] = field(default_factory=list)
    max_file_size_mb: float = 10.0
    max_scan_lines: int = MAX_SCAN_LINES
    include_comments: bool = True
    resolve_extensions: list[str] = field(default_factory=lambda: list(RESOLVE_EXTENSIONS))
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        if isinstance(self.max_scan_lines, bool) or not isinstance(self.max_scan_lines, int):
            raise InvalidConfigError("max_scan_lines", self.max_scan_lines, "must be an integer")
        if isinstance(self.max_file_size_mb, bool) or not isinstance(
            self.max_file_size_mb, (int, float)
        ):
            raise InvalidConfigError("max_file_size_mb", self.max_file_size_mb, "must be a number")
        for name in ("exclude_patterns", "resolve_extensions"):
            value = getattr(self, name)
            if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
                raise InvalidConfigError(name, value, "must be a list of strings")
        if not isinstance(self.include_comments, bool):
            raise InvalidConfigError("include_comments", self.include_comments, "must be true or false")
        if self.max_file_size_mb <= 0:
            raise InvalidConfigError("max_file_size_mb", self.max_file_size_mb, "must be positive")
        if self.max_scan_lines < 1:
            raise InvalidConfigError("max_scan_lines", self.max_scan_lines, "must be at least 1")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "must be one of quiet, normal, verbose"
            )
        if not self.resolve_extensions:
            raise InvalidConfigError("resolve_extensions", self.resolve_extensions, "must not be empty")
        for ext in self.resolve_extensions:
            if not ext or ext.startswith("."):
                raise InvalidConfigError(
                    "resolve_extensions", ext, "extensions are given without a leading dot"
                )

    @property
    def max_file_size_bytes(self) -> int:
        return int(self.max_file_size_mb * 1024 * 1024)


def load_config(config_file: Optional[Path] = None, **overrides) -> ScanConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags); ``verbose``
            and ``quiet`` booleans are folded into ``verbosity``, and
            ``None`` values are ignored

    Returns:
        Validated ScanConfig instance

    Raises:
        ConfigFileError: If a config file is missing or not valid TOML
        ConfigurationError: If a source sets an unknown key
        InvalidConfigError: If a value is malformed or out of range
    """
    layers: list[tuple[str, dict[str, Any]]] = []

    for candidate in (Path.home() / GLOBAL_CONFIG_NAME, Path.cwd() / PROJECT_CONFIG_NAME):
        if candidate.is_file():
            layers.append((str(candidate), _load_toml_file(candidate)))

    if config_file is not None:
        if not config_file.is_file():
            raise ConfigFileError(config_file, "file not found")
        layers.append((str(config_file), _load_toml_file(config_file)))

    layers.extend(_load_env_vars())

    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"
    layers.append(("overrides", {k: v for k, v in overrides.items() if v is not None}))

    known = set(ScanConfig.__dataclass_fields__)
    merged: dict[str, Any] = {}
    for source, values in layers:
        unknown = sorted(set(values) - known)
        if unknown:
            raise ConfigurationError(f"Unknown setting(s): {', '.join(unknown)}", source=source)
        merged.update(values)

    return ScanConfig(**merged)


def _load_env_vars() -> list[tuple[str, dict[str, Any]]]:
    """Load CODE_SCOUT_* environment variables, one layer per variable.

    List fields take comma-separated values, e.g.
    ``CODE_SCOUT_EXCLUDE_PATTERNS=vendor,*.min.js``.
    """
    type_hints = get_type_hints(ScanConfig)
    layers = []

    for field_name in ScanConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        try:
            value = _parse_env_value(env_value, type_hints[field_name])
        except ValueError as e:
            raise InvalidConfigError(field_name, env_value, str(e), source=env_key) from e
        layers.append((env_key, {field_name: value}))

    return layers


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Convert an environment string to the field's declared type."""
    if getattr(type_hint, "__origin__", None) is list:
        return [item.strip() for item in value.split(",") if item.strip()]

    if type_hint is bool:
        lowered = value.strip().lower()
        if lowered in ("true", "1", "yes", "on"):
            return True
        if lowered in ("false", "0", "no", "off"):
            return False
        raise ValueError(f"expected a boolean, got {value!r}")

    if type_hint in (int, float):
        return type_hint(value)

    return value


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Read one TOML file; settings may sit under an optional [code-scout] table."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except OSError as e:
        raise ConfigFileError(path, e.strerror or str(e)) from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigFileError(path, str(e)) from e
    return data.get("code-scout", data)
