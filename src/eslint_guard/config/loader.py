# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Concrete configuration sources (defaults, TOML, pyproject) and layered loading."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping, MutableMapping, Sequence
from pathlib import Path
from typing import Any, Final, Protocol

from .models import ConfigError, RunnerConfig

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "eslint-guard"
CONFIG_FILENAME: Final[str] = ".eslint-guard.toml"


class ConfigSource(Protocol):
    """Protocol describing a layer of raw configuration data."""

    name: str

    def load(self) -> Mapping[str, Any]: ...

    def describe(self) -> str: ...


def _normalise_keys(data: Mapping[str, Any]) -> dict[str, Any]:
    return {str(key).replace("-", "_"): value for key, value in data.items()}


class DefaultConfigSource:
    """Return the built-in defaults as a configuration fragment."""

    name = "defaults"

    def load(self) -> Mapping[str, Any]:
        return RunnerConfig().model_dump()

    def describe(self) -> str:
        return "Built-in defaults"


class TomlConfigSource:
    """Load configuration data from a standalone TOML document."""

    def __init__(self, path: Path, *, name: str | None = None) -> None:
        self._path = path
        self.name = name or str(path)

    def _read(self) -> dict[str, Any]:
        if not self._path.is_file():
            return {}
        try:
            with self._path.open("rb") as handle:
                data = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Could not parse {self._path}: {exc}") from exc
        if not isinstance(data, MutableMapping):
            raise ConfigError(f"Configuration at {self._path} must be a table")
        return dict(data)

    def load(self) -> Mapping[str, Any]:
        return _normalise_keys(self._read())

    def describe(self) -> str:
        return f"TOML configuration at {self.name}"


class PyProjectConfigSource(TomlConfigSource):
    """Read configuration from ``[tool.eslint-guard]`` within ``pyproject.toml``."""

    def load(self) -> Mapping[str, Any]:
        data = self._read()
        tool_section = data.get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return {}
        section = tool_section.get(PYPROJECT_SECTION_KEY)
        if section is None:
            return {}
        if not isinstance(section, Mapping):
            raise ConfigError(f"[tool.{PYPROJECT_SECTION_KEY}] in {self.name} must be a table")
        return _normalise_keys(section)

    def describe(self) -> str:
        return f"pyproject.toml ({self.name})"


def default_sources(root: Path) -> list[ConfigSource]:
    """Return the configuration sources for ``root`` in increasing precedence."""

    return [
        DefaultConfigSource(),
        PyProjectConfigSource(root / PYPROJECT_FILENAME),
        TomlConfigSource(root / CONFIG_FILENAME),
    ]


def load_config(
    root: Path,
    *,
    overrides: Mapping[str, Any] | None = None,
    sources: Sequence[ConfigSource] | None = None,
) -> RunnerConfig:
    """Return the effective configuration for ``root``.

    Later sources win key by key; ``overrides`` (typically CLI flags) win over
    every file-based source. ``None`` override values are ignored so unset
    flags do not mask file settings.

    Args:
        root: Project root containing ``pyproject.toml`` and ``.eslint-guard.toml``.
        overrides: Optional final layer of option values.
        sources: Optional explicit source list replacing :func:`default_sources`.

    Returns:
        RunnerConfig: Validated configuration.

    Raises:
        ConfigError: Raised when a source cannot be read or the merged data is invalid.
    """

    merged: dict[str, Any] = {}
    for source in sources if sources is not None else default_sources(root):
        merged.update(source.load())
    if overrides:
        merged.update({key: value for key, value in _normalise_keys(overrides).items() if value is not None})
    return RunnerConfig.from_mapping(merged)


__all__ = [
    "CONFIG_FILENAME",
    "ConfigSource",
    "DefaultConfigSource",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "default_sources",
    "load_config",
]
