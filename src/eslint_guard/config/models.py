# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and helpers for the eslint-guard runner."""

from __future__ import annotations

import shlex
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

DEFAULT_COMMAND: Final[str] = "eslint"
DEFAULT_PATHS: Final[tuple[str, ...]] = (".",)


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class NotificationPolicy(str, Enum):
    """Enumerate when a notification fires relative to the verdict."""

    OFF = "off"
    ON_FAILURE = "on-failure"
    ALWAYS = "always"

    @classmethod
    def from_raw(cls, raw: object) -> NotificationPolicy:
        """Return the policy matching ``raw``, accepting legacy spellings.

        Args:
            raw: Policy value, a boolean toggle, or a legacy token such as ``"failed"``.

        Returns:
            NotificationPolicy: Matching policy.

        Raises:
            ConfigError: Raised when ``raw`` is not a recognised policy.
        """

        if isinstance(raw, cls):
            return raw
        if raw is None or raw is False:
            return cls.OFF
        if raw is True:
            return cls.ALWAYS
        if isinstance(raw, str):
            token = raw.strip().lower().replace("_", "-")
            if token == "failed":
                return cls.ON_FAILURE
            try:
                return cls(token)
            except ValueError:
                pass
        choices = ", ".join(member.value for member in cls)
        raise ConfigError(f"notification must be one of {choices}; got {raw!r}")

    def should_notify(self, passed: bool) -> bool:
        if self is NotificationPolicy.ALWAYS:
            return True
        if self is NotificationPolicy.ON_FAILURE:
            return not passed
        return False


def split_cli_args(value: object) -> tuple[str, ...]:
    """Return user-specified lint arguments as a flat tuple.

    Args:
        value: A pre-split sequence of strings, a shell-syntax string, or ``None``.

    Returns:
        tuple[str, ...]: Arguments in the order the lint tool receives them.

    Raises:
        ConfigError: Raised when ``value`` has any other shape.
    """

    if value is None:
        return ()
    if isinstance(value, str):
        try:
            return tuple(shlex.split(value))
        except ValueError as exc:
            raise ConfigError(f"cli option could not be split: {exc}") from exc
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        if all(isinstance(item, str) for item in value):
            return tuple(value)
    raise ConfigError("cli option must be either a sequence of strings or a string")


class RunnerConfig(BaseModel):
    """Immutable options shared by a runner and the session driving it."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    command: str = Field(default=DEFAULT_COMMAND, min_length=1)
    cli: tuple[str, ...] = ()
    formatter: str | None = None
    notification: NotificationPolicy = NotificationPolicy.ON_FAILURE
    default_paths: tuple[str, ...] = DEFAULT_PATHS
    all_on_start: bool = True
    keep_failed: bool = True

    @field_validator("cli", mode="before")
    @classmethod
    def _split_cli(cls, value: object) -> tuple[str, ...]:
        return split_cli_args(value)

    @field_validator("notification", mode="before")
    @classmethod
    def _coerce_notification(cls, value: object) -> NotificationPolicy:
        return NotificationPolicy.from_raw(value)

    @field_validator("default_paths", mode="before")
    @classmethod
    def _coerce_default_paths(cls, value: object) -> object:
        if isinstance(value, str):
            return (value,)
        return value

    @field_validator("formatter")
    @classmethod
    def _blank_formatter_is_none(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> RunnerConfig:
        """Build a configuration from raw option data, normalising key spelling.

        Args:
            data: Mapping whose keys may use hyphens or underscores.

        Returns:
            RunnerConfig: Validated configuration.

        Raises:
            ConfigError: Raised when the data contains unknown keys or invalid values.
        """

        normalised = {str(key).replace("-", "_"): value for key, value in data.items()}
        try:
            return cls.model_validate(normalised)
        except ValidationError as exc:
            raise ConfigError(f"Invalid eslint-guard configuration: {exc}") from exc

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


__all__ = [
    "DEFAULT_COMMAND",
    "DEFAULT_PATHS",
    "ConfigError",
    "NotificationPolicy",
    "RunnerConfig",
    "split_cli_args",
]
