# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Public configuration API for eslint-guard."""

from __future__ import annotations

from .loader import CONFIG_FILENAME, load_config
from .models import ConfigError, NotificationPolicy, RunnerConfig, split_cli_args

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "NotificationPolicy",
    "RunnerConfig",
    "load_config",
    "split_cli_args",
]
