# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Runtime configuration for the recovery command.

Values come from environment variables so the batch tool can be tuned in
scripts and CI without touching command lines. Command line options take
precedence over everything loaded here.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path

DEFAULT_INPUTS: tuple[str, ...] = ("input1.json", "input2.json")
_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _load_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    value = value.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    return default


def _load_log_level(name: str, default: str) -> str:
    value = os.environ.get(name)
    if value is None:
        return default
    value = value.strip().upper()
    if isinstance(logging.getLevelName(value), int):
        return value
    return default


def _load_inputs(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    value = os.environ.get(name)
    if not value:
        return default
    separators = "," + re.escape(os.pathsep)
    items = tuple(item.strip() for item in re.split(f"[{separators}]", value) if item.strip())
    return items or default


def _load_path(name: str, default: Path) -> Path:
    value = os.environ.get(name)
    if value:
        return Path(value).expanduser()
    return default


@dataclass(frozen=True)
class RecoveryConfig:
    """Tunables for the batch recovery command."""

    default_inputs: tuple[str, ...] = DEFAULT_INPUTS
    log_level: str = "WARNING"
    audit_enabled: bool = False
    audit_dir: Path = Path.home() / ".shamir_recover_audit"
    verify_extra_shares: bool = False


def load_config() -> RecoveryConfig:
    """Load the configuration considering environment overrides."""

    return RecoveryConfig(
        default_inputs=_load_inputs("SHAMIR_RECOVER_INPUTS", DEFAULT_INPUTS),
        log_level=_load_log_level("SHAMIR_RECOVER_LOG_LEVEL", "WARNING"),
        audit_enabled=_load_bool("SHAMIR_RECOVER_AUDIT", False),
        audit_dir=_load_path("SHAMIR_RECOVER_AUDIT_DIR", Path.home() / ".shamir_recover_audit"),
        verify_extra_shares=_load_bool("SHAMIR_RECOVER_VERIFY", False),
    )


__all__ = ["DEFAULT_INPUTS", "RecoveryConfig", "load_config"]
