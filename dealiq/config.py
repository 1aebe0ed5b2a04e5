"""Configuration management for DealIQ."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict

from dealiq.models import BuyingCriteria, RentalAssumptions

CONFIG_DIR = Path(__file__).parent.parent / "config"


class AppConfig(BaseSettings):
    """Saved rental assumptions and buying criteria.

    Environment variables such as ``DEALIQ_RENTAL__INTEREST_RATE`` fill in
    anything the TOML files leave unset.
    """

    model_config = SettingsConfigDict(env_prefix="DEALIQ_", env_nested_delimiter="__")

    rental: RentalAssumptions = RentalAssumptions()
    buying_criteria: BuyingCriteria = BuyingCriteria()


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load saved rental assumptions and buying criteria from TOML files.

    Loads default.toml first, then merges local.toml or a custom path on top,
    key by key within the [rental] and [buying_criteria] sections, so a local
    file only needs the values it changes.
    """
    default_path = CONFIG_DIR / "default.toml"
    data: dict[str, Any] = {}

    if default_path.exists():
        with open(default_path, "rb") as f:
            data = tomllib.load(f)

    local_path = config_path or CONFIG_DIR / "local.toml"
    if local_path.exists():
        with open(local_path, "rb") as f:
            overrides = tomllib.load(f)
        data = _deep_merge(data, overrides)

    return AppConfig(**data)
