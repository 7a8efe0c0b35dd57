from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")) / "reltime"
CONFIG_PATH = CONFIG_DIR / "config.json"

DEFAULT_REFRESH_INTERVAL = 1.0
MIN_REFRESH_INTERVAL = 0.1


@dataclass
class FormatterConfig:
    abbreviate_unit: bool = False
    refresh_interval: float = DEFAULT_REFRESH_INTERVAL

    @staticmethod
    def from_dict(data: dict[str, Any]) -> FormatterConfig:
        """Create a `FormatterConfig` instance from a plain dictionary.

        Args:
            data: A mapping parsed from JSON containing optional keys
                `abbreviate_unit` (bool) and `refresh_interval` (number of seconds).

        Returns:
            A populated `FormatterConfig` object. A payload that is not an
            object, or values of the wrong type, fall back to the defaults.
        """
        if not isinstance(data, dict):
            logger.warning(f"Config is not a JSON object; using defaults: {data!r}")
            return FormatterConfig()

        abbreviate = data.get("abbreviate_unit", False)
        if not isinstance(abbreviate, bool):
            logger.warning(f"Ignoring non-boolean abbreviate_unit: {abbreviate!r}")
            abbreviate = False

        interval = data.get("refresh_interval", DEFAULT_REFRESH_INTERVAL)
        if isinstance(interval, bool) or not isinstance(interval, (int, float)):
            logger.warning(f"Ignoring non-numeric refresh_interval: {interval!r}")
            interval = DEFAULT_REFRESH_INTERVAL

        return FormatterConfig(
            abbreviate_unit=abbreviate,
            refresh_interval=max(MIN_REFRESH_INTERVAL, float(interval)),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize this configuration to a JSON-safe dictionary."""
        return {
            "abbreviate_unit": self.abbreviate_unit,
            "refresh_interval": self.refresh_interval,
        }


def ensure_config_dir() -> None:
    """Ensure the configuration directory exists.

    Raises:
        OSError: If the directory cannot be created.
    """
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)


def load_config() -> FormatterConfig:
    """Load configuration from `CONFIG_PATH`, creating a default if missing.

    Returns:
        The loaded or newly created `FormatterConfig` instance.

    Raises:
        OSError: If reading the file fails.
        json.JSONDecodeError: If the file exists but contains invalid JSON.
    """
    ensure_config_dir()
    if not CONFIG_PATH.exists():
        cfg = FormatterConfig()
        save_config(cfg)
        return cfg
    with CONFIG_PATH.open("r", encoding="utf-8") as f:
        data = json.load(f)
    return FormatterConfig.from_dict(data)


def save_config(cfg: FormatterConfig) -> None:
    """Persist configuration to `CONFIG_PATH` as JSON.

    Raises:
        OSError: If writing the file fails.
    """
    ensure_config_dir()
    with CONFIG_PATH.open("w", encoding="utf-8") as f:
        json.dump(cfg.to_dict(), f, indent=2)
