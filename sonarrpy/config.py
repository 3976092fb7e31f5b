"""
Configuration management for the command line tool
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

WATCH_UNITS = ["seconds", "minutes", "hours"]


@dataclass
class Config:
    """Application configuration"""

    sonarr_url: str
    sonarr_api_key: str
    log_level: str = "INFO"
    # Queue watch options
    watch_interval: int = 30
    watch_unit: str = "seconds"

    @classmethod
    def from_file(cls, config_path: Path) -> "Config":
        """Load configuration from a YAML file"""
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)

    @classmethod
    def from_env_and_file(
        cls, config_path: Path | None = None, overrides: dict[str, Any] | None = None
    ) -> "Config":
        """Load configuration from file and/or environment variables

        Non-empty ``overrides`` (command line values) win over both.
        """
        config_data: dict[str, Any] = {}

        # Load from file if specified
        if config_path and config_path.exists():
            with open(config_path, "r", encoding="utf-8") as f:
                config_data = yaml.safe_load(f) or {}

        # Environment variables take priority
        if os.getenv("SONARR_URL"):
            config_data["sonarr_url"] = os.getenv("SONARR_URL")
        if os.getenv("SONARR_API_KEY"):
            config_data["sonarr_api_key"] = os.getenv("SONARR_API_KEY")
        if os.getenv("LOG_LEVEL"):
            config_data["log_level"] = os.getenv("LOG_LEVEL")

        for key, value in (overrides or {}).items():
            if value:
                config_data[key] = value

        if not config_data.get("sonarr_url") or not config_data.get("sonarr_api_key"):
            raise ValueError(
                "Incomplete configuration. Sonarr URL and API Key are required. "
                "Use a config file or environment variables."
            )

        config = cls(**config_data)
        config.validate()
        return config

    def validate(self):
        """Check option values that YAML cannot type for us"""
        if self.watch_unit not in WATCH_UNITS:
            raise ValueError(
                f"Invalid watch_unit: {self.watch_unit} "
                f"(valid units: {', '.join(WATCH_UNITS)})"
            )
        try:
            self.watch_interval = int(self.watch_interval)
        except (TypeError, ValueError):
            raise ValueError(
                f"watch_interval must be an integer, got {self.watch_interval!r}"
            ) from None
        if self.watch_interval <= 0:
            raise ValueError("watch_interval must be a positive integer")

    def to_file(self, config_path: Path):
        """Save configuration to a YAML file"""
        data = {
            "sonarr_url": self.sonarr_url,
            "sonarr_api_key": self.sonarr_api_key,
            "log_level": self.log_level,
            "watch_interval": self.watch_interval,
            "watch_unit": self.watch_unit,
        }

        with open(config_path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True)
