"""
CLI configuration handler
"""

import sys
from pathlib import Path

from rich.console import Console

from .config import Config
from .exceptions import ConfigurationError
from .sonarr import SonarrClient

console = Console()


def load_config_from_args(
    config_file: str | None,
    sonarr_url: str | None,
    sonarr_api_key: str | None,
    log_level: str | None,
) -> Config:
    """
    Load configuration from CLI arguments and files

    Args:
        config_file: Path to config file
        sonarr_url: Sonarr API URL from CLI (or SONARR_URL)
        sonarr_api_key: Sonarr API key from CLI (or SONARR_API_KEY)
        log_level: Log level from CLI, overrides the file when given

    Returns:
        Config object

    Raises:
        SystemExit if configuration is invalid
    """
    # Explicit CLI values win over the file and the environment
    overrides = {
        "sonarr_url": sonarr_url,
        "sonarr_api_key": sonarr_api_key,
        "log_level": log_level,
    }

    try:
        if config_file:
            cfg = Config.from_env_and_file(Path(config_file), overrides)
        elif sonarr_url and sonarr_api_key:
            cfg = Config.from_env_and_file(None, overrides)
        else:
            # Try to load from default file
            default_config = Path("config.yaml")
            if default_config.exists():
                cfg = Config.from_env_and_file(default_config, overrides)
            else:
                console.print(
                    "[red]Error:[/red] Missing configuration. Use --config or environment variables."
                )
                console.print("\nExample:")
                console.print(
                    "  sonarrctl --sonarr-url http://localhost:8989/api --sonarr-api-key YOUR_KEY status"
                )
                console.print(
                    "\nOr create a config.yaml file (see config.example.yaml)"
                )
                sys.exit(1)
    except (ValueError, TypeError, OSError) as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        sys.exit(1)

    return cfg


def build_sonarr_client(config: Config) -> SonarrClient:
    """
    Build the Sonarr client described by the configuration

    Args:
        config: Configuration object

    Returns:
        SonarrClient instance

    Raises:
        SystemExit if the URL or API key is unusable
    """
    try:
        return SonarrClient(config.sonarr_url, config.sonarr_api_key)
    except ConfigurationError as e:
        console.print(f"[red]Invalid Sonarr settings:[/red] {e}")
        console.print("\nPlease verify:")
        console.print("  - Sonarr URL is correct (with port and /api path)")
        console.print("  - API key is set (Settings > General in Sonarr)")
        sys.exit(1)


def setup_context(config: Config, sonarr_client: SonarrClient) -> dict:
    """
    Setup CLI context with config and sonarr client

    Args:
        config: Configuration object
        sonarr_client: SonarrClient instance

    Returns:
        Dictionary with context objects
    """
    return {"config": config, "sonarr": sonarr_client}
