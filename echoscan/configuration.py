"""The configuration module."""

import tomllib
from datetime import timedelta
from pathlib import Path

from pydantic import BaseModel, Field, IPvAnyNetwork


class Configuration(BaseModel):
    """Configuration of the application."""

    project_name: str = "Echoscan"

    api_host: str = "0.0.0.0"  # noqa: S104, it is required for Docker deployment.
    api_port: int = 3000
    api_max_requests_per_interval: int = 10
    api_rate_limiter_interval: timedelta = timedelta(seconds=1)
    # Peers allowed to report the client address in forwarded headers.
    api_trusted_proxies: list[IPvAnyNetwork] = []

    max_upload_bytes: int = Field(2 * 1024 * 1024, ge=1)
    max_text_bytes: int = Field(1024 * 1024, ge=1)
    default_max_results: int = Field(20, ge=1)

    log_level: str = "INFO"


def load_configuration(
    configuration_file: Path = Path("config.toml"),
) -> Configuration:
    """
    Load configuration from the configuration file.

    Args:
        configuration_file (Path, optional): Path to a TOML file with settings.
            Defaults to `config.toml` in the working directory.

    Returns:
        Configuration: Settings from the file, or the defaults if it is missing.
    """
    if not configuration_file.exists():
        return Configuration()

    with configuration_file.open("rb") as f:
        settings = tomllib.load(f)
    return Configuration(**settings)


config = load_configuration()
