"""Configuration models using Pydantic."""

import os
from pathlib import Path
from typing import Any, Callable, Optional
from pydantic import BaseModel, Field

from .tables import EstimationTables


class ConfigError(ValueError):
    """An environment variable holds a value of the wrong type."""


def _env_number(name: str, cast: Callable[[str], Any]) -> Optional[Any]:
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        return cast(raw)
    except ValueError as e:
        raise ConfigError(f"Invalid {name}: expected {cast.__name__}, got {raw!r}") from e


class AttomApiConfig(BaseModel):
    """Connection settings for the ATTOM property API."""

    api_key: str = Field(default="", description="ATTOM API key sent in the apikey header")
    base_url: str = Field(default="https://api.gateway.attomdata.com", description="API gateway base URL")
    timeout: float = Field(default=10.0, description="Request timeout in seconds")
    max_retries: int = Field(default=3, description="Retries for connection errors and 5xx responses")
    backoff_factor: float = Field(default=0.5, description="Exponential backoff factor between retries")

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)


class Config(BaseModel):
    """Main configuration for the appeal estimator."""

    output_dir: Path = Field(default_factory=lambda: Path.cwd() / "output")
    output_format: str = Field(default="parquet", description="Output format (parquet, csv, json)")
    log_level: str = Field(default="INFO", description="Logging level for the CLI")

    attom: AttomApiConfig = Field(default_factory=AttomApiConfig)

    # Estimation constants
    estimation: EstimationTables = Field(default_factory=EstimationTables)

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        from dotenv import load_dotenv

        load_dotenv()

        config_dict = {}

        if output_dir := os.getenv("OUTPUT_DIR"):
            config_dict["output_dir"] = Path(output_dir).expanduser()

        if output_format := os.getenv("OUTPUT_FORMAT"):
            config_dict["output_format"] = output_format.lower()

        if log_level := os.getenv("LOG_LEVEL"):
            config_dict["log_level"] = log_level.upper()

        # API settings; the VITE_ names are what the web front end uses
        attom_dict = {}
        if api_key := os.getenv("ATTOM_API_KEY") or os.getenv("VITE_ATTOM_API_KEY"):
            attom_dict["api_key"] = api_key
        if base_url := os.getenv("ATTOM_BASE_URL") or os.getenv("VITE_API_BASE_URL"):
            attom_dict["base_url"] = base_url.rstrip("/")
        if (timeout := _env_number("ATTOM_TIMEOUT", float)) is not None:
            attom_dict["timeout"] = timeout
        if (max_retries := _env_number("ATTOM_MAX_RETRIES", int)) is not None:
            attom_dict["max_retries"] = max_retries

        if attom_dict:
            config_dict["attom"] = AttomApiConfig(**attom_dict)

        return cls(**config_dict)
