"""Configuration management for the DNS-over-HTTPS client."""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .. import constants
from ..exceptions import ConfigError
from ..utils.logger import get_logger

logger = get_logger(__name__)


class ClientConfig(BaseModel):
    """Transport settings shared by every query of one client.

    Instances are frozen: a client builds its HTTP connection pool from
    this once and never changes it afterwards.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: str = Field(default=constants.BASE_URL, min_length=1, description="DNS JSON endpoint")
    user_agent: str = Field(default=constants.USER_AGENT, min_length=1, description="User-Agent header value")
    accept: str = Field(default=constants.CONTENT_TYPE, min_length=1, description="Accept header value")
    http2: bool = Field(default=constants.PREFER_HTTP2, description="Whether to prefer HTTP/2")
    timeout: Optional[float] = Field(
        default=constants.DEFAULT_TIMEOUT,
        gt=0.0,
        le=300.0,
        description="Transport timeout in seconds, None to wait forever",
    )
    verify: bool = Field(default=True, description="Whether to verify TLS certificates")
    preview_max_length: int = Field(
        default=constants.PREVIEW_MAX_LENGTH,
        ge=0,
        description="Characters of a malformed body quoted in decode errors",
    )

    @field_validator('base_url')
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an absolute http(s) URL without a query string."""
        if not v.startswith(("https://", "http://")):
            raise ValueError(f"Resolver URL must be http(s): {v}")
        if "?" in v:
            raise ValueError(f"Resolver URL must not carry a query string: {v}")
        return v

    @property
    def headers(self) -> Dict[str, str]:
        return {"User-Agent": self.user_agent, "Accept": self.accept}

    @classmethod
    def from_file(cls, config_path: str) -> 'ClientConfig':
        """Load client configuration from YAML file."""
        logger.info(f"Loading client configuration from: {config_path}")
        config_path = Path(config_path)

        if not config_path.exists():
            logger.error(f"Client configuration file not found: {config_path}")
            raise FileNotFoundError(f"Client configuration file not found: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"YAML parsing error: {e}")
            raise ConfigError(f"Invalid YAML format in {config_path}: {e}") from e

        logger.debug(f"Loaded raw client configuration data: {data}")
        return cls.from_dict(data if data is not None else {})

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ClientConfig':
        """Create client configuration from dictionary with validation."""
        if not isinstance(data, dict):
            raise ConfigError("Client configuration data must be a dictionary")

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            logger.error(f"Client configuration validation failed: {e}")
            raise ConfigError(f"Client configuration validation failed: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()

    def save_to_file(self, config_path: str) -> None:
        """Save client configuration to YAML file."""
        logger.info(f"Saving client configuration to: {config_path}")
        config_path = Path(config_path)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, indent=2, sort_keys=False)

        logger.info(f"Client configuration saved successfully to: {config_path}")


def load_config(config_path: Optional[str] = None) -> ClientConfig:
    """Load client configuration from file or fall back to the defaults."""
    if config_path is None:
        # Look for a config in common locations
        possible_paths = [Path(path).expanduser() for path in [
            "~/.dnsoverhttps.yaml",
            "~/.dnsoverhttps.yml",
            "/usr/local/etc/dnsoverhttps.yaml",
        ]]

        for path in possible_paths:
            if path.exists():
                config_path = path
                break

    if config_path is None:
        logger.debug("No client configuration file found, using defaults")
        return ClientConfig()

    return ClientConfig.from_file(config_path)
