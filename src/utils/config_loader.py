"""
Configuration loader for the analysis API client
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000"

# env var -> config field
_ENV_OVERRIDES = {
    "API_JSON_TIMEOUT_SECONDS": "json_timeout_seconds",
    "API_FORM_TIMEOUT_SECONDS": "form_timeout_seconds",
}


class ApiClientConfig(BaseModel):
    """Process-wide settings for talking to the analysis backend"""

    base_url: str = DEFAULT_BASE_URL
    json_timeout_seconds: float = Field(default=10.0, gt=0)
    form_timeout_seconds: float = Field(default=30.0, gt=0)
    validate_responses: bool = True

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        return value or DEFAULT_BASE_URL


def load_api_config(config_path: Optional[Path] = None) -> ApiClientConfig:
    """
    Load API client configuration from YAML (if present) and the environment

    Args:
        config_path: Path to config file. Defaults to config/api_config.yml

    Returns:
        Validated ApiClientConfig object

    Raises:
        FileNotFoundError: If an explicit config_path doesn't exist
        ValidationError: If values don't match schema
    """
    load_dotenv()

    data: Dict[str, Any] = {}
    if config_path is None:
        default_path = Path(__file__).parent.parent.parent / "config" / "api_config.yml"
        if default_path.exists():
            config_path = default_path
    elif not config_path.exists():
        raise FileNotFoundError(f"API config file not found: {config_path}")

    if config_path is not None:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

    base_url = os.getenv("API_BASE_URL") or os.getenv("VITE_API_BASE_URL")
    if base_url:
        data["base_url"] = base_url
    for env_name, field_name in _ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            data[field_name] = value

    try:
        cfg = ApiClientConfig(**data)
        logger.info("Loaded API config: base_url=%s", cfg.base_url)
        return cfg
    except ValidationError as e:
        logger.error("API config validation failed: %s", e)
        raise


@lru_cache(maxsize=1)
def get_api_config() -> ApiClientConfig:
    """Resolve the configuration once per process."""
    return load_api_config()
