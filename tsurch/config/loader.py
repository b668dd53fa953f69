"""Configuration loading utilities."""

import os
from collections.abc import Mapping

from loguru import logger
from pydantic import ValidationError

from tsurch.config.schema import Config


def config_env_keys() -> list[str]:
    """Environment variables read by ``load_config``."""
    return [field.alias for field in Config.model_fields.values() if field.alias]


def load_config(environ: Mapping[str, str] | None = None) -> Config:
    """
    Load configuration from the environment.

    Args:
        environ: Mapping to read from. Uses ``os.environ`` if not provided.

    Returns:
        Loaded configuration, or the defaults if validation fails.
    """
    env = os.environ if environ is None else environ
    data = {key: env[key] for key in config_env_keys() if key in env}

    try:
        return Config.model_validate(data)
    except ValidationError as e:
        logger.warning("Failed to load config from environment: {}", e)
        logger.warning("Using default configuration.")

    return Config()
