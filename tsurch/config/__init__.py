"""Configuration module for tsurch."""

from tsurch.config.loader import load_config
from tsurch.config.schema import Config

__all__ = ["Config", "load_config"]
