"""Configuration module."""

from zeptobot.config.loader import load_config, save_default_config
from zeptobot.config.schema import Config

__all__ = ["Config", "load_config", "save_default_config"]
