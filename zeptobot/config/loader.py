"""Configuration loader for zeptobot."""

import json
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from zeptobot.config.schema import Config

DEFAULT_CONFIG_DIR = Path.home() / ".zeptobot"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.json"


def load_config(config_path: Path | None = None) -> Config:
    """
    Load configuration from file and environment variables.

    Priority: init values from the config file > environment variables > defaults.

    Args:
        config_path: Optional path to config file. Defaults to ~/.zeptobot/config.json.

    Returns:
        Loaded configuration.
    """
    path = config_path or DEFAULT_CONFIG_FILE

    if not path.exists():
        logger.debug(f"No config at {path}, using environment and defaults")
        return Config()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Cannot read config {path}: {e}, using defaults")
        return Config()
    except json.JSONDecodeError as e:
        logger.warning(f"Config {path} is not valid JSON (line {e.lineno}, column {e.colno}), using defaults")
        return Config()

    if not isinstance(data, dict):
        logger.warning(f"Config {path} must hold a JSON object, got {type(data).__name__}, using defaults")
        return Config()

    try:
        config = Config(**data)
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        logger.warning(f"Config {path} has invalid values for: {fields}, using defaults")
        return Config()

    logger.debug(f"Config loaded from {path}")
    return config


def save_default_config(config_path: Path | None = None) -> Path:
    """
    Save default configuration to file.

    Args:
        config_path: Optional path to save config. Defaults to ~/.zeptobot/config.json.

    Returns:
        Path where config was saved.
    """
    path = config_path or DEFAULT_CONFIG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)

    config = Config()
    data = config.model_dump(mode="json")
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")

    logger.info(f"Default config saved to {path}")
    return path
