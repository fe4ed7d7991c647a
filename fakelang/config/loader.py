# fakelang/config/loader.py
import json
from pathlib import Path
from typing import Optional

from pydantic import ValidationError
from loguru import logger

from ..services.storage import atomic_write_text
from .schema import CipherConfig
from .paths import get_user_config_file

_cached_config: Optional[CipherConfig] = None

def load_config(config_path: Optional[Path] = None) -> CipherConfig:
    """
    Loads the configuration. Without an explicit path the user config file is
    used and the result is cached for get_config().
    """
    global _cached_config
    if config_path is None and _cached_config:
        return _cached_config

    path = Path(config_path) if config_path is not None else get_user_config_file()
    loaded_data = {}

    if path.exists():
        logger.info(f"Loading configuration from: {path}")
        try:
            with open(path, 'r', encoding='utf-8') as f:
                loaded_data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.error(f"Failed to load config file {path}: {e}")
            try:
                backup_path = path.with_suffix(".json.corrupted")
                if backup_path.exists(): backup_path.unlink(missing_ok=True) # Remove old backup
                path.rename(backup_path)
                logger.info(f"Backed up corrupted config to: {backup_path}")
            except OSError as backup_err:
                logger.error(f"Failed to backup corrupted config: {backup_err}")
            loaded_data = {} # Fallback to defaults
    else:
        logger.info("Config file not found. Using default settings.")

    try:
        config = CipherConfig(**loaded_data)
        logger.info("Configuration loaded successfully.")
    except (ValidationError, TypeError) as e:
        logger.error(f"Configuration validation failed: {e}")
        logger.warning("Falling back to default configuration.")
        config = CipherConfig()

    _cached_config = config
    return config

def save_config(config: CipherConfig, config_path: Optional[Path] = None) -> Path:
    """Writes the configuration atomically. Errors propagate to the caller."""
    path = Path(config_path) if config_path is not None else get_user_config_file()
    logger.info(f"Saving configuration to: {path}")
    atomic_write_text(path, config.model_dump_json(indent=4))
    logger.info("Configuration saved successfully.")
    return path

def get_config() -> CipherConfig:
    """Returns the cached configuration object, loading if necessary."""
    if _cached_config is None:
        return load_config()
    return _cached_config

def reset_config_cache() -> None:
    global _cached_config
    _cached_config = None
