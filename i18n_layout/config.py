import copy
import json
from pathlib import Path
from typing import Dict, Any

from i18n_layout.logger import get_logger, refresh_loggers

logger = get_logger(__name__)

# Localization file formats the engine understands
DEFAULT_SOURCE_EXTENSIONS = [".json", ".arb"]

LOG_MODES = ("off", "info", "debug")

# Get base directory (project root)
BASE_DIR = Path(__file__).parent.parent
CONFIG_DIR = BASE_DIR / "config"
CONFIG_FILE = CONFIG_DIR / "config.json"

# Default configuration template
DEFAULT_CONFIG = {
    "log_mode": "off",
    "source_extensions": DEFAULT_SOURCE_EXTENSIONS,
    "web": {
        "host": "127.0.0.1",
        "port": 5500,
        "debug": False
    }
}


def ensure_config_directory():
    """Ensure the config directory exists."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    logger.debug(f"Config directory ensured: {CONFIG_DIR}")


def create_default_config():
    """Create the default config.json file."""
    ensure_config_directory()
    with open(CONFIG_FILE, 'w', encoding='utf-8') as f:
        json.dump(DEFAULT_CONFIG, f, indent=4, ensure_ascii=False)
    logger.info(f"Created default config file: {CONFIG_FILE}")


def initialize_app():
    """
    Initialize the application.
    Creates the default configuration on first run and re-applies the
    configured log mode to every logger created so far.
    """
    if not CONFIG_FILE.exists():
        logger.info("No config file found, creating default config")
        try:
            create_default_config()
        except OSError as e:
            logger.error(f"Failed to create default config: {e}")
            logger.warning("Application will use in-memory default configuration")

    refresh_loggers()
    logger.info("Application initialization complete")


def _merge(defaults: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(defaults)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config() -> Dict[str, Any]:
    """Load the configuration file merged over the defaults."""
    if not CONFIG_FILE.exists():
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        with open(CONFIG_FILE, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse config file {CONFIG_FILE}: {e}")
        logger.warning("Using default configuration")
        return copy.deepcopy(DEFAULT_CONFIG)
    except OSError as e:
        logger.error(f"Failed to read config file {CONFIG_FILE}: {e}")
        logger.warning("Using default configuration")
        return copy.deepcopy(DEFAULT_CONFIG)

    if not isinstance(data, dict):
        logger.warning(f"Config file {CONFIG_FILE} is not a JSON object, using default configuration")
        return copy.deepcopy(DEFAULT_CONFIG)

    config = _merge(DEFAULT_CONFIG, data)
    if config.get("log_mode") not in LOG_MODES:
        logger.warning(f"Unknown log_mode {config.get('log_mode')!r}, falling back to 'off'")
        config["log_mode"] = "off"

    return config


def save_config(config: Dict[str, Any]):
    """Save the configuration file and apply the new log mode."""
    ensure_config_directory()
    try:
        with open(CONFIG_FILE, 'w', encoding='utf-8') as f:
            json.dump(config, f, indent=4, ensure_ascii=False)
        logger.info("Configuration saved")
    except OSError as e:
        logger.error(f"Failed to save config: {e}")
        raise

    refresh_loggers()


def get_source_extensions() -> list:
    """Get the accepted localization file extensions."""
    return list(load_config().get("source_extensions") or DEFAULT_SOURCE_EXTENSIONS)
