"""Configuration management for PTZ."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

PTZ_HOME = Path(os.environ.get("PTZ_HOME", Path.home() / "ptz"))
CONFIG_FILE = PTZ_HOME / "config" / "ptz.conf"
DATA_DIR = PTZ_HOME / "data"
DEFAULT_DATA_FILE = DATA_DIR / "priorities.yaml"


@dataclass
class Config:
    """PTZ configuration."""

    data_file: Path = field(default_factory=lambda: DEFAULT_DATA_FILE)
    stale_days: int = 14
    # Pending tasks listed per focus area on the dashboard
    pending_preview: int = 3
    color: bool = True


def _parse_int(key: str, value: str, default: int) -> int:
    try:
        parsed = int(value)
    except ValueError:
        logger.warning(f"Invalid integer for {key.upper()}: {value!r}, using {default}")
        return default
    if parsed < 0:
        logger.warning(f"Negative value for {key.upper()}: {parsed}, using {default}")
        return default
    return parsed


def _parse_bool(key: str, value: str, default: bool) -> bool:
    lowered = value.strip().lower()
    if lowered in {"1", "true", "yes", "on"}:
        return True
    if lowered in {"0", "false", "no", "off"}:
        return False
    logger.warning(f"Invalid boolean for {key.upper()}: {value!r}, using {default}")
    return default


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from ptz.conf, then apply PTZ_DATA_FILE from the environment."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if config_file.exists():
        for line in config_file.read_text().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if "=" not in line:
                continue

            key, _, value = line.partition("=")
            key = key.strip().lower()
            value = value.strip()

            # Handle quoted values with inline comments: "value" # comment
            if value.startswith('"') or value.startswith("'"):
                quote = value[0]
                end_quote = value.find(quote, 1)
                value = value[1:end_quote] if end_quote != -1 else value[1:]
            elif "#" in value:
                # Unquoted: strip inline comments
                value = value.split("#")[0].strip()

            match key:
                case "data_file":
                    config.data_file = Path(value).expanduser()
                case "stale_days":
                    config.stale_days = _parse_int(key, value, config.stale_days)
                case "pending_preview":
                    config.pending_preview = _parse_int(key, value, config.pending_preview)
                case "color":
                    config.color = _parse_bool(key, value, config.color)
                case _:
                    logger.warning(f"Unknown config key: {key.upper()}")

    env_data_file = os.environ.get("PTZ_DATA_FILE")
    if env_data_file:
        config.data_file = Path(env_data_file).expanduser()

    return config
