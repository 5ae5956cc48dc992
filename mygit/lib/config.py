"""
Configuration loader for mygit.

Reads an optional KEY=value file from $MYGIT_CONFIG or
~/.config/mygit/mygit.env. Missing files and bad values fall back
to defaults.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from . import envparse

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "MYGIT_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/mygit/mygit.env")

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
VALID_COLOR_MODES = ("auto", "always", "never")


@dataclass
class MygitConfig:
    """User configuration from mygit.env"""
    default_remote: str = "origin"  # Preferred remote for sync/push and new remotes
    log_level: str = "WARNING"
    color: str = "auto"  # auto, always, never


def get_config_path() -> Path:
    """Resolve the config file location."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_PATH.expanduser()


def load_config(path: Path | None = None) -> MygitConfig:
    """Load config from path (or the default location).

    A missing file yields defaults. A malformed file is logged and
    also yields defaults.
    """
    path = path or get_config_path()
    try:
        env = envparse.load_env(path)
    except FileNotFoundError:
        return MygitConfig()
    except ValueError as e:
        logger.warning(f"Ignoring invalid config file: {e}")
        return MygitConfig()

    defaults = MygitConfig()

    default_remote = env.get("DEFAULT_REMOTE", "").strip() or defaults.default_remote

    log_level = env.get("LOG_LEVEL", defaults.log_level).upper()
    if log_level not in VALID_LOG_LEVELS:
        logger.warning(
            f"Unknown LOG_LEVEL '{log_level}' in {path}, using {defaults.log_level}"
        )
        log_level = defaults.log_level

    color = env.get("COLOR", defaults.color).lower()
    if color not in VALID_COLOR_MODES:
        logger.warning(f"Unknown COLOR '{color}' in {path}, using {defaults.color}")
        color = defaults.color

    return MygitConfig(
        default_remote=default_remote,
        log_level=log_level,
        color=color,
    )
