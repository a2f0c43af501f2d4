"""
Reads match settings from YAML and checks them before a match starts.
"""

import logging
from dataclasses import fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .game_config import GameConfig, default_config
from ..core.exceptions import InvalidConfiguration
from ..core.roles import MIN_PLAYERS
from ..core.speaking_order import SPEAKING_ORDER_POLICIES

logger = logging.getLogger(__name__)

CONFIG_KEYS = frozenset(f.name for f in fields(GameConfig))


def validate_config(config: GameConfig) -> GameConfig:
    """
    Check values that would otherwise fail deep inside a match.

    Raises:
        InvalidConfiguration: on negative role counts, a table minimum
            below four, a non-positive timeout or an unknown speaking
            order policy.
    """
    if config.undercover_count < 0 or config.mr_white_count < 0:
        raise InvalidConfiguration("Role counts cannot be negative (use 0 for random)")
    if config.min_players < MIN_PLAYERS:
        raise InvalidConfiguration(f"min_players must be at least {MIN_PLAYERS}, got {config.min_players}")
    if config.fetch_timeout <= 0:
        raise InvalidConfiguration(f"fetch_timeout must be positive, got {config.fetch_timeout}")
    if config.speaking_order_policy not in SPEAKING_ORDER_POLICIES:
        raise InvalidConfiguration(
            f"Unknown speaking_order_policy: {config.speaking_order_policy}. "
            f"Must be one of {', '.join(SPEAKING_ORDER_POLICIES)}"
        )
    return config


def _known_settings(raw: Dict[str, Any], source: Path) -> Dict[str, Any]:
    settings = {}
    for key, value in raw.items():
        if key in CONFIG_KEYS:
            settings[key] = value
        else:
            logger.warning("Ignoring unknown config key '%s' in %s", key, source)
    return settings


def load_config_from_yaml(config_path: str) -> GameConfig:
    """
    Build a GameConfig from a YAML mapping; absent keys keep their defaults.

    Raises:
        FileNotFoundError: the file does not exist
        yaml.YAMLError: the file is not valid YAML
        InvalidConfiguration: the document is not a mapping, or a value is out of range
    """
    source = Path(config_path)
    if not source.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with source.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    if raw is None:
        return GameConfig()
    if not isinstance(raw, dict):
        raise InvalidConfiguration(f"{config_path} must contain a mapping of settings")

    config = replace(GameConfig(), **_known_settings(raw, source))
    logger.debug("Loaded config from %s: %s", source, config)
    return validate_config(config)


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """Load a YAML config, or the defaults when no path is given."""
    if config_path is None:
        return default_config
    return load_config_from_yaml(config_path)
