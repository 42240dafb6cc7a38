"""
User configuration management for the game CLI.

Handles reading and writing user preferences to ~/.addiction_network/config.json
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from ..domain.pricing import DEFAULT_PRICE_MODEL, PriceModel

logger = logging.getLogger(__name__)


class Config:
    """
    User configuration manager.

    Stores the player name used for leaderboard submissions and the
    preferred price model.
    """

    def __init__(self, config_path: Optional[Path] = None):
        if config_path:
            self.config_path = config_path
        else:
            self.config_path = Path.home() / ".addiction_network" / "config.json"

        self._config: Dict[str, Any] = {}
        self._load()

    def _load(self):
        """Load configuration from file; fall back to defaults on any problem"""
        if not self.config_path.exists():
            logger.debug(f"Config file not found at {self.config_path}, using defaults")
            self._config = {}
            return

        try:
            with open(self.config_path, 'r') as f:
                loaded = json.load(f)
        except json.JSONDecodeError as e:
            logger.warning(f"Invalid JSON in config file: {e}, using defaults")
            loaded = {}
        except OSError as e:
            logger.warning(f"Error loading config: {e}, using defaults")
            loaded = {}

        if not isinstance(loaded, dict):
            logger.warning(f"Config file {self.config_path} is not a JSON object, using defaults")
            loaded = {}
        self._config = loaded
        logger.debug(f"Loaded config from {self.config_path}")

    def _save(self):
        """Save configuration to file"""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, 'w') as f:
                json.dump(self._config, f, indent=2)
            logger.debug(f"Saved config to {self.config_path}")
        except OSError as e:
            logger.error(f"Error saving config: {e}")
            raise

    @property
    def player_name(self) -> Optional[str]:
        """Name used when submitting scores"""
        return self._config.get('player_name')

    @player_name.setter
    def player_name(self, name: Optional[str]):
        if name is None:
            self._config.pop('player_name', None)
        else:
            if not name.strip():
                raise ValueError("player name cannot be empty")
            self._config['player_name'] = name.strip()
        self._save()

    @property
    def price_model(self) -> PriceModel:
        """Preferred price model; unknown values fall back to the default"""
        name = self._config.get('price_model')
        if not name:
            return DEFAULT_PRICE_MODEL
        try:
            return PriceModel.from_name(name)
        except ValueError as e:
            logger.warning(f"{e}, using {DEFAULT_PRICE_MODEL.value}")
            return DEFAULT_PRICE_MODEL

    @price_model.setter
    def price_model(self, model: Optional[PriceModel]):
        if model is None:
            self._config.pop('price_model', None)
        else:
            self._config['price_model'] = model.value
        self._save()

    def clear(self):
        """Remove all stored preferences"""
        self._config = {}
        self._save()
        logger.info("Cleared configuration")

    def as_dict(self) -> Dict[str, Any]:
        return dict(self._config)


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get global config instance"""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config():
    """Reset global config instance (useful for testing)"""
    global _config
    _config = None
