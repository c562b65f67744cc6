# sleeplog/config/config_manager.py
import copy
import logging
import os

import yaml

from sleeplog.utils.constants import DEFAULT_CONFIG

logger = logging.getLogger(__name__)


def _merge(base, override):
    """Recursively merge override into base, returning base"""
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


class ConfigManager:
    """Central configuration manager"""
    
    def __init__(self, config_path=None, overrides=None):
        self.config_path = config_path or 'config/config.yaml'
        self.config = self._load_config()
        if overrides:
            _merge(self.config, overrides)
    
    def _load_config(self):
        """Load configuration from file, layered over the built-in defaults"""
        config = copy.deepcopy(DEFAULT_CONFIG)
        if not os.path.exists(self.config_path):
            logger.debug(f"No config file at {self.config_path}, using defaults")
            return config
        
        with open(self.config_path, 'r') as file:
            loaded = yaml.safe_load(file) or {}
        logger.info(f"Loaded configuration from {self.config_path}")
        return _merge(config, loaded)
    
    def get(self, key, default=None):
        """Get configuration value"""
        # Support nested keys with dot notation
        keys = key.split('.')
        value = self.config
        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value
