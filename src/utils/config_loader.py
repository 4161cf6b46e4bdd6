# src/utils/config_loader.py

import json
import os
from typing import Dict, Any, Optional

DEFAULT_TVDB_SETTINGS = {
    'base_server': 'https://thetvdb.com',
    'request_timeout': 30,
    'cache_timeout': 3600,
    'cache_max_size': 100,
    'min_request_interval': 0.2
}

DEFAULT_LOADING_SETTINGS = {
    'max_workers': 4
}

PLACEHOLDER_VALUES = ['your-tvdb-api-key', '']

class ConfigError(Exception):
    """Custom exception for configuration errors"""
    pass

def default_config_path() -> str:
    return os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))),
                        'config', 'config.json')

def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load and validate the configuration file.
    Returns: Dict containing configuration, with defaults filled in
    Raises: ConfigError if configuration is invalid or missing
    """
    if config_path is None:
        config_path = default_config_path()

    if not os.path.exists(config_path):
        raise ConfigError(
            "\nConfiguration file not found!"
            "\nPlease ensure 'config.json' exists in the 'config' directory."
            "\nPath should be: " + config_path
        )

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except json.JSONDecodeError:
        raise ConfigError(
            "\nInvalid JSON in configuration file!"
            "\nPlease check the syntax of your config.json file."
        )

    required_configs = {
        'tvdb': ['api_key']
    }

    for section, fields in required_configs.items():
        if section not in config:
            raise ConfigError(f"\nMissing '{section}' section in config.json")

        for field in fields:
            if field not in config[section]:
                raise ConfigError(f"\nMissing '{field}' in {section} configuration")

            if config[section][field] in PLACEHOLDER_VALUES:
                raise ConfigError(
                    f"\nPlease update the {section}.{field} in config.json with your actual credentials."
                    f"\nCurrent value appears to be a placeholder or empty."
                )

    config['tvdb'] = {**DEFAULT_TVDB_SETTINGS, **config['tvdb']}
    config['loading'] = {**DEFAULT_LOADING_SETTINGS, **config.get('loading', {})}

    if int(config['loading']['max_workers']) < 1:
        raise ConfigError("\nloading.max_workers must be at least 1")

    return config
