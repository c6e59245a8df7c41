# config.py - Configuration settings for the mimesig MCP server

import copy
import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


# Default configuration values
DEFAULT_CONFIG = {
    # Server settings
    'server': {
        'name': 'MIME Signature Tools',
        'log_level': 'INFO',
        'log_dir': None,  # None means ./logs
        'root_path': '.',  # identify_file paths are confined to this directory
    },

    # Tool settings
    'tools': {
        'max_file_size': 100 * 1024 * 1024,  # 100 MB max file size for identify_file
    },
}


class Config:
    """
    Configuration manager for the mimesig MCP server.

    Values come from DEFAULT_CONFIG, then an optional JSON file, then
    MIMESIG_* environment variables.
    """

    def __init__(self, config_path: Optional[str] = None, environ: Optional[Dict[str, str]] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Optional path to a JSON configuration file
            environ: Environment mapping (defaults to os.environ)
        """
        self.config = copy.deepcopy(DEFAULT_CONFIG)

        if config_path and os.path.exists(config_path):
            self.load_from_file(config_path)

        self._override_from_env(os.environ if environ is None else environ)

    def load_from_file(self, config_path: str) -> None:
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration file
        """
        try:
            with open(config_path, 'r') as f:
                file_config = json.load(f)

            if not isinstance(file_config, dict):
                logger.error(f"Ignoring configuration file {config_path}: top level must be an object")
                return

            self._update_nested_dict(self.config, file_config)

            logger.info(f"Loaded configuration from {config_path}")
        except (OSError, ValueError) as e:
            logger.error(f"Error loading configuration from {config_path}: {e}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key.

        Args:
            key: Dot-separated path to the configuration value (e.g., 'server.log_level')
            default: Default value to return if the key is not found

        Returns:
            The configuration value or the default
        """
        value = self.config

        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value by key.

        Args:
            key: Dot-separated path to the configuration value (e.g., 'server.root_path')
            value: Value to set
        """
        keys = key.split('.')
        config = self.config

        for k in keys[:-1]:
            if k not in config:
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value

    def _update_nested_dict(self, d: Dict, u: Dict) -> Dict:
        """Recursively update a nested dictionary."""
        for k, v in u.items():
            if k in d and isinstance(d[k], dict):
                if isinstance(v, dict):
                    d[k] = self._update_nested_dict(d[k], v)
                else:
                    logger.error(f"Ignoring configuration value for '{k}': expected an object")
            else:
                d[k] = v
        return d

    def _override_from_env(self, environ) -> None:
        """Override configuration values from environment variables."""
        if 'MIMESIG_LOG_LEVEL' in environ:
            self.config['server']['log_level'] = environ['MIMESIG_LOG_LEVEL']

        if 'MIMESIG_LOG_DIR' in environ:
            self.config['server']['log_dir'] = environ['MIMESIG_LOG_DIR']

        if 'MIMESIG_ROOT_PATH' in environ:
            self.config['server']['root_path'] = environ['MIMESIG_ROOT_PATH']

        if 'MIMESIG_MAX_FILE_SIZE' in environ:
            try:
                self.config['tools']['max_file_size'] = int(environ['MIMESIG_MAX_FILE_SIZE'])
            except ValueError:
                logger.warning(f"Ignoring invalid MIMESIG_MAX_FILE_SIZE: {environ['MIMESIG_MAX_FILE_SIZE']}")
