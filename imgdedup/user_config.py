"""
User configuration management for imgdedup.

Supports configuration from multiple sources (in order of priority):
1. Command-line options (highest priority)
2. Environment variables
3. User config file (~/.imgdedup/config.json)
4. Default values from config.py (lowest priority)

Example config.json:
{
    "subdivisions": 10,
    "tolerance": 100,
    "difftool": "meld",
    "home_dir": null,
    "cache_max_age_days": 90
}
"""

import json
import os
from pathlib import Path
from typing import Any, Optional
import logging

from .config import (
    DEFAULT_SUBDIVISIONS,
    DEFAULT_TOLERANCE,
    CACHE_MAX_AGE_DAYS,
    SCRATCH_DIR_NAME,
    default_home_dir,
)

logger = logging.getLogger(__name__)


class UserConfig:
    """
    Manages user configuration from file and environment variables.

    The config file is read lazily and cached; call ``reload()`` to pick
    up changes.
    """

    _instance: Optional['UserConfig'] = None
    _config_data: Optional[dict] = None

    def __new__(cls):
        """Singleton pattern to ensure one config instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def config_dir(self) -> Path:
        """Get the configuration directory path."""
        env_dir = os.getenv('IMGDEDUP_CONFIG_DIR')
        if env_dir:
            return Path(env_dir)

        # Shares the scratch directory with the fingerprint cache
        return Path(default_home_dir()) / SCRATCH_DIR_NAME

    @property
    def config_file_path(self) -> Path:
        """Get the configuration file path."""
        return self.config_dir / 'config.json'

    def _load_config_file(self) -> dict:
        """Load configuration from JSON file."""
        if not self.config_file_path.exists():
            return {}

        try:
            with open(self.config_file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to load config file {self.config_file_path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring config file {self.config_file_path}: not a JSON object")
            return {}
        logger.debug(f"Loaded configuration from {self.config_file_path}")
        return data

    def _get_config_data(self) -> dict:
        """Get cached config data (lazy loading)."""
        if self._config_data is None:
            self._config_data = self._load_config_file()
        return self._config_data

    def reload(self):
        """Reload configuration from file."""
        self._config_data = None

    def get(self, key: str, default: Any = None, env_var: Optional[str] = None) -> Any:
        """
        Get a configuration value with priority:
        1. Environment variable (if env_var specified)
        2. Config file
        3. Default value

        Args:
            key: Configuration key
            default: Default value if not found
            env_var: Optional environment variable name to check

        Returns:
            Configuration value
        """
        if env_var:
            env_value = os.getenv(env_var)
            if env_value is not None:
                # Try to parse as JSON for numbers and null
                try:
                    return json.loads(env_value)
                except (json.JSONDecodeError, TypeError):
                    return env_value

        config_data = self._get_config_data()
        if key in config_data:
            return config_data[key]

        return default

    def _get_int(self, key: str, default: int, env_var: str, minimum: int) -> int:
        """
        Get an integer setting, falling back to ``default`` when the
        configured value is not an integer or is below ``minimum``.
        """
        value = self.get(key, default=default, env_var=env_var)
        try:
            number = int(value)
        except (TypeError, ValueError):
            logger.warning(f"Ignoring invalid {key} setting {value!r}, using {default}")
            return default

        if number < minimum:
            logger.warning(f"Ignoring {key} setting {number} (must be >= {minimum}), using {default}")
            return default
        return number

    @property
    def subdivisions(self) -> int:
        """Fingerprint grid side length."""
        return self._get_int(
            'subdivisions',
            default=DEFAULT_SUBDIVISIONS,
            env_var='IMGDEDUP_SUBDIVISIONS',
            minimum=1
        )

    @property
    def tolerance(self) -> int:
        """Exclusive upper bound on reported distances."""
        return self._get_int(
            'tolerance',
            default=DEFAULT_TOLERANCE,
            env_var='IMGDEDUP_TOLERANCE',
            minimum=0
        )

    @property
    def difftool(self) -> Optional[str]:
        """Command launched on near-duplicate pairs, or None."""
        value = self.get('difftool', env_var='IMGDEDUP_DIFFTOOL')
        return str(value) if value else None

    @property
    def cache_max_age_days(self) -> float:
        """Age used by --prune-cache when no value is given (days)."""
        value = self.get(
            'cache_max_age_days',
            default=CACHE_MAX_AGE_DAYS,
            env_var='IMGDEDUP_CACHE_MAX_AGE'
        )
        try:
            days = float(value)
        except (TypeError, ValueError):
            logger.warning(
                f"Ignoring invalid cache_max_age_days setting {value!r}, using {CACHE_MAX_AGE_DAYS}"
            )
            return float(CACHE_MAX_AGE_DAYS)
        if days < 0:
            logger.warning(
                f"Ignoring cache_max_age_days setting {days:g} (must be >= 0), "
                f"using {CACHE_MAX_AGE_DAYS}"
            )
            return float(CACHE_MAX_AGE_DAYS)
        return days

    @property
    def home_dir(self) -> str:
        """Directory the fingerprint cache directory is created in."""
        custom = self.get('home_dir', env_var='IMGDEDUP_HOME')
        if custom:
            return str(custom)
        return default_home_dir()

    def create_example_config(self) -> bool:
        """Create an example configuration file."""
        example_config = {
            "_comment": "imgdedup user configuration",
            "subdivisions": DEFAULT_SUBDIVISIONS,
            "tolerance": DEFAULT_TOLERANCE,
            "difftool": None,
            "home_dir": None,
            "cache_max_age_days": CACHE_MAX_AGE_DAYS,
        }

        try:
            self.config_dir.mkdir(mode=0o700, parents=True, exist_ok=True)
            with open(self.config_file_path, 'w', encoding='utf-8') as f:
                json.dump(example_config, f, indent=2)
            logger.info(f"Created example config file at {self.config_file_path}")
            return True
        except OSError as e:
            logger.error(f"Failed to create example config: {e}")
            return False


# Global instance
_user_config = UserConfig()


def get_user_config() -> UserConfig:
    """Get the global UserConfig instance."""
    return _user_config
