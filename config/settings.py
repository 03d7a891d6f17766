"""Configuration management module for the capital city scraper."""

import os
from pathlib import Path
from typing import Any, Dict, Optional
import yaml
from dotenv import load_dotenv


_TRUE_VALUES = {'1', 'true', 'yes', 'on'}


class Config:
    """Configuration manager that loads settings from YAML and environment variables."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_path: Path to config.yaml file. If None, looks in config/ directory.
        """
        # Load environment variables from .env file
        load_dotenv()

        if config_path is None:
            config_path = str(Path(__file__).parent / "config.yaml")

        self.config_path = Path(config_path)
        self._config: Dict[str, Any] = {}

        self._load_config()
        self._apply_env_overrides()

    def _load_config(self):
        """Load configuration from YAML file."""
        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        with open(self.config_path, 'r', encoding='utf-8') as f:
            self._config = yaml.safe_load(f) or {}

    def _set(self, key: str, value: Any) -> None:
        """Set a dot-notation key, creating intermediate sections."""
        section = self._config
        *parents, leaf = key.split('.')
        for k in parents:
            section = section.setdefault(k, {})
        section[leaf] = value

    def _apply_env_overrides(self):
        """Apply environment variable overrides to configuration."""
        base_dir_env = os.getenv('BASE_DIR')
        if base_dir_env:
            self._set('paths.base_dir', base_dir_env)

        start_url = os.getenv('START_URL')
        if start_url:
            self._set('scraper.start_url', start_url)

        source = os.getenv('DOCUMENT_SOURCE')
        if source:
            self._set('scraper.source', source.lower())

        headless = os.getenv('HEADLESS')
        if headless:
            self._set('selenium.headless', headless.strip().lower() in _TRUE_VALUES)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation.

        Args:
            key: Configuration key (e.g., 'paths.base_dir')
            default: Default value if key not found

        Returns:
            Configuration value or default

        Example:
            >>> config.get('selenium.headless')
            False
            >>> config.get('scraper.source')
            'selenium'
        """
        keys = key.split('.')
        value = self._config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_path(self, key: str) -> Path:
        """
        Get a path configuration value as a Path object.

        Args:
            key: Configuration key (e.g., 'paths.base_dir')

        Returns:
            Path object
        """
        value = self.get(key)
        if value is None:
            raise ValueError(f"Path configuration not found: {key}")
        return Path(value)

    def get_full_path(self, path_key: str) -> Path:
        """
        Get a full path by combining base_dir with the specified path.

        Args:
            path_key: Configuration key for the path (e.g., 'paths.output_file')

        Returns:
            Full path as Path object
        """
        base_dir = self.get_path('paths.base_dir')
        relative_path = self.get(path_key)

        if relative_path is None:
            raise ValueError(f"Path configuration not found: {path_key}")

        return base_dir / relative_path

    @property
    def start_url(self) -> str:
        """Get the country list URL the traversal starts from."""
        url = self.get('scraper.start_url')
        if not url:
            raise ValueError("scraper.start_url is not configured")
        return url

    @property
    def all_config(self) -> Dict[str, Any]:
        """Get the entire configuration dictionary."""
        return self._config.copy()


# Global configuration instance
_config_instance: Optional[Config] = None


def get_config(config_path: Optional[str] = None) -> Config:
    """
    Get or create the global configuration instance.

    Args:
        config_path: Path to config file (only used on first call)

    Returns:
        Config instance
    """
    global _config_instance

    if _config_instance is None:
        _config_instance = Config(config_path)

    return _config_instance


def reload_config(config_path: Optional[str] = None) -> Config:
    """
    Reload configuration from file.

    Args:
        config_path: Path to config file

    Returns:
        The new Config instance
    """
    global _config_instance
    _config_instance = Config(config_path)
    return _config_instance
