"""Configuration loading service"""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml

from ..api.exceptions import ConfigError
from ..constants import PROJECT_CONFIG_FILE, ENV_CONFIG_PATH
from ..models.config import Config

logger = logging.getLogger(__name__)


class ConfigService:
    """Service for loading project configuration"""

    def __init__(self, project_root: Path, config_path: Optional[Path] = None):
        """Initialize config service

        Args:
            project_root: Project root directory
            config_path: Explicit configuration file, defaults to
                $FORK_PUBLISH_CONFIG or .fork-publish.yaml in the project root
        """
        self.project_root = Path(project_root)
        if config_path is None:
            env_path = os.environ.get(ENV_CONFIG_PATH)
            config_path = Path(env_path) if env_path else self.project_root / PROJECT_CONFIG_FILE
        self.config_path = Path(config_path)
        self._config: Optional[Config] = None

    @property
    def config(self) -> Config:
        """Get current configuration (lazy load)"""
        if self._config is None:
            self.load_config()
        return self._config

    def load_config(self) -> Config:
        """Load configuration from file

        A missing file yields the built-in defaults.

        Returns:
            Loaded configuration

        Raises:
            ConfigError: If the file cannot be parsed
        """
        if not self.config_path.exists():
            logger.debug("No configuration at %s, using defaults", self.config_path)
            self._config = Config()
            return self._config

        with open(self.config_path, 'r', encoding='utf-8') as f:
            content = f.read()

        # Simple environment variable expansion
        content = os.path.expandvars(content)

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {self.config_path}: {e}") from e

        if data is not None and not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {self.config_path}")

        try:
            self._config = Config.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            raise ConfigError(f"Invalid configuration in {self.config_path}: {e}") from e

        logger.debug("Loaded configuration from %s", self.config_path)
        return self._config
