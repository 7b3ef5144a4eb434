"""Configuration management for the File Registry CLI."""

import json
import os
import shutil
import tempfile
from pathlib import Path

from common.logging_config import get_logger
from registry import config as registry_config
from registry.utils import default_identity

logger = get_logger(__name__)


class Config:
    """Manages CLI configuration stored in JSON file."""

    DEFAULT_CONFIG = {
        "identity": os.environ.get("FILE_REGISTRY_IDENTITY"),
        "database_path": registry_config.DATABASE_PATH,
    }

    def __init__(self, config_path: Path):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to config JSON file (typically ~/.file-registry/config.json)
        """
        self.config_path = config_path
        self.data = self._load()

    def _load(self) -> dict:
        """
        Load configuration from file, creating defaults if necessary.

        Returns:
            Configuration dictionary
        """
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
        except PermissionError:
            self.config_path = Path(tempfile.gettempdir()) / '.file-registry' / 'config.json'
            self.config_path.parent.mkdir(parents=True, exist_ok=True)

        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    data = json.load(f)
                config = self.DEFAULT_CONFIG.copy()
                config.update(data)
                return config
            except (json.JSONDecodeError, IOError) as e:
                logger.warning(f"Config file {self.config_path} unreadable, using defaults: {e}")
                backup_path = self.config_path.with_suffix('.json.bak')
                try:
                    shutil.copy(self.config_path, backup_path)
                except OSError as copy_error:
                    logger.warning(f"Could not back up config file: {copy_error}")
                return self.DEFAULT_CONFIG.copy()
        else:
            config = self.DEFAULT_CONFIG.copy()
            try:
                with open(self.config_path, 'w') as f:
                    json.dump(config, f, indent=2)
            except IOError as e:
                logger.warning(f"Could not write default config: {e}")
            return config

    def save(self) -> None:
        """Save current configuration to file."""
        try:
            with open(self.config_path, 'w') as f:
                json.dump(self.data, f, indent=2)
        except IOError as e:
            logger.warning(f"Could not save config: {e}")

    def get_identity(self) -> str:
        """
        Get the caller identity attached to registry operations.

        Returns:
            Configured identity, or the OS login name if none is set
        """
        return self.data.get('identity') or default_identity()

    def set_identity(self, identity: str) -> None:
        """
        Set the caller identity and save to file.
        """
        self.data['identity'] = identity
        self.save()

    def get_database_path(self) -> str:
        """
        Get the SQLite database path.
        """
        return self.data.get('database_path') or registry_config.DATABASE_PATH
