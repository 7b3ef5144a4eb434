"""Configuration settings for the file registry."""

import os
from pathlib import Path


DEFAULT_DATA_DIR = Path.home() / ".file-registry"

DATABASE_PATH = os.environ.get(
    "FILE_REGISTRY_DATABASE_PATH", str(DEFAULT_DATA_DIR / "registry.db")
)
