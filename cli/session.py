"""Host session: resolves caller identity and owns the registry state."""

from typing import Optional

from cli.config import Config
from common.logging_config import get_logger
from registry.services import FileRegistry
from registry.store import RecordStore, SqliteRecordStore

logger = get_logger(__name__)


class RegistrySession:
    """
    Binds a FileRegistry to a caller identity for the lifetime of the REPL.
    """

    def __init__(self, config: Config, store: Optional[RecordStore] = None):
        self.config = config
        self.store = store if store is not None else SqliteRecordStore(config.get_database_path())
        self.registry = FileRegistry(self.store)
        self.identity = config.get_identity()
        logger.debug(f"Session opened [identity={self.identity}]")

    def switch_identity(self, identity: str) -> None:
        self.identity = identity
        self.config.set_identity(identity)
        logger.info(f"Switched identity [identity={identity}]")

    def close(self) -> None:
        self.store.close()
