import logging
from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository
from ...infrastructure.db.memory_user_repository import InMemoryUserRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer

logger = logging.getLogger(__name__)


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the user repository selected by the USER_STORE setting.

        Raises:
            ValueError: If USER_STORE names an unknown backend
        """
        store = get_settings().user_store

        if store == "mongo":
            repository = MongoUserRepository(
                user_collection=container.get("user_collection"),
                counter_collection=container.get("counter_collection"),
            )
        elif store == "memory":
            repository = InMemoryUserRepository()
        else:
            raise ValueError(f"Unsupported USER_STORE '{store}' (expected 'mongo' or 'memory')")

        logger.info(f"User store backend: {store}")
        container.register_singleton(UserRepository, repository)
