from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...infrastructure.db.mongo_connection import (
    get_database,
    get_user_collection,
    get_counter_collection,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register database collections in the container.
        Nothing is registered when the in-memory user store is selected.
        """
        if get_settings().user_store != "mongo":
            return

        container.register_singleton("database", get_database())
        container.register_singleton("user_collection", get_user_collection())
        container.register_singleton("counter_collection", get_counter_collection())
