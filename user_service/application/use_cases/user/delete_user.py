# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Use case for deleting a user; deleting a missing user is a no-op"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: int) -> None:
        await self.user_repository.delete_by_id(user_id)
        logger.info(f"Delete processed for user {user_id}")
