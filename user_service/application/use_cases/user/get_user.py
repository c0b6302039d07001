# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse, user_to_response


class GetUserUseCase:
    """Use case for getting a user by ID"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: int) -> Optional[UserResponse]:
        """
        Get a user by ID

        Args:
            user_id: ID of the user

        Returns:
            UserResponse if the user exists, None otherwise
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            return None
        return user_to_response(user)
