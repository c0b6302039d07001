# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse, user_to_response


class ListUsersUseCase:
    """Use case for listing every user in store order"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self) -> List[UserResponse]:
        users = await self.user_repository.find_all()
        return [user_to_response(user) for user in users]
