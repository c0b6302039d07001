# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.security import verify_password
from ...dto.auth_dto import UserLoginRequest
from ...dto.user_dto import UserResponse, user_to_response

logger = logging.getLogger(__name__)


class AuthenticateUserUseCase:
    """Use case for checking a username/password pair"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserLoginRequest) -> Optional[UserResponse]:
        """
        Authenticate user credentials

        Unknown usernames and wrong passwords give the same result.

        Args:
            request: Login request with username and password

        Returns:
            UserResponse if the credentials match, None otherwise
        """
        user = await self.user_repository.find_by_username(request.username)
        if user is None or not verify_password(request.password, user.hashed_password):
            logger.warning(f"Failed login attempt for username '{request.username}'")
            return None

        return user_to_response(user)
