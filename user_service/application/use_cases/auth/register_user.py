# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import DuplicateEmailError, DuplicateUsernameError
from ....core.security import hash_password
from ...dto.auth_dto import UserRegistrationRequest
from ...dto.user_dto import UserResponse, user_to_response

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserRegistrationRequest) -> UserResponse:
        """
        Register a new user

        Username is checked before email and the first conflict wins. The
        repository enforces the same uniqueness on write, so a registration
        racing past these checks still fails with the same errors.

        Args:
            request: Registration request with user details

        Returns:
            UserResponse with created user information, including its new ID

        Raises:
            DuplicateUsernameError: If the username is already taken
            DuplicateEmailError: If the email is already registered
        """
        if await self.user_repository.find_by_username(request.username) is not None:
            logger.info(f"Registration rejected: username '{request.username}' already exists")
            raise DuplicateUsernameError(request.username)

        if await self.user_repository.find_by_email(request.email) is not None:
            logger.info(f"Registration rejected: email '{request.email}' already registered")
            raise DuplicateEmailError(request.email)

        new_user = User(
            id=None,  # Will be set by repository
            username=request.username,
            email=request.email,
            hashed_password=hash_password(request.password),
            full_name=request.full_name,
        )

        saved_user = await self.user_repository.save(new_user)
        logger.info(f"Registered user {saved_user.id} ({saved_user.username})")

        return user_to_response(saved_user)
