# Standard library imports
import logging
from dataclasses import replace
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import DuplicateEmailError, DuplicateUsernameError
from ...dto.user_dto import UserResponse, UserUpdateRequest, user_to_response

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Use case for replacing a user's username, email and full name"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: int, request: UserUpdateRequest) -> Optional[UserResponse]:
        """
        Update an existing user

        The stored password hash is never touched. New username and email
        values must not belong to another user; a user may keep its own.

        Args:
            user_id: ID of the user to update
            request: Replacement username, email and full name

        Returns:
            UserResponse with the updated user, or None if no user has this ID

        Raises:
            DuplicateUsernameError: If another user holds the new username
            DuplicateEmailError: If another user holds the new email
        """
        existing = await self.user_repository.find_by_id(user_id)
        if existing is None:
            return None

        holder = await self.user_repository.find_by_username(request.username)
        if holder is not None and holder.id != existing.id:
            raise DuplicateUsernameError(request.username)

        holder = await self.user_repository.find_by_email(request.email)
        if holder is not None and holder.id != existing.id:
            raise DuplicateEmailError(request.email)

        updated = replace(
            existing,
            username=request.username,
            email=request.email,
            full_name=request.full_name,
        )

        saved_user = await self.user_repository.save(updated)
        if saved_user is None:
            # Deleted between the read and the write
            return None

        logger.info(f"Updated user {saved_user.id}")
        return user_to_response(saved_user)
