"""In-memory User Repository for local runs and tests."""

# Standard library imports
import asyncio
import logging
from dataclasses import replace
from typing import Dict, List, Optional

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.exceptions import DuplicateEmailError, DuplicateUsernameError

logger = logging.getLogger(__name__)


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository.

    Enforces the same uniqueness rules as the MongoDB indexes so the
    service behaves identically without a database. Ids come from a
    monotonic sequence and are never reused after a delete.

    Examples:
        >>> repo = InMemoryUserRepository()
        >>> saved = await repo.save(User(None, "ana", "ana@example.com", "hash"))
        >>> await repo.find_by_username("ana")
    """

    def __init__(self) -> None:
        """Initialize empty in-memory storage."""
        self._users: Dict[int, User] = {}
        self._last_id = 0
        self._lock = asyncio.Lock()

    async def find_all(self) -> List[User]:
        return [replace(user) for user in self._users.values()]

    async def find_by_id(self, user_id: int) -> Optional[User]:
        user = self._users.get(user_id)
        return replace(user) if user else None

    async def find_by_username(self, username: str) -> Optional[User]:
        for user in self._users.values():
            if user.username == username:
                return replace(user)
        return None

    async def find_by_email(self, email: str) -> Optional[User]:
        for user in self._users.values():
            if user.email == email:
                return replace(user)
        return None

    async def save(self, user: User) -> Optional[User]:
        """Insert or update a user, enforcing username/email uniqueness.

        Args:
            user: User entity to save

        Returns:
            Stored copy of the user, or None if updating a missing id

        Raises:
            DuplicateUsernameError: If another user holds the username
            DuplicateEmailError: If another user holds the email
        """
        async with self._lock:
            if user.id is not None and user.id not in self._users:
                return None

            others = [other for other in self._users.values() if other.id != user.id]
            # Username clashes take precedence over email clashes
            if any(other.username == user.username for other in others):
                raise DuplicateUsernameError(user.username)
            if any(other.email == user.email for other in others):
                raise DuplicateEmailError(user.email)

            if user.id is None:
                self._last_id += 1
                stored = replace(user, id=self._last_id)
            else:
                stored = replace(user)
            self._users[stored.id] = stored
            return replace(stored)

    async def delete_by_id(self, user_id: int) -> None:
        async with self._lock:
            if self._users.pop(user_id, None) is None:
                logger.debug(f"Delete requested for missing user {user_id}")

    def clear(self) -> None:
        """Clear all users from memory.

        The id sequence is kept so cleared ids are not handed out again.
        """
        self._users.clear()

    def count(self) -> int:
        """Get total number of users in memory."""
        return len(self._users)
