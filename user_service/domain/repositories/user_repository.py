from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access.

    Implementations must enforce uniqueness of username and email on save()
    and raise DuplicateUsernameError / DuplicateEmailError on violation.
    """

    @abstractmethod
    async def find_all(self) -> List[User]:
        """Return all users in store order"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Find user by ID"""
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find user by username"""
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address"""
        pass

    @abstractmethod
    async def save(self, user: User) -> Optional[User]:
        """Save user (insert when id is None, otherwise full update).

        Returns None when updating a user that no longer exists.
        """
        pass

    @abstractmethod
    async def delete_by_id(self, user_id: int) -> None:
        """Delete user by ID; a missing ID is not an error"""
        pass
