# Standard library imports
import logging
from typing import List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields, CounterFields
from ...domain.exceptions import UserConflictError, conflict_for_field
from .mongo_connection import get_user_collection, get_counter_collection

logger = logging.getLogger(__name__)


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository.

    Users are keyed by a numeric ``_id`` drawn from a counter document, so
    ids increase monotonically and are never reused after a delete.
    """

    def __init__(
        self,
        user_collection: Optional[AsyncIOMotorCollection] = None,
        counter_collection: Optional[AsyncIOMotorCollection] = None,
    ) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()
        self.counter_collection = (
            counter_collection if counter_collection is not None else get_counter_collection()
        )

    async def find_all(self) -> List[User]:
        """
        Return every user ordered by id

        Returns:
            List of User domain models
        """
        try:
            cursor = self.user_collection.find({}).sort(UserFields.MONGO_ID, ASCENDING)
            documents = await cursor.to_list(length=None)
        except Exception as e:
            raise RuntimeError(f"Error listing users: {str(e)}") from e
        return [self._document_to_user(document) for document in documents]

    async def find_by_id(self, user_id: int) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise
        """
        if user_id is None:
            return None
        return await self._find_one({UserFields.MONGO_ID: int(user_id)}, "ID")

    async def find_by_username(self, username: str) -> Optional[User]:
        """
        Find user by username

        Args:
            username: Username to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not username:
            return None
        return await self._find_one({UserFields.USERNAME: username}, "username")

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None
        return await self._find_one({UserFields.EMAIL: email}, "email")

    async def save(self, user: User) -> Optional[User]:
        """
        Save user (create new or update existing)

        Args:
            user: User domain model to save

        Returns:
            Saved User domain model with ID set, or None if the user
            being updated no longer exists

        Raises:
            DuplicateUsernameError: If the username index rejects the write
            DuplicateEmailError: If the email index rejects the write
            RuntimeError: On any other database failure
        """
        if not user:
            raise ValueError("User cannot be None")

        user_dict = self._user_to_dict(user)
        try:
            if user.id is not None:
                # Update existing user
                update_result = await self.user_collection.update_one(
                    {UserFields.MONGO_ID: int(user.id)},
                    {"$set": user_dict},
                )
                if update_result.matched_count == 0:
                    logger.info(f"User {user.id} vanished before update could be applied")
                    return None
                document = await self.user_collection.find_one({UserFields.MONGO_ID: int(user.id)})
                if document is None:
                    return None
                return self._document_to_user(document)

            # Create new user
            user_dict[UserFields.MONGO_ID] = await self._next_id()
            await self.user_collection.insert_one(user_dict)
            return self._document_to_user(user_dict)
        except DuplicateKeyError as e:
            raise self._conflict_from_error(e) from e
        except Exception as e:
            raise RuntimeError(f"Error saving user: {str(e)}") from e

    async def delete_by_id(self, user_id: int) -> None:
        """
        Delete user by ID. Deleting a missing ID is a no-op.

        Args:
            user_id: User ID to delete
        """
        try:
            result = await self.user_collection.delete_one({UserFields.MONGO_ID: int(user_id)})
        except Exception as e:
            raise RuntimeError(f"Error deleting user: {str(e)}") from e
        if result.deleted_count == 0:
            logger.debug(f"Delete requested for missing user {user_id}")

    async def _find_one(self, query: dict, label: str) -> Optional[User]:
        try:
            document = await self.user_collection.find_one(query)
        except Exception as e:
            raise RuntimeError(f"Error finding user by {label}: {str(e)}") from e
        if document is None:
            return None
        return self._document_to_user(document)

    async def _next_id(self) -> int:
        """
        Atomically increment and return the users id sequence

        Returns:
            Next unused user ID
        """
        counter = await self.counter_collection.find_one_and_update(
            {CounterFields.MONGO_ID: CounterFields.USERS_SEQUENCE},
            {"$inc": {CounterFields.SEQUENCE: 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return int(counter[CounterFields.SEQUENCE])

    def _conflict_from_error(self, error: DuplicateKeyError) -> UserConflictError:
        """
        Map a duplicate key error to the domain conflict for the violated field

        Args:
            error: Error raised by the driver

        Returns:
            DuplicateUsernameError or DuplicateEmailError
        """
        details = error.details or {}
        key_pattern = details.get("keyPattern") or {}
        key_value = details.get("keyValue") or {}
        for field in UserFields.UNIQUE:
            if field in key_pattern:
                return conflict_for_field(field, key_value.get(field))

        # Older servers only report the index name in the message
        message = str(error)
        for field in UserFields.UNIQUE:
            if f"{field}_unique" in message or f"{field}_1" in message:
                return conflict_for_field(field)

        raise RuntimeError(f"Unexpected duplicate key error: {message}") from error

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User(
            id=int(document[UserFields.MONGO_ID]),
            username=document.get(UserFields.USERNAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
            full_name=document.get(UserFields.FULL_NAME),
        )

    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document (without _id)

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        return {
            UserFields.USERNAME: user.username,
            UserFields.EMAIL: user.email,
            UserFields.HASHED_PASSWORD: user.hashed_password,
            UserFields.FULL_NAME: user.full_name,
        }
