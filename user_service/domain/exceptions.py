"""
Domain exceptions for the user directory.

Only uniqueness conflicts are raised as errors. Not-found and failed logins
are expected outcomes and are reported as None by the use cases.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Optional


DUPLICATE_USERNAME_MESSAGE = "El nombre de usuario ya existe."
DUPLICATE_EMAIL_MESSAGE = "El correo electrónico ya está registrado."


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class UserConflictError(ValueError):
    """Base exception for uniqueness violations on user fields."""

    field: str = ""
    default_message: str = ""

    def __init__(self, value: Optional[str] = None, message: Optional[str] = None):
        self.message = message or self.default_message
        self.value = value
        super().__init__(self.message)


# -----------------------------------------------------------------------------
# Conflicts
# -----------------------------------------------------------------------------


class DuplicateUsernameError(UserConflictError):
    """Raised when the username is already held by another user."""
    field = "username"
    default_message = DUPLICATE_USERNAME_MESSAGE


class DuplicateEmailError(UserConflictError):
    """Raised when the email is already held by another user."""
    field = "email"
    default_message = DUPLICATE_EMAIL_MESSAGE


def conflict_for_field(field: str, value: Optional[str] = None) -> UserConflictError:
    """
    Build the conflict error matching a unique field name.

    Args:
        field: Name of the violated unique field ("username" or "email")
        value: Offending value, if known

    Returns:
        DuplicateUsernameError or DuplicateEmailError

    Raises:
        ValueError: If field is not a unique user field
    """
    if field == DuplicateUsernameError.field:
        return DuplicateUsernameError(value)
    if field == DuplicateEmailError.field:
        return DuplicateEmailError(value)
    raise ValueError(f"Unknown unique field: {field}")
