from .auth_dto import UserRegistrationRequest, UserLoginRequest
from .user_dto import UserResponse, UserUpdateRequest, user_to_response

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "UserResponse",
    "UserUpdateRequest",
    "user_to_response",
]
