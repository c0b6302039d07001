from .auth import (
    RegisterUserUseCase,
    AuthenticateUserUseCase,
)
from .user import (
    ListUsersUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "AuthenticateUserUseCase",
    "ListUsersUseCase",
    "GetUserUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
]
