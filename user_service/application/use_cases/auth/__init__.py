from .register_user import RegisterUserUseCase
from .authenticate_user import AuthenticateUserUseCase

__all__ = [
    "RegisterUserUseCase",
    "AuthenticateUserUseCase",
]
