from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.user import (
    ListUsersUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User directory use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        for use_case_class in (
            ListUsersUseCase,
            GetUserUseCase,
            UpdateUserUseCase,
            DeleteUserUseCase,
        ):
            container.register_factory(
                use_case_class,
                # Bind the class now; a bare closure would see only the last one
                lambda cls=use_case_class: cls(user_repository=container.get(UserRepository)),
            )
