# External package imports
from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse

# Local application imports
from ...application.dto.auth_dto import UserRegistrationRequest, UserLoginRequest
from ...application.dto.user_dto import UserUpdateRequest
from ...application.use_cases.auth import RegisterUserUseCase, AuthenticateUserUseCase
from ...application.use_cases.user import (
    ListUsersUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
)
from ...domain.exceptions import UserConflictError
from ...di.container import get_container
from ..presenters import UserPresenter

LOGIN_SUCCESS_MESSAGE = "Inicio de sesión exitoso para {username}"
INVALID_CREDENTIALS_MESSAGE = "Credenciales inválidas"


router = APIRouter(tags=["users"])


def _base_url(request: Request) -> str:
    return str(request.base_url).rstrip("/")


@router.get("")
async def list_users(request: Request) -> JSONResponse:
    """
    List all users

    Returns:
        Array of users, or a HAL collection when hypermedia is enabled
    """
    container = get_container()
    users = await container.get(ListUsersUseCase).execute()
    presenter: UserPresenter = container.get(UserPresenter)
    return JSONResponse(content=presenter.users(users, _base_url(request)))


@router.get("/{user_id}")
async def get_user(user_id: int, request: Request) -> Response:
    """
    Get a user by ID

    Args:
        user_id: ID of the user

    Returns:
        The user, or 404 if it does not exist
    """
    container = get_container()
    user = await container.get(GetUserUseCase).execute(user_id)
    if user is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    presenter: UserPresenter = container.get(UserPresenter)
    return JSONResponse(content=presenter.user(user, _base_url(request)))


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register_user(body: UserRegistrationRequest, request: Request) -> Response:
    """
    Register a new user

    Args:
        body: User registration request

    Returns:
        201 with the created user, or 400 with the conflict message
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)

    try:
        user = await register_use_case.execute(body)
    except UserConflictError as exception:
        return PlainTextResponse(str(exception), status_code=status.HTTP_400_BAD_REQUEST)

    presenter: UserPresenter = container.get(UserPresenter)
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=presenter.user(user, _base_url(request), include_collection_link=False),
    )


@router.put("/{user_id}")
async def update_user(user_id: int, body: UserUpdateRequest, request: Request) -> Response:
    """
    Replace a user's username, email and full name

    Args:
        user_id: ID of the user
        body: Replacement details (password is ignored)

    Returns:
        The updated user, 404 if it does not exist, or 400 on a conflict
    """
    container = get_container()
    update_use_case = container.get(UpdateUserUseCase)

    try:
        user = await update_use_case.execute(user_id, body)
    except UserConflictError as exception:
        return PlainTextResponse(str(exception), status_code=status.HTTP_400_BAD_REQUEST)

    if user is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    presenter: UserPresenter = container.get(UserPresenter)
    return JSONResponse(
        content=presenter.user(user, _base_url(request), include_collection_link=False)
    )


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: int) -> Response:
    """
    Delete a user. Always answers 204, whether or not the user existed.

    Args:
        user_id: ID of the user
    """
    container = get_container()
    await container.get(DeleteUserUseCase).execute(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/login", response_class=PlainTextResponse)
async def login(body: UserLoginRequest) -> PlainTextResponse:
    """
    Check a username/password pair

    Args:
        body: Login request

    Returns:
        200 with a greeting on success, 401 otherwise
    """
    container = get_container()
    user = await container.get(AuthenticateUserUseCase).execute(body)
    if user is None:
        return PlainTextResponse(
            INVALID_CREDENTIALS_MESSAGE,
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
    return PlainTextResponse(LOGIN_SUCCESS_MESSAGE.format(username=user.username))
