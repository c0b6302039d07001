from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserUpdateRequest(BaseModel):
    """DTO for user update request.

    Replaces username, email and full name. A password sent here is
    ignored; an omitted fullName clears the stored one.
    """
    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(min_length=1, max_length=100)
    email: EmailStr
    full_name: Optional[str] = Field(default=None, alias="fullName", max_length=200)


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    username: str
    email: str
    full_name: Optional[str] = Field(default=None, alias="fullName")


def user_to_response(user) -> UserResponse:
    """Build the public representation of a domain User (drops the password hash)"""
    return UserResponse(
        id=user.id,
        username=user.username,
        email=user.email,
        full_name=user.full_name,
    )
