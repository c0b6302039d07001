from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

# bcrypt only hashes the first 72 bytes and newer releases refuse longer input
MAX_PASSWORD_BYTES = 72


class UserRegistrationRequest(BaseModel):
    """DTO for user registration request (a client-sent id is ignored)"""
    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1)
    email: EmailStr
    full_name: Optional[str] = Field(default=None, alias="fullName", max_length=200)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class UserLoginRequest(BaseModel):
    """DTO for user login request; any non-matching pair is answered with 401"""
    username: str
    password: str
