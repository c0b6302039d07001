from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[int]
    username: str
    email: str
    hashed_password: str
    full_name: Optional[str] = None

    def __post_init__(self):
        """Business validations"""
        if not self.username or not self.username.strip():
            raise ValueError("Username is required")
        if not self.email or "@" not in self.email:
            raise ValueError("Invalid email format")
        if not self.hashed_password:
            raise ValueError("Password hash is required")
