"""Constants for domain model field names"""

from .user_fields import UserFields, CounterFields

__all__ = [
    "UserFields",
    "CounterFields",
]
