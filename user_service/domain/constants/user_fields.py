"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    USERNAME = "username"
    EMAIL = "email"
    FULL_NAME = "full_name"
    HASHED_PASSWORD = "hashed_password"

    # MongoDB specific
    MONGO_ID = "_id"  # Holds the numeric user id

    # Fields that must be unique across all users
    UNIQUE = (USERNAME, EMAIL)


class CounterFields:
    """Field name constants for the id sequence documents"""
    MONGO_ID = "_id"
    SEQUENCE = "seq"
    USERS_SEQUENCE = "users"
