"""User credential record, password hashing and username validation."""

from .auth_exceptions import (
    DeserializationError,
    InvalidNameError,
    PasswordMismatchError,
    UserAuthError,
)
from .models import SafeUser, UserRecord
from .user import User
from .utils import compare_hash_and_password, generate_hash, validate_name

__all__ = [
    "DeserializationError",
    "InvalidNameError",
    "PasswordMismatchError",
    "SafeUser",
    "User",
    "UserAuthError",
    "UserRecord",
    "compare_hash_and_password",
    "generate_hash",
    "validate_name",
]
