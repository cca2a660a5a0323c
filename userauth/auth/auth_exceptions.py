"""Custom exceptions for the user authentication module."""


class UserAuthError(Exception):
    """Base class for user record errors.

    :cvar code: Stable identifier for the error kind
    """

    code = "auth:ErrUserAuth"


class InvalidNameError(UserAuthError):
    """Raised when a username does not match the naming pattern."""

    code = "auth:ErrInvalidName"


class PasswordMismatchError(UserAuthError):
    """Raised when a candidate password does not match the stored hash."""

    code = "auth:ErrPasswordMismatch"


class DeserializationError(UserAuthError):
    """Raised when a user document cannot be parsed."""

    code = "auth:ErrDeserialization"
