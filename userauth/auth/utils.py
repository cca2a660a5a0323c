"""Password hashing and username validation helpers."""

import hashlib
import logging
import re

from .auth_exceptions import InvalidNameError, PasswordMismatchError

LOGGER = logging.getLogger(__name__)
LOGGER.setLevel(logging.DEBUG)

NAME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9_]*")


def generate_hash(password: str) -> str:
    """Generate the hash for a given password.

    :param password: The plaintext password
    :return: The lowercase hex SHA-256 digest of the UTF-8 encoded password,
        with lone surrogates encoded as-is
    """
    return hashlib.sha256(password.encode("utf-8", "surrogatepass")).hexdigest()


def compare_hash_and_password(stored_hash: str, password: str) -> None:
    """Check a plaintext password against a stored hash.

    :param stored_hash: The hash produced by :func:`generate_hash`
    :param password: The candidate plaintext password
    :raises PasswordMismatchError: If the password does not produce the stored hash
    """
    # TODO: switch to hmac.compare_digest once timing-safe comparison is
    # confirmed as a requirement by security review.
    if stored_hash == generate_hash(password):
        return
    LOGGER.debug("Password hash comparison failed")
    msg = "Password does not match"
    raise PasswordMismatchError(msg)


def validate_name(name: str) -> None:
    """Validate a username.

    A valid name starts with an ASCII letter, followed by any number of
    ASCII letters, digits or underscores.

    :param name: The username to validate
    :raises InvalidNameError: If the name does not match
    """
    if isinstance(name, str) and NAME_PATTERN.fullmatch(name):
        return
    LOGGER.debug("Invalid username: %r", name)
    msg = f"Invalid username: {name!r}"
    raise InvalidNameError(msg)
