"""Fundamental user credential record."""

import logging
from collections.abc import Iterable
from dataclasses import InitVar, dataclass, field

from pydantic import ValidationError

from .auth_exceptions import DeserializationError, PasswordMismatchError
from .models import SafeUser, UserRecord
from .utils import compare_hash_and_password, validate_name

LOGGER = logging.getLogger(__name__)
LOGGER.setLevel(logging.DEBUG)


@dataclass(frozen=True)
class User:
    """Data structure representing a user.

    Username and password hash are read-only once created. Roles are only
    changed through :meth:`add_role` and :meth:`remove_role`, and are never
    shared with another record.

    :param str username: The username of the user
    :param str password_hash: Hash of the password, see
        :func:`~userauth.auth.utils.generate_hash`
    :param initial_roles: Role keys the user starts with
    :raises InvalidNameError: If the username is not valid
    """

    username: str
    password_hash: str = field(repr=False)
    initial_roles: InitVar[Iterable[str]] = ()
    _roles: set[str] = field(init=False, default_factory=set)

    def __post_init__(self, initial_roles: Iterable[str]) -> None:
        """Validate the username and take a private copy of the roles."""
        validate_name(self.username)
        object.__setattr__(self, "_roles", set(initial_roles))

    def __hash__(self) -> int:
        return hash((self.username, self.password_hash))

    @classmethod
    def create(cls, username: str, password_hash: str) -> "User":
        """Create a new user without any roles.

        :param username: The username of the user
        :param password_hash: The already generated password hash
        :return: The new user
        :raises InvalidNameError: If the username is not valid
        """
        return cls(username, password_hash)

    @classmethod
    def from_wire(cls, record: UserRecord) -> "User":
        """Create a user from its wire form.

        :param record: The parsed wire record
        :return: The new user
        :raises InvalidNameError: If the username is not valid
        """
        return cls(
            record.username or "",
            record.password_hash or "",
            initial_roles=record.roles or (),
        )

    @classmethod
    def from_json(cls, document: str | bytes) -> "User":
        """Deserialize a JSON document into a user.

        :param document: JSON object with ``username``, ``hash`` and ``roles``
        :return: The new user
        :raises DeserializationError: If the document is malformed
        :raises InvalidNameError: If the username is not valid
        """
        try:
            record = UserRecord.model_validate_json(document)
        except ValidationError as exc:
            LOGGER.debug("Failed to parse user document: %s", exc)
            msg = "Malformed user document"
            raise DeserializationError(msg) from exc
        return cls.from_wire(record)

    def to_wire(self) -> UserRecord:
        """Convert this user to its wire form, with roles sorted ascending."""
        return UserRecord(
            username=self.username,
            password_hash=self.password_hash,
            roles=self.roles,
        )

    def to_json(self) -> str:
        """Serialize this user to a compact JSON document."""
        return self.to_wire().model_dump_json(by_alias=True)

    def clone(self) -> "User":
        """Create a copy of this user with its own role set."""
        return User(self.username, self.password_hash, initial_roles=self._roles)

    def get_safe_user(self) -> SafeUser:
        """Return the user info without the password hash."""
        return SafeUser.from_roles(self.username, self._roles)

    @property
    def roles(self) -> list[str]:
        """Role keys of this user, sorted ascending."""
        return sorted(self._roles)

    @property
    def role_keys(self) -> frozenset[str]:
        """Snapshot of the role keys of this user."""
        return frozenset(self._roles)

    def has_role(self, name: str) -> bool:
        """Check whether this user has exactly the given role.

        :param name: The role key
        :return: True if the user has the role, False otherwise
        """
        return name in self._roles

    def add_role(self, name: str) -> None:
        """Grant a role to this user.

        :param name: The role key
        """
        self._roles.add(name)

    def remove_role(self, name: str) -> None:
        """Revoke a role from this user, doing nothing if it is absent.

        :param name: The role key
        """
        self._roles.discard(name)

    def compare_password(self, candidate: str) -> None:
        """Check whether the given password matches the password of this user.

        :param candidate: The plaintext password to check
        :raises PasswordMismatchError: If the password does not match
        """
        try:
            compare_hash_and_password(self.password_hash, candidate)
        except PasswordMismatchError:
            LOGGER.debug("Password check failed for user: %s", self.username)
            raise


# The InitVar default is only needed by __init__, not as a class attribute.
del User.initial_roles
