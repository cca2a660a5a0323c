from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class UserRecord(BaseModel):
    """Wire form of a user, as stored and exchanged in JSON."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    username: str | None = ""
    password_hash: str | None = Field(default="", alias="hash")
    roles: list[str] | None = None


class SafeUser(BaseModel):
    """User info without the password hash, safe to send in API responses."""

    model_config = ConfigDict(frozen=True)

    username: str
    roles: list[str]

    @classmethod
    def from_roles(cls, username: str, roles: set[str] | frozenset[str]) -> SafeUser:
        """Helper to build a safe view with roles sorted ascending

        Args:
            username: The username of the user
            roles: The role keys of the user

        Returns:
            SafeUser instance
        """
        return cls(username=username, roles=sorted(roles))
