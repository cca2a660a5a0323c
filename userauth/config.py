"""Configuration management for the user records package.

This module provides utilities for loading configuration from environment
variables and configuring logging.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from userauth.auth import User, generate_hash

LOGGER = logging.getLogger(__name__)
LOGGER.setLevel(logging.DEBUG)


def configure_logging(app_config: "AppConfig") -> None:
    """Set the root log level from the configuration, defaulting to INFO.

    :param app_config: The application configuration instance
    """
    level = logging.INFO
    if app_config.logging_level:
        named_level = logging.getLevelName(app_config.logging_level.upper())
        if isinstance(named_level, int):
            level = named_level
        else:
            LOGGER.warning(
                "Unknown LOGGING_LEVEL %s, falling back to INFO",
                app_config.logging_level,
            )
    logging.basicConfig(level=level, force=True)


@dataclass
class AppConfig:
    """Configuration loaded from environment variables.

    **Usage:**

    .. code-block:: python

        config = load_config(".env")
        configure_logging(config)
        user = config.new_user("alice", "secret123")
    """

    # Logging configuration
    logging_level: str | None = field(
        default_factory=lambda: os.getenv("LOGGING_LEVEL"),
    )

    # Roles granted to every new user
    default_roles: list[str] = field(
        default_factory=lambda: AppConfig._getenv_list("DEFAULT_ROLES"),
    )

    @staticmethod
    def _getenv_list(var_name: str) -> list[str]:
        """Get a comma-separated environment variable as a list of strings.

        :param var_name: Name of the environment variable
        :return: The non-empty, stripped items, or an empty list if unset
        """
        value = os.getenv(var_name, "")
        return [item.strip() for item in value.split(",") if item.strip()]

    def new_user(self, username: str, password: str) -> User:
        """Create a user from a plaintext password with the default roles.

        :param username: The username of the user
        :param password: The plaintext password, hashed before storing
        :return: The new user
        :raises InvalidNameError: If the username is not valid
        """
        user = User.create(username, generate_hash(password))
        for role in self.default_roles:
            user.add_role(role)
        LOGGER.debug("Created user %s with roles %s", username, self.default_roles)
        return user


def load_config(env_file: str | Path | None = None) -> AppConfig:
    """Load configuration, reading a .env file first if one is given.

    :param env_file: Optional path to a dotenv file
    :return: An AppConfig instance populated from environment variables
    """
    if env_file:
        load_dotenv(dotenv_path=env_file)
    return AppConfig()
