"""User credential records package."""

from .auth import SafeUser, User, generate_hash
from .config import AppConfig, configure_logging, load_config

__all__ = [
    "AppConfig",
    "SafeUser",
    "User",
    "configure_logging",
    "generate_hash",
    "load_config",
]
