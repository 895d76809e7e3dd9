"""Public exception API"""

from .exceptions import (
    ForkPublishError,
    ConfigError,
    PackageNotFoundError,
    RegistryError,
    ValidationError,
    PublishError,
    UserCancelledError,
    GitError,
)

__all__ = [
    "ForkPublishError",
    "ConfigError",
    "PackageNotFoundError",
    "RegistryError",
    "ValidationError",
    "PublishError",
    "UserCancelledError",
    "GitError",
]
