"""Exception definitions for fork-publish"""

from ..constants import ErrorCode


class ForkPublishError(Exception):
    """Base exception for fork-publish"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class ConfigError(ForkPublishError):
    """Configuration error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_FORMAT_ERROR)


class PackageNotFoundError(ForkPublishError):
    """Package directory does not exist"""

    def __init__(self, package_dir):
        super().__init__(f"Package directory not found: {package_dir}", ErrorCode.PACKAGE_NOT_FOUND)
        self.package_dir = package_dir


class RegistryError(ForkPublishError):
    """Registry command failed"""

    def __init__(self, message: str, command: str = None, output: str = None):
        super().__init__(message, ErrorCode.REGISTRY_COMMAND_FAILED)
        self.command = command
        self.output = output


class ValidationError(ForkPublishError):
    """Package validation error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.VALIDATION_FAILED)


class PublishError(ForkPublishError):
    """Publishing operation error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.PUBLISH_FAILED)


class UserCancelledError(ForkPublishError):
    """User cancelled the operation"""

    def __init__(self, message: str = "Operation cancelled by user"):
        super().__init__(message, ErrorCode.USER_CANCELLED)


class GitError(ForkPublishError):
    """Git command failed"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.GIT_COMMAND_FAILED)
