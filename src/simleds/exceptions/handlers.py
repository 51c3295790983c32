"""
Centralized error handling utilities.

Low-level errors (pydantic validation, JSON syntax, I/O) are converted
into SimLedsError subclasses here so the CLI can show a short message and
a recovery hint while the log file keeps the technical details.

| Scenario | Use This |
|----------|----------|
| Profile fails validation | `wrap_profile_error(e, path)` |
| Config fails validation | `wrap_pydantic_error(e, path)` |
| Show any error in the CLI | `format_error_for_display(e)` |
| Critical section with auto-logging | `with ErrorContext("load profile"): ...` |
"""

import logging
from typing import Any, Optional

from pydantic import ValidationError

from .base import SimLedsError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .profile import InvalidProfile, ProfileError, ProfileFileInvalidError


logger = logging.getLogger(__name__)


class ErrorContext:
    """
    Context manager for error handling with automatic logging.

    Example:
        ```python
        with ErrorContext("load profile", re_raise=False) as ctx:
            profile = load_profile(path)

        if ctx.error:
            print(f"Failed: {ctx.error}")
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        re_raise: bool = True
    ):
        """
        Initialize error context.

        Args:
            operation: Description of the operation
            logger_instance: Logger to use (defaults to module logger)
            re_raise: Whether to re-raise exceptions
        """
        self.operation = operation
        self.logger = logger_instance or logger
        self.re_raise = re_raise
        self.error: Optional[BaseException] = None

    def __enter__(self):
        """Enter the context."""
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """
        Exit the context and handle any exceptions.

        Returns:
            True if exception should be suppressed, False otherwise
        """
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        self.error = exc_val

        if isinstance(exc_val, SimLedsError):
            self.logger.error(f"Failed to {self.operation}: {exc_val.technical_message}")
        else:
            self.logger.error(f"Failed to {self.operation}: {exc_val}", exc_info=True)

        return not self.re_raise


def _json_parse_error(error: ValidationError) -> Optional[str]:
    """Return the JSON syntax message if the validation error is a parse failure."""
    for err in error.errors():
        if err.get("type") == "json_invalid":
            return err.get("ctx", {}).get("error") or err.get("msg", "invalid JSON")
    return None


def _location(err: dict[str, Any]) -> str:
    return ".".join(str(loc) for loc in err.get("loc", ("unknown",))) or "document"


def _summarize(errors: list[dict[str, Any]]) -> tuple[str, Any, str]:
    """Collapse pydantic error dicts into (field, value, message)."""
    if len(errors) == 1:
        first_error = errors[0]
        return (
            _location(first_error),
            first_error.get("input"),
            first_error.get("msg", "validation failed"),
        )

    error_lines = [f"  - {_location(err)}: {err.get('msg', 'validation failed')}" for err in errors]
    combined_msg = f"{len(errors)} validation errors:\n" + "\n".join(error_lines)
    return "multiple fields", None, combined_msg


def wrap_pydantic_error(error: ValidationError, file_path: str) -> ConfigurationError:
    """
    Convert a pydantic validation error raised while loading the app config.

    Args:
        error: The pydantic ValidationError
        file_path: Path to the config file that failed validation

    Returns:
        ConfigFileInvalidError for JSON syntax errors, ConfigValidationError otherwise
    """
    parse_error = _json_parse_error(error)
    if parse_error is not None:
        return ConfigFileInvalidError(file_path, parse_error)

    field, value, reason = _summarize(error.errors())
    return ConfigValidationError(field=field, value=value, error_msg=reason, file_path=file_path)


def wrap_profile_error(error: ValidationError, file_path: Optional[str] = None) -> ProfileError:
    """
    Convert a pydantic validation error raised while parsing an LED profile.

    The dotted field location includes the container tag for nested
    containers, e.g. ``LedContainers.0.RPMContainer.StartColor``.

    Args:
        error: The pydantic ValidationError
        file_path: Path to the profile file (optional)

    Returns:
        ProfileFileInvalidError for JSON syntax errors, InvalidProfile otherwise
    """
    parse_error = _json_parse_error(error)
    if parse_error is not None:
        return ProfileFileInvalidError(file_path or "<string>", parse_error)

    field, value, reason = _summarize(error.errors())
    return InvalidProfile(field=field, value=value, reason=reason, file_path=file_path)


def format_error_for_display(error: BaseException) -> tuple[str, Optional[str]]:
    """
    Format an exception for display in the CLI.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint)
    """
    if isinstance(error, SimLedsError):
        return error.user_message, error.recovery_hint

    if isinstance(error, FileNotFoundError):
        return f"File not found: {error.filename or error}", "Check the path and try again"

    if isinstance(error, PermissionError):
        return f"Permission denied: {error.filename or error}", "Check file permissions"

    return f"Unexpected error: {error}", None
