"""Profile-related exceptions.

- ProfileError: Base class for LED profile errors
- ProfileFileInvalidError: Profile file is not valid JSON
- InvalidProfile: Profile content fails validation
"""

from typing import Any, Optional

from .base import SimLedsError


class ProfileError(SimLedsError):
    """LED profile is invalid or cannot be loaded."""
    pass


class ProfileFileInvalidError(ProfileError):
    """Profile file has invalid JSON syntax."""

    def __init__(self, file_path: str, parse_error: str):
        """
        Initialize profile file invalid error.

        Args:
            file_path: Path to the invalid profile file
            parse_error: The parsing error message
        """
        super().__init__(
            user_message="Profile file has invalid syntax",
            technical_message=f"JSON parse error in {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=(
                "Check that the profile was exported as JSON and is not truncated\n"
                f"  - Edit: {file_path}"
            ),
            file_path=file_path,
        )
        self.parse_error = parse_error


class InvalidProfile(ProfileError):
    """A profile field holds a value that cannot be used."""

    def __init__(
        self,
        field: str,
        value: Any,
        reason: str,
        file_path: Optional[str] = None,
    ):
        """
        Initialize invalid profile error.

        Args:
            field: Dotted location of the offending field
            value: The invalid value
            reason: Why the value is invalid
            file_path: Path to the profile file (optional)
        """
        recovery = f"Fix the '{field}' value in the profile"
        if file_path:
            recovery += f"\nProfile file: {file_path}"
        if "color" in field.lower():
            recovery += "\nColors are CSS names, '#rrggbb' or 'r,g,b' with components 0-255"
        elif "rpmmode" in field.lower().replace("_", ""):
            recovery += "\nRpmMode is 0 (rpm percentage), 1 (redline percentage) or 2 (rpm)"

        super().__init__(
            user_message=f"Invalid profile value for '{field}': {reason}",
            technical_message=f"Profile validation failed for {field}={value!r}: {reason}",
            recoverable=True,
            recovery_hint=recovery,
            file_path=file_path,
        )
        self.field = field
        self.value = value
        self.reason = reason
