"""Root of the simleds error hierarchy.

Errors carry a short message for the CLI banner, a detailed one for the
log file, and usually the profile, config or recording file they came from.
"""

from typing import Optional


class SimLedsError(Exception):
    """
    Base exception for all simleds errors.

    Attributes:
        user_message: One line shown in the CLI error banner
        technical_message: Detailed message written to the log
        recoverable: Whether fixing the input file and retrying can succeed
        recovery_hint: What to change, shown below the banner
        file_path: File the error was raised for, if any
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
        file_path: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint
        self.file_path = file_path

    def __str__(self) -> str:
        return self.user_message
