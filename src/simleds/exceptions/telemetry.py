"""Telemetry recording exceptions."""

from .base import SimLedsError


class TelemetryRecordingError(SimLedsError):
    """A recorded telemetry line cannot be read."""

    def __init__(self, file_path: str, line_number: int, error_msg: str):
        """
        Initialize telemetry recording error.

        Args:
            file_path: Path to the JSON-lines recording
            line_number: 1-based line that failed to parse
            error_msg: Why the line could not be read
        """
        super().__init__(
            user_message=f"Telemetry recording line {line_number} is invalid: {error_msg}",
            technical_message=f"Failed to read {file_path}:{line_number}: {error_msg}",
            recoverable=True,
            recovery_hint=f"Each line of {file_path} must be one JSON telemetry snapshot",
            file_path=file_path,
        )
        self.line_number = line_number
