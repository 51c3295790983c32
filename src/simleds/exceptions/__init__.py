"""
Custom exception hierarchy for simleds.

```
SimLedsError (base)
├── ProfileError
│   ├── ProfileFileInvalidError
│   └── InvalidProfile
├── ConfigurationError
│   ├── ConfigFileInvalidError
│   └── ConfigValidationError
└── TelemetryRecordingError
```

Only profile loading fails hard at runtime: unknown containers are kept and
missing telemetry values are skipped by the effects.
"""

from .base import SimLedsError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import (
    ErrorContext,
    format_error_for_display,
    wrap_profile_error,
    wrap_pydantic_error,
)
from .profile import InvalidProfile, ProfileError, ProfileFileInvalidError
from .telemetry import TelemetryRecordingError

__all__ = [
    # Base
    "SimLedsError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Profile
    "InvalidProfile",
    "ProfileError",
    "ProfileFileInvalidError",
    # Telemetry
    "TelemetryRecordingError",
    # Handlers
    "ErrorContext",
    "format_error_for_display",
    "wrap_profile_error",
    "wrap_pydantic_error",
]
