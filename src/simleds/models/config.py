"""Application configuration model."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_serializer

from simleds.utils.persistence import PydanticPersistence

DEFAULT_HOME = Path.home() / ".simleds"


class AppConfig(BaseModel):
    """Application configuration and settings."""

    profiles_dir: Path = Field(
        default_factory=lambda: DEFAULT_HOME / "profiles",
        description="Directory searched for LED profiles given by name",
    )
    log_dir: Path = Field(
        default_factory=lambda: DEFAULT_HOME / "logs",
        description="Directory for the rotating log file",
    )
    poll_interval: float = Field(
        default=0.05,
        gt=0,
        description="Seconds between telemetry polls (bounds the blink cadence)",
    )
    led_count: int = Field(
        default=18,
        ge=1,
        description="Number of LEDs on the strip driven by replay",
    )

    @field_serializer("profiles_dir", "log_dir")
    def serialize_path(self, path: Path) -> str:
        """Serialize Path to string."""
        return str(path)

    def resolve_profile(self, name_or_path: str) -> Path:
        """Resolve a profile argument to a file.

        Existing paths win; otherwise the name is looked up in ``profiles_dir``
        with a ``.json`` suffix added when missing.
        """
        candidate = Path(name_or_path)
        if candidate.exists():
            return candidate
        if candidate.suffix != ".json":
            candidate = candidate.with_name(candidate.name + ".json")
        return self.profiles_dir / candidate.name

    @classmethod
    def default_path(cls) -> Path:
        return DEFAULT_HOME / "config.json"

    @classmethod
    def load_or_default(cls, path: Optional[Path] = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses ~/.simleds/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        return PydanticPersistence.load_json_or_default(path or cls.default_path(), cls)

    def save(self, path: Optional[Path] = None) -> None:
        """Save config to file, keeping a .bak of the previous version."""
        PydanticPersistence.save_json(self, path or self.default_path())
