"""LED profile model and loading."""

import logging
from pathlib import Path
from typing import Optional, Union
from uuid import UUID

from pydantic import Field, ValidationError

from simleds.exceptions import ProfileFileInvalidError, wrap_profile_error

from .base import ProfileModel
from .containers import LedContainer

logger = logging.getLogger(__name__)


class LedProfile(ProfileModel):
    """A lighting profile: ordered top-level LED containers plus metadata.

    Brightness fields and the embedded script are carried along but not
    applied by the engine.
    """

    name: str
    profile_id: UUID
    global_brightness: float = Field(default=1.0, description="Brightness of all LEDs (0-1)")
    use_profile_brightness: bool = False
    automatic_switch: bool = False
    embedded_javascript: Optional[str] = None
    game_code: Optional[str] = None
    led_containers: list[LedContainer] = Field(default_factory=list)

    @classmethod
    def from_json(cls, text: Union[str, bytes], source: Optional[str] = None) -> "LedProfile":
        """Parse a profile document.

        Args:
            text: The JSON document
            source: Where the document came from, used in error messages

        Raises:
            ProfileFileInvalidError: If the document is not valid JSON
            InvalidProfile: If a field holds an unusable value
        """
        try:
            return cls.model_validate_json(text)
        except ValidationError as e:
            raise wrap_profile_error(e, source) from e

    @classmethod
    def load(cls, path: Path) -> "LedProfile":
        """Read and parse a profile file."""
        content = path.read_text(encoding="utf-8-sig")
        if not content.strip():
            raise ProfileFileInvalidError(str(path), "File is empty")

        profile = cls.from_json(content, source=str(path))
        logger.info(
            f"Loaded profile '{profile.name}' from {path} "
            f"({len(profile.led_containers)} top-level containers)"
        )
        return profile


def load_profile(path: Union[str, Path]) -> LedProfile:
    """Load an LED profile from a JSON file."""
    return LedProfile.load(Path(path))
