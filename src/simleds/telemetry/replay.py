"""Replay of recorded telemetry."""

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from simleds.exceptions import TelemetryRecordingError

from .snapshot import TelemetrySnapshot

logger = logging.getLogger(__name__)


def read_telemetry(path: Union[str, Path]) -> Iterator[TelemetrySnapshot]:
    """Yield snapshots from a JSON-lines recording.

    Blank lines and lines starting with ``#`` are skipped.

    Raises:
        TelemetryRecordingError: If a line is not a valid snapshot
    """
    path = Path(path)
    count = 0
    with path.open(encoding="utf-8") as recording:
        for line_number, line in enumerate(recording, start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            try:
                snapshot = TelemetrySnapshot.model_validate_json(line)
            except ValidationError as e:
                first_error = e.errors()[0]
                raise TelemetryRecordingError(
                    str(path), line_number, first_error.get("msg", str(e))
                ) from e
            count += 1
            yield snapshot
    logger.debug(f"Replayed {count} telemetry snapshots from {path}")
