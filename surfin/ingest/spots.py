"""Spot name to MSW spot id mapping, loaded from a JSON file."""

import json
import logging
from pathlib import Path

from surfin.models.common import SpotId, SpotName

logger = logging.getLogger(__name__)


class SpotsError(Exception):
    """Raised when the spots file is missing or malformed."""


def normalize_spot_name(name: str) -> SpotName:
    """Lowercase and hyphenate, e.g. "Ormond Beach" -> "ormond-beach"."""
    return "-".join(name.lower().split())


class Spots:
    def __init__(self, spots: dict[SpotName, SpotId]):
        self.spots = spots

    @classmethod
    def from_path(cls, path: str | Path) -> "Spots":
        """Read a ``{"ormond-beach": 4203, ...}`` JSON object."""
        path = Path(path)
        try:
            with open(path) as f:
                raw = json.load(f)
        except FileNotFoundError as e:
            raise SpotsError(f"Couldn't find spots json file at {path}") from e
        except json.JSONDecodeError as e:
            raise SpotsError(f"Couldn't parse file {path} into spots json") from e

        if not isinstance(raw, dict):
            raise SpotsError(f"Expected a JSON object in {path}")
        try:
            spots = {str(name): int(spot_id) for name, spot_id in raw.items()}
        except (TypeError, ValueError) as e:
            raise SpotsError(f"Non-integer spot id in {path}: {e}") from e
        logger.debug("Loaded %d spots from %s", len(spots), path)
        return cls(spots)

    def write(self, path: str | Path) -> None:
        """Save as the JSON object ``from_path`` reads, creating parent dirs."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.spots, f, indent=2, sort_keys=True)
            f.write("\n")
        logger.debug("Wrote %d spots to %s", len(self.spots), path)

    def get_id(self, name: str) -> SpotId | None:
        return self.spots.get(normalize_spot_name(name))

    def items(self) -> list[tuple[SpotName, SpotId]]:
        return list(self.spots.items())

    def __len__(self) -> int:
        return len(self.spots)
