"""Named room fixtures stored as JSON files."""

from __future__ import annotations
import json
import logging
import re
from pathlib import Path

from pydantic import ValidationError

from roomdims.models import RoomData


logger = logging.getLogger(__name__)

DEFAULT_FIXTURES_DIR = Path(__file__).resolve().parent.parent / "fixtures"

_NAME_RE = re.compile(r"^[A-Za-z0-9_-]+$")


class RoomFixtureError(LookupError):
    """A room fixture could not be found or parsed."""


class RoomFixtureLoader:
    """Loads `<name>.json` room snapshots from a directory."""

    def __init__(self, directory: Path | str = DEFAULT_FIXTURES_DIR) -> None:
        self.directory = Path(directory)

    def list_names(self) -> list[str]:
        if not self.directory.is_dir():
            return []
        return sorted(p.stem for p in self.directory.glob("*.json"))

    def load(self, name: str) -> RoomData:
        if not _NAME_RE.match(name):
            raise RoomFixtureError(f"Invalid room name: {name!r}")

        path = self.directory / f"{name}.json"
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise RoomFixtureError(f"Unknown room: {name}") from exc
        except OSError as exc:
            logger.warning("Could not read fixture %s: %s", path, exc)
            raise RoomFixtureError(f"Could not read room {name}") from exc

        try:
            return RoomData.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as exc:
            logger.warning("Invalid fixture %s: %s", path, exc)
            raise RoomFixtureError(f"Room {name} is not valid room data") from exc
