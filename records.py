import json
import logging
from pathlib import Path
from config import RECORD_KEY, RECORD_PATH

logger = logging.getLogger(__name__)


class ScoreRecordStore:
    """Best-effort home of the fewest-attempts-to-win record.

    ``read`` returns 0 when there is no usable record and never raises.
    ``write`` may fail silently; the previous record then stays in place.
    """

    def read(self) -> int:
        raise NotImplementedError

    def write(self, value: int) -> None:
        raise NotImplementedError


def _parse(raw):
    if not isinstance(raw, str):
        return 0
    try:
        value = int(raw)
    except ValueError:
        return 0
    return value if value > 0 else 0


class JsonRecordStore(ScoreRecordStore):
    def __init__(self, path=RECORD_PATH, key=RECORD_KEY):
        self.path = Path(path)
        self.key = key

    def _load(self):
        with open(self.path, "r") as fh:
            data = json.load(fh)
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object in {self.path}")
        return data

    def read(self) -> int:
        try:
            data = self._load()
        except FileNotFoundError:
            return 0
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable record file %s: %s", self.path, exc)
            return 0
        return _parse(data.get(self.key))

    def write(self, value: int) -> None:
        try:
            data = self._load()
        except (OSError, ValueError):
            data = {}
        data[self.key] = str(int(value))
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w") as fh:
                json.dump(data, fh, indent=2)
        except (OSError, TypeError, ValueError) as exc:
            logger.warning("Could not save record to %s: %s", self.path, exc)
            return
        logger.info("Record saved: %d attempts", value)


class MemoryRecordStore(ScoreRecordStore):
    """Keeps the record string-encoded, the way it is stored on disk."""

    def __init__(self, value=0):
        self.value = str(value)
        self.writes = []

    def read(self) -> int:
        return _parse(self.value)

    def write(self, value: int) -> None:
        self.writes.append(value)
        self.value = str(value)
