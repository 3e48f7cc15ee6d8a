from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from . import config

log = logging.getLogger(__name__)


class JsonScoreStore:
    """High score kept in a small JSON object under a fixed key."""

    def __init__(self, path: Path | str = config.HIGH_SCORE_PATH, key: str = config.HIGH_SCORE_KEY):
        self.path = Path(path)
        self.key = key

    def _load(self) -> dict:
        if not self.path.is_file():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            log.warning("could not read high score from %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            log.warning("ignoring malformed high score file %s", self.path)
            return {}
        return data

    def get(self) -> int:
        value = self._load().get(self.key, 0)
        # bool is an int subclass; floats like 1e400 or 7.9 are not scores.
        if not isinstance(value, int) or isinstance(value, bool):
            log.warning("ignoring non-integer high score %r in %s", value, self.path)
            return 0
        return value

    def set(self, value: int) -> None:
        data = self._load()
        data[self.key] = int(value)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_name(self.path.name + ".tmp")
            tmp.write_text(json.dumps(data, indent=2), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as e:
            log.warning("could not save high score to %s: %s", self.path, e)


class MemoryScoreStore:
    def __init__(self, value: int = 0):
        self.value = value

    def get(self) -> int:
        return self.value

    def set(self, value: int) -> None:
        self.value = value
