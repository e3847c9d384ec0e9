from __future__ import annotations

import json
import logging
from pathlib import Path

from . import config

log = logging.getLogger(__name__)


class HighScoreStore:
    """The one persisted value: a non-negative integer kept in a JSON file."""

    def __init__(self, path=None, key: str = config.HIGH_SCORE_KEY):
        self.path = Path(path) if path is not None else config.HIGH_SCORE_FILE
        self.key = key
        self._saved = None

    def load(self) -> int:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            score = data.get(self.key, 0)
        except FileNotFoundError:
            score = 0
        except (OSError, ValueError, AttributeError) as e:
            log.warning("ignoring unreadable high score file %s: %s", self.path, e)
            score = 0
        if isinstance(score, bool) or not isinstance(score, int):
            log.warning("ignoring non-integer high score %r in %s", score, self.path)
            score = 0
        if score < 0:
            log.warning("ignoring negative high score %d in %s", score, self.path)
            score = 0
        self._saved = score
        return score

    def save(self, score: int) -> bool:
        """Store ``score`` if it beats the saved value. Returns True if written."""
        if self._saved is None:
            self.load()
        if score <= self._saved:
            return False
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps({self.key: score}), encoding="utf-8")
        except OSError as e:
            log.warning("could not save high score to %s: %s", self.path, e)
            return False
        self._saved = score
        log.info("new high score %d", score)
        return True
