import json
import logging
import os

from .achievements import ACHIEVEMENTS_BY_ID
from .config import *

logger = logging.getLogger(__name__)


def default_data_dir():
    """Directory holding the save files, overridable through the environment."""
    override = os.environ.get(DATA_DIR_ENV)
    if override:
        return os.path.abspath(override)
    return os.path.join(os.path.expanduser('~'), '.gridsnake')


class Storage:
    """High score and unlocked achievements, persisted as small JSON files.

    Reads never fail: a missing or malformed file yields 0 / an empty set.
    Writes are best-effort.
    """

    def __init__(self, data_dir=None):
        self.data_dir = data_dir or default_data_dir()
        self.highscore_file = os.path.join(self.data_dir, HIGHSCORE_FILE)
        self.achievements_file = os.path.join(self.data_dir, ACHIEVEMENTS_FILE)

    def _read_json(self, path):
        if not os.path.exists(path):
            return None
        try:
            with open(path, 'r') as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable save file %s: %s", path, e)
            return None

    def _write_json(self, path, data):
        try:
            os.makedirs(self.data_dir, exist_ok=True)
            with open(path, 'w') as f:
                json.dump(data, f)
        except OSError as e:
            logger.warning("Could not write %s: %s", path, e)

    def load_high_score(self):
        """Load high score from disk, return 0 if not found or on error."""
        data = self._read_json(self.highscore_file)
        if not isinstance(data, dict):
            return 0
        try:
            return int(data.get('highscore', 0))
        except (TypeError, ValueError):
            logger.warning("Malformed high score in %s", self.highscore_file)
            return 0

    def save_high_score(self, score):
        self._write_json(self.highscore_file, {'highscore': int(score)})

    def load_achievements(self):
        """Load unlocked achievement ids, skipping ones this build doesn't know."""
        data = self._read_json(self.achievements_file)
        if not isinstance(data, list):
            return set()
        return {a for a in data if isinstance(a, str) and a in ACHIEVEMENTS_BY_ID}

    def save_achievements(self, unlocked):
        self._write_json(self.achievements_file, sorted(unlocked))
