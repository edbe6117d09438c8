"""Persistence of the highscore on disk."""

from __future__ import annotations

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

DATA_FOLDER_NAME = "SaveData"
HIGHSCORE_FILE_NAME = "highscore.txt"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"no integer at start of {text!r}")
    return int(match.group(1))


class HighscoreStore:
    """Reads and writes the best score in a file inside a data folder."""

    def __init__(self, folder: str | Path = DATA_FOLDER_NAME) -> None:
        self.folder = Path(folder)
        self.highscore = 0

    @property
    def path(self) -> Path:
        return self.folder / HIGHSCORE_FILE_NAME

    def read(self) -> int:
        """Load the saved highscore if there is one, and return the current value."""
        if not self.folder.is_dir():
            logger.info("No folder: %s", self.folder)
            return self.highscore
        if not self.path.exists():
            logger.info("No file: %s", self.path)
            return self.highscore
        with self.path.open(encoding="utf-8") as handle:
            first_line = handle.readline()
        score = _parse_leading_int(first_line)
        logger.info("Loaded highscore: %d from %s", score, self.path)
        self.highscore = score
        return score

    def write(self, score: int) -> None:
        """Record a new highscore and save it, creating the data folder if needed."""
        self.highscore = score
        if not self.folder.is_dir():
            try:
                self.folder.mkdir()
            except OSError as error:
                logger.error("Failed to create directory: %s Not saving highscore! (%s)", self.folder, error)
                return
        try:
            self.path.write_text(str(score), encoding="utf-8")
        except OSError as error:
            logger.error("%s could not be opened for writing! (%s)", self.path, error)
            return
        logger.info("Highscore of: %d written to %s", score, self.path)