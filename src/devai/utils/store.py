import logging
import os
import stat
from pathlib import Path

from devai.errors import FileSystemError, PathIsDirectory
from devai.utils.standup import merge_text

logger = logging.getLogger(__name__)


class StandupStore:
    """
    Flat text file holding the merged standup report.

    Every write re-renders and replaces the whole file. Concurrent
    invocations against one path are not coordinated; the last writer wins.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path).expanduser()

    def exists(self) -> bool:
        """
        Probe the path once. Raises PathIsDirectory for a directory and
        FileSystemError for any stat failure other than "not found".
        """
        try:
            st = os.stat(self.path)
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise FileSystemError(str(exc)) from exc
        if stat.S_ISDIR(st.st_mode):
            raise PathIsDirectory(self.path)
        return True

    def read(self) -> str:
        return self._read() if self.exists() else ""

    def write(self, text: str) -> None:
        self.exists()
        self._write(text)

    def merge(self, fragment: str, existed: bool | None = None) -> str:
        """
        Merge a freshly formatted fragment into the file and return the result.

        ``existed`` is the result of an earlier ``exists()`` call; passing it
        skips a second probe of the path.
        """
        if existed is None:
            existed = self.exists()
        if existed:
            existing = self._read()
        else:
            logger.debug("%s does not exist yet, starting from an empty report", self.path)
            existing = ""
        merged = merge_text(existing, fragment)
        self._write(merged)
        return merged

    def _read(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise FileSystemError(str(exc)) from exc

    def _write(self, text: str) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise FileSystemError(str(exc)) from exc
        logger.info("Standup report written to %s", self.path)
