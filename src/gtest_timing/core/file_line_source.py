import logging
from typing import Optional

from gtest_timing.abstractions.line_source import LineSource
from gtest_timing.config.config import Config
from gtest_timing.errors import FileOpenError

logger = logging.getLogger(__name__)


class FileLineSource(LineSource):
    """
    Streams lines from a text file, keeping one line of lookahead so that
    has_line() can answer without consuming anything.
    """

    def __init__(self, path: str, encoding: Optional[str] = None):
        """
        Open the file for reading.

        Args:
            path (str): Path of the log file.
            encoding (Optional[str]): Text encoding, defaults to Config.LOG_ENCODING.
                Undecodable bytes are replaced rather than raised.

        Raises:
            FileOpenError: If the file cannot be opened.
        """
        self.path = path
        try:
            # lines end at "\n" only; a lone "\r" stays part of the line
            self._file = open(
                path,
                "r",
                encoding=encoding or Config.LOG_ENCODING,
                errors="replace",
                newline="\n",
            )
        except OSError as e:
            logger.debug(f"Failed to open {path}: {e}")
            raise FileOpenError(path, e.strerror or str(e)) from e
        self._next = None
        self._advance()
        logger.debug(f"Opened {path} for reading.")

    def _advance(self):
        if self._file is None:
            self._next = None
            return
        line = self._file.readline()
        if line:
            if line.endswith("\r\n"):
                line = line[:-2]
            elif line.endswith("\n"):
                line = line[:-1]
            self._next = line
        else:
            self._next = None
            self.close()

    def has_line(self) -> bool:
        return self._next is not None

    def get_line(self) -> str:
        if self._next is None:
            raise EOFError(f"No lines remaining in {self.path}")
        line = self._next
        self._advance()
        return line

    def close(self):
        if self._file is not None:
            self._file.close()
            self._file = None
