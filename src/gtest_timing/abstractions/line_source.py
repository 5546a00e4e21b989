from abc import ABC, abstractmethod
from typing import Iterator


class LineSource(ABC):
    """
    Abstract base class for anything that hands out lines of a log one at a time.
    """

    @abstractmethod
    def has_line(self) -> bool:
        """
        Check whether another line is available. Does not advance.

        Returns:
            bool: True if get_line() will return a line.
        """

    @abstractmethod
    def get_line(self) -> str:
        """
        Return the next line without its terminator and advance.

        Returns:
            str: The next line of text.

        Raises:
            EOFError: If no lines remain.
        """

    def close(self):
        """
        Release any resource held by the source.
        """

    def __iter__(self) -> Iterator[str]:
        while self.has_line():
            yield self.get_line()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
