class GTestTimingError(Exception):
    """
    Base class for errors reported by the comparison tool.
    """


class UsageError(GTestTimingError):
    """
    Raised when the command line cannot be turned into a list of runs.
    """


class FileOpenError(GTestTimingError):
    """
    Raised when a log file cannot be opened for reading.
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot open log file '{path}': {reason}")


class ConfigError(GTestTimingError, ValueError):
    """
    Raised when a setting has a value the tool does not support.
    """


class MetricsWriteError(GTestTimingError):
    """
    Raised when the metrics textfile cannot be written.
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write metrics file '{path}': {reason}")
