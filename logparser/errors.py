"""Log Parser - Error types"""


class LogParserError(Exception):
    """Base class for all log parser errors"""


class InvalidArgumentError(LogParserError, ValueError):
    """Raised for a blank file path or a top count below 1"""


class LogFileNotFoundError(LogParserError, FileNotFoundError):
    """Raised when the log file does not exist"""


class LogReadError(LogParserError, OSError):
    """Raised when reading an existing log file fails part way through"""

    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path
