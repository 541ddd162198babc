"""Log Parser - Combined log format parser"""

from pathlib import Path
from typing import List, Optional

from .errors import InvalidArgumentError, LogFileNotFoundError, LogReadError
from .log import get_logger
from .models import LogEntry, ParseResult
from .patterns import COMBINED_LOG_PATTERN, DEFAULT_ENCODING, SIZE_PLACEHOLDER

logger = get_logger(__name__)


def normalize_path(path: str) -> str:
    """Strip trailing slashes, keeping the root path "/" intact."""
    if not path.strip() or path == '/':
        return path
    return path.rstrip('/') or '/'


class ApacheLogParser:
    """Parses Apache/Nginx combined log format files"""

    def __init__(self, encoding: Optional[str] = None):
        self.encoding = encoding or DEFAULT_ENCODING

    def parse_line(self, line: str) -> Optional[LogEntry]:
        """Parse one line, returning None when it is not a complete entry."""
        if not line or not line.strip():
            return None

        match = COMBINED_LOG_PATTERN.match(line)
        if not match:
            return None

        # status and size are ASCII digits, size may also be the placeholder
        groups = match.groupdict()
        size = groups['size']

        return LogEntry(
            client_address=groups['ip'],
            timestamp=groups['timestamp'],
            method=groups['method'],
            path=normalize_path(groups['path']),
            protocol_version=groups['version'],
            status_code=int(groups['status']),
            response_size=0 if size == SIZE_PLACEHOLDER else int(size),
            user_agent=groups['user_agent'],
            raw_line=line
        )

    def parse_file(self, file_path: str) -> ParseResult:
        """Parse every non-blank line of a log file.

        Raises InvalidArgumentError for a blank path, LogFileNotFoundError
        when the file does not exist and LogReadError when reading fails.
        Lines read before a read error are discarded.
        """
        if not file_path or not str(file_path).strip():
            raise InvalidArgumentError("File path cannot be null or empty.")

        path = Path(file_path)
        if not path.is_file():
            raise LogFileNotFoundError(f"Log file not found: {file_path}")

        entries: List[LogEntry] = []
        failed_lines: List[str] = []

        try:
            with open(path, 'r', encoding=self.encoding, errors='replace') as f:
                for line_num, raw in enumerate(f, 1):
                    line = raw.rstrip('\n')
                    if not line.strip():
                        continue

                    entry = self.parse_line(line)
                    if entry:
                        entries.append(entry)
                    else:
                        logger.debug("Line %d did not parse: %s", line_num, line)
                        failed_lines.append(line)
        except OSError as e:
            logger.error("Error reading log file %s: %s", file_path, e)
            raise LogReadError(str(file_path), f"Error reading log file: {file_path}") from e

        result = ParseResult(entries=tuple(entries), failed_lines=tuple(failed_lines))
        logger.info("%s: %s", file_path, result.summary())
        return result
