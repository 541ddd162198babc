"""Log Parser - Parse and analyze orchestration"""

from dataclasses import replace
from datetime import datetime
from pathlib import Path

from .contracts import Analyzer, LogParser
from .log import get_logger
from .models import AnalysisResult
from .patterns import DEFAULT_TOP_N

logger = get_logger(__name__)


class LogProcessingService:
    """Runs a parser and an analyzer over one log file"""

    def __init__(self, parser: LogParser, analyzer: Analyzer):
        self.parser = parser
        self.analyzer = analyzer

    def process_file(self, file_path: str, top_n: int = DEFAULT_TOP_N) -> AnalysisResult:
        parse_result = self.parser.parse_file(file_path)
        if parse_result.has_failures:
            logger.warning("%d of %d lines in %s could not be parsed",
                           parse_result.failure_count, parse_result.total_lines, file_path)

        result = self.analyzer.analyze(parse_result.entries, top_n)
        return replace(result, parse_result=parse_result)


def get_file_info(file_path: str) -> str:
    """Name, size, line count and modification time of a file."""
    path = Path(file_path)
    if not path.is_file():
        return f"File not found: {file_path}"

    stat = path.stat()
    with open(path, 'rb') as f:
        line_count = sum(1 for _ in f)
    modified = datetime.fromtimestamp(stat.st_mtime)

    return (
        f"File: {path.name}\n"
        f"Size: {stat.st_size:,} bytes\n"
        f"Lines: {line_count:,}\n"
        f"Last Modified: {modified:%Y-%m-%d %H:%M:%S}"
    )
