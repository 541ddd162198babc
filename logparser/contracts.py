"""Log Parser - Parser and analyzer capabilities

LogProcessingService depends on these rather than on the concrete classes,
so tests can hand it stand-ins.
"""

from typing import Iterable, Optional, Protocol

from .models import AnalysisResult, LogEntry, ParseResult
from .patterns import DEFAULT_TOP_N


class LogParser(Protocol):
    def parse_file(self, file_path: str) -> ParseResult:
        ...

    def parse_line(self, line: str) -> Optional[LogEntry]:
        ...


class Analyzer(Protocol):
    def analyze(self, entries: Iterable[LogEntry], top_n: int = DEFAULT_TOP_N) -> AnalysisResult:
        ...
