"""Log Parser - Data models"""

from dataclasses import dataclass, field
from typing import Any, Dict, NamedTuple, Tuple


@dataclass(frozen=True)
class LogEntry:
    """Parsed access log entry"""
    client_address: str
    timestamp: str
    method: str
    path: str
    protocol_version: str
    status_code: int
    response_size: int
    user_agent: str
    raw_line: str

    def __str__(self):
        return f"[{self.timestamp}] {self.client_address} {self.method} {self.path} -> {self.status_code}"


@dataclass(frozen=True)
class ParseResult:
    """Entries and failed lines of one parsed file, both in file order"""
    entries: Tuple[LogEntry, ...] = ()
    failed_lines: Tuple[str, ...] = ()

    @property
    def total_lines(self) -> int:
        return len(self.entries) + len(self.failed_lines)

    @property
    def success_count(self) -> int:
        return len(self.entries)

    @property
    def failure_count(self) -> int:
        return len(self.failed_lines)

    @property
    def success_rate(self) -> float:
        """Percentage of successfully parsed lines, 0.0 for an empty file"""
        if self.total_lines == 0:
            return 0.0
        return self.success_count / self.total_lines * 100

    @property
    def has_entries(self) -> bool:
        return bool(self.entries)

    @property
    def has_failures(self) -> bool:
        return bool(self.failed_lines)

    def summary(self) -> str:
        return (
            f"Parsed {self.total_lines} lines: "
            f"{self.success_count} successful ({self.success_rate:.1f}%), "
            f"{self.failure_count} failed"
        )

    def __str__(self):
        return self.summary()


class PathVisit(NamedTuple):
    path: str
    visit_count: int


class ClientActivity(NamedTuple):
    client_address: str
    request_count: int


@dataclass(frozen=True)
class AnalysisResult:
    """Summary statistics for a set of log entries"""
    unique_client_count: int
    top_paths: Tuple[PathVisit, ...]
    top_clients: Tuple[ClientActivity, ...]
    parse_result: ParseResult = field(default_factory=ParseResult)

    def to_dict(self) -> Dict[str, Any]:
        parse_result = self.parse_result
        return {
            'unique_clients': self.unique_client_count,
            'top_paths': [
                {'path': visit.path, 'visits': visit.visit_count}
                for visit in self.top_paths
            ],
            'top_clients': [
                {'client': activity.client_address, 'requests': activity.request_count}
                for activity in self.top_clients
            ],
            'parse_summary': {
                'total_lines': parse_result.total_lines,
                'successful': parse_result.success_count,
                'failed': parse_result.failure_count,
                'success_rate': round(parse_result.success_rate, 1),
                'failed_lines': list(parse_result.failed_lines)
            }
        }
