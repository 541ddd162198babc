"""Log Parser - Core analysis engine"""

from collections import Counter
from typing import Iterable, List, Tuple

from .errors import InvalidArgumentError
from .models import AnalysisResult, ClientActivity, LogEntry, PathVisit
from .patterns import DEFAULT_TOP_N


def rank_by_frequency(keys: Iterable[str], top_n: int) -> List[Tuple[str, int]]:
    """Count keys and return the top_n as (key, count) pairs.

    Ordered by count descending, then key ascending, so equal counts
    always come out in the same order whatever the input order was.
    """
    counts = Counter(keys)
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return ranked[:top_n]


class LogAnalyzer:
    """Computes unique clients, top paths and top clients"""

    def analyze(self, entries: Iterable[LogEntry], top_n: int = DEFAULT_TOP_N) -> AnalysisResult:
        if entries is None:
            raise InvalidArgumentError("Log entries cannot be None.")
        if isinstance(top_n, bool) or not isinstance(top_n, int) or top_n < 1:
            raise InvalidArgumentError("Top count must be at least 1.")

        entries = list(entries)

        return AnalysisResult(
            unique_client_count=self.count_unique_clients(entries),
            top_paths=tuple(
                PathVisit(path, count)
                for path, count in rank_by_frequency((e.path for e in entries), top_n)
            ),
            top_clients=tuple(
                ClientActivity(client, count)
                for client, count in rank_by_frequency((e.client_address for e in entries), top_n)
            )
        )

    @staticmethod
    def count_unique_clients(entries: List[LogEntry]) -> int:
        return len({e.client_address for e in entries})
