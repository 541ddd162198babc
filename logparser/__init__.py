"""Log Parser package"""

from .patterns import VERSION, COMBINED_LOG_PATTERN
from .models import LogEntry, ParseResult, PathVisit, ClientActivity, AnalysisResult
from .errors import LogParserError, InvalidArgumentError, LogFileNotFoundError, LogReadError
from .parser import ApacheLogParser, normalize_path
from .analyzer import LogAnalyzer, rank_by_frequency
from .service import LogProcessingService, get_file_info
from .output import format_report, print_report

__all__ = [
    'VERSION', 'COMBINED_LOG_PATTERN',
    'LogEntry', 'ParseResult', 'PathVisit', 'ClientActivity', 'AnalysisResult',
    'LogParserError', 'InvalidArgumentError', 'LogFileNotFoundError', 'LogReadError',
    'ApacheLogParser', 'normalize_path',
    'LogAnalyzer', 'rank_by_frequency',
    'LogProcessingService', 'get_file_info',
    'format_report', 'print_report',
]
