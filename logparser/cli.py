"""Log Parser - Command line interface"""

import argparse
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from .analyzer import LogAnalyzer
from .config import get_settings
from .errors import InvalidArgumentError, LogFileNotFoundError
from .log import get_logger, setup_logging
from .output import print_failed_lines, print_report, report_to_json
from .parser import ApacheLogParser
from .patterns import DEFAULT_TOP_N, VERSION
from .service import LogProcessingService, get_file_info

logger = get_logger(__name__)

EPILOG = """\
Example:
  logparser ./logs/access.log

Output:
  - Number of unique IP addresses
  - Most visited URLs
  - Most active IP addresses
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="logparser",
        description="Log Parser - Analyzes Apache/Nginx combined format access logs",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("logfile", nargs="?", help="Log file to analyze")
    parser.add_argument("-n", "--top", type=int,
                        help=f"Number of top URLs and IPs to show "
                             f"(default: LOGPARSER_TOP_N or {DEFAULT_TOP_N})")
    parser.add_argument("-o", "--output", help="Output file (JSON)")
    parser.add_argument("-j", "--json", action="store_true", help="JSON output only")
    parser.add_argument("--show-failed", action="store_true", help="List lines that failed to parse")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"LogParser v{VERSION}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.logfile is None:
        parser.print_help()
        return 0

    console = Console()
    err_console = Console(stderr=True)

    try:
        settings = get_settings()
        setup_logging("DEBUG" if args.verbose else settings.log_level, console=err_console)
        top_n = args.top if args.top is not None else settings.top_n
        service = LogProcessingService(ApacheLogParser(encoding=settings.encoding), LogAnalyzer())

        if not args.json:
            console.print("=== Log Parser ===", style="bold cyan")
            console.print()
            console.print(get_file_info(args.logfile), markup=False, highlight=False, soft_wrap=True)
            console.print()

        result = service.process_file(args.logfile, top_n=top_n)

        if args.json:
            console.print(report_to_json(result), markup=False, highlight=False, soft_wrap=True)
        else:
            print_report(result, console)
            if args.show_failed:
                print_failed_lines(result.parse_result, console)

        if args.output:
            with open(args.output, 'w', encoding='utf-8') as f:
                f.write(report_to_json(result))
            if not args.json:
                console.print(f"\n[green]Report saved to:[/] {escape(args.output)}")

    except LogFileNotFoundError as e:
        err_console.print(f"Error: {e}", markup=False, highlight=False, soft_wrap=True)
        err_console.print("Please check the file path and try again.")
        return 1
    except InvalidArgumentError as e:
        err_console.print(f"Error: {e}", markup=False, highlight=False, soft_wrap=True)
        return 1
    except Exception as e:
        logger.debug("Unhandled error", exc_info=True)
        err_console.print(f"An unexpected error occurred: {e}", markup=False, highlight=False, soft_wrap=True)
        err_console.print_exception()
        return 2

    return 0
