"""Log Parser - Report output"""

import json
from typing import List, Optional, Tuple

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .models import AnalysisResult, ParseResult

RULE_WIDTH = 70


def _report_lines(result: AnalysisResult) -> List[Tuple[str, Optional[str]]]:
    lines = [
        ("=== Log Analysis Results ===", "bold cyan"),
        ("", None),
        (f"Unique IP Addresses: {result.unique_client_count}", None),
        ("", None),
        ("Most Visited URLs:", "bold"),
    ]
    for i, visit in enumerate(result.top_paths, 1):
        lines.append((f"  {i}. {visit.path} - {visit.visit_count} visits", None))
    lines.append(("", None))

    lines.append(("Most Active IP Addresses:", "bold"))
    for i, activity in enumerate(result.top_clients, 1):
        lines.append((f"  {i}. {activity.client_address} - {activity.request_count} requests", None))
    lines.append(("", None))

    parse_result = result.parse_result
    style = "yellow" if parse_result.has_failures else "green"
    lines.append((f"Parse Summary: {parse_result.summary()}", style))
    return lines


def format_report(result: AnalysisResult) -> str:
    return "\n".join(text for text, _ in _report_lines(result))


def report_to_json(result: AnalysisResult) -> str:
    return json.dumps(result.to_dict(), indent=2)


def print_report(result: AnalysisResult, console: Console):
    console.print("═" * RULE_WIDTH, style="cyan")
    for text, style in _report_lines(result):
        console.print(text, style=style, markup=False, highlight=False, soft_wrap=True)
    console.print("═" * RULE_WIDTH, style="cyan")


def print_failed_lines(parse_result: ParseResult, console: Console):
    if not parse_result.has_failures:
        return

    console.print("\n" + "─" * RULE_WIDTH, style="cyan")
    console.print(f"FAILED LINES ({parse_result.failure_count})", style="bold yellow")
    table = Table(box=box.ROUNDED)
    table.add_column("#", style="yellow", justify="right")
    table.add_column("Line", style="white", overflow="fold")
    for i, line in enumerate(parse_result.failed_lines, 1):
        table.add_row(str(i), Text(line))
    console.print(table)
