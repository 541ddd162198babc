"""Log Parser - Constants and patterns"""

import re

VERSION = "1.0.0"

DEFAULT_TOP_N = 3

DEFAULT_ENCODING = "utf-8"

# Response size placeholder meaning "no size recorded"
SIZE_PLACEHOLDER = '-'

# Combined log format, e.g.
# 177.71.128.21 - - [10/Jul/2018:22:21:28 +0200] "GET /intranet-analytics/ HTTP/1.1" 200 3574 "-" "Mozilla/5.0"
# Anchored at the start only; trailing fields after the user agent are ignored.
COMBINED_LOG_PATTERN = re.compile(
    r'^(?P<ip>\S+) \S+ \S+ '
    r'\[(?P<timestamp>[^\]]+)\] '
    r'"(?P<method>\S+) (?P<path>\S+) (?P<version>[^"]+)" '
    r'(?P<status>\d{3}) '
    r'(?P<size>\d+|-) '
    r'"(?P<referrer>[^"]*)" '
    r'"(?P<user_agent>[^"]*)"',
    re.IGNORECASE | re.ASCII
)
