"""Parsing helpers for price files: delimiter detection and Chinese dates."""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

# Candidate delimiters in code-point order; ties go to the earliest one.
_DELIMITERS = ("\t", ",", ";", "|")

_CHINESE_DATE = re.compile(r"([0-9]{4})年([0-9]{1,2})月([0-9]{1,2})日")

_YEAR, _MONTH, _DAY = "年", "月", "日"


def detect_delimiter(line: str) -> str:
    """Return the most frequent of tab, comma, semicolon and pipe in line.

    Ties, including a line with none of them, go to the delimiter with the
    lowest code point, so a line without any delimiter yields a tab.
    """
    best = _DELIMITERS[0]
    best_count = -1
    for delimiter in _DELIMITERS:
        count = line.count(delimiter)
        if count > best_count:
            best, best_count = delimiter, count
    return best


def _is_digits(text: str) -> bool:
    return bool(text) and all("0" <= char <= "9" for char in text)


def manually_parse_chinese_date(date_str: str) -> str | None:
    """Parse a date such as "2025年9月1日" by locating its marker characters.

    Returns the date as YYYY-MM-DD, or None if the text does not fit.
    """
    year_pos = date_str.find(_YEAR)
    month_pos = date_str.find(_MONTH)
    day_pos = date_str.find(_DAY)
    if min(year_pos, month_pos, day_pos) < 0:
        return None
    if not year_pos < month_pos < day_pos:
        return None
    if year_pos < 4:
        return None

    year = date_str[year_pos - 4:year_pos]
    month = date_str[year_pos + 1:month_pos]
    day = date_str[month_pos + 1:day_pos]
    if not (_is_digits(year) and _is_digits(month) and _is_digits(day)):
        return None
    return f"{year}-{month.rjust(2, '0')}-{day.rjust(2, '0')}"


def parse_chinese_date(date_str: str) -> str:
    """Normalise a Chinese date to YYYY-MM-DD.

    Text that already contains '-' or '/' is returned unchanged, as is text
    that cannot be parsed (with a warning logged).
    """
    if "-" in date_str or "/" in date_str:
        return date_str

    match = _CHINESE_DATE.fullmatch(date_str)
    if match:
        year, month, day = match.groups()
        return f"{year}-{month.rjust(2, '0')}-{day.rjust(2, '0')}"

    parsed = manually_parse_chinese_date(date_str)
    if parsed is not None:
        return parsed

    logger.warning("cannot parse date %r, keeping it as is", date_str)
    return date_str