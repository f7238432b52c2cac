"""
unical.formatter
----------------
Token-substitution formatting and the default ``Y-M-D [ERA]`` parse grammar.

Tokens (longest match wins at each position):
  YYYY YY        year (BCE years are shown as their unpadded magnitude)
  MMMM MMM MM M  month name, short name, zero-padded, bare
  DD D           day
  EEEE EEE E     weekday name, short name, first letter (Gregorian week)
  ERA            era label
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Dict, List, Optional, Tuple

from .core.errors import InvalidDateError
from .core.time import DAY_NAMES, DAY_NAMES_SHORT, day_of_week
from .core.types import CalendarDate

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = "YYYY-MM-DD"

TOKENS: Tuple[str, ...] = ("YYYY", "EEEE", "MMMM", "MMM", "EEE", "ERA", "YY", "DD", "MM", "M", "D", "E")
DATE_TOKENS = frozenset({"YYYY", "YY", "MMMM", "MMM", "MM", "M", "DD", "D"})

_DATE_RE = re.compile(r"^\s*(-?\d+)-(\d{1,2})-(\d{1,2})(?:\s+([^\d\s]\S*))?\s*$")


def display_year(year: int, era_name: str) -> Tuple[int, str]:
    """(shown year, era): year <= 0 becomes abs(year) + 1 BCE."""
    if year <= 0:
        return abs(year) + 1, "BCE"
    return year, era_name


def tokenize(pattern: str) -> list:
    """Split a pattern into tokens and literal runs, longest token first."""
    out: list = []
    i = 0
    literal = ""
    while i < len(pattern):
        for tok in TOKENS:
            if pattern.startswith(tok, i):
                if literal:
                    out.append(("lit", literal))
                    literal = ""
                out.append(("tok", tok))
                i += len(tok)
                break
        else:
            literal += pattern[i]
            i += 1
    if literal:
        out.append(("lit", literal))
    return out


def format_date(converter, d: CalendarDate, pattern: str = DEFAULT_PATTERN) -> str:
    return render_tokens(converter, d, tokenize(pattern))


def render_tokens(converter, d: CalendarDate, tokens: List[Tuple[str, str]]) -> str:
    """Substitute a tokenized pattern; ``("lit", text)`` entries pass through."""
    era_name = converter.info().era_name
    shown, era = display_year(d.year, era_name)
    year_s = str(shown)
    dow_cache: Dict[str, int] = {}

    def dow() -> int:
        if "v" not in dow_cache:
            dow_cache["v"] = day_of_week(converter.to_jdn(d.year, d.month, d.day))
        return dow_cache["v"]

    values: Dict[str, Callable[[], str]] = {
        "YYYY": lambda: year_s if era == "BCE" else year_s.zfill(4),
        "YY": lambda: year_s[-2:],
        "MMMM": lambda: converter.month_name(d.year, d.month),
        "MMM": lambda: converter.month_name(d.year, d.month, short=True),
        "MM": lambda: f"{d.month:02d}",
        "M": lambda: str(d.month),
        "DD": lambda: f"{d.day:02d}",
        "D": lambda: str(d.day),
        "EEEE": lambda: DAY_NAMES[dow()],
        "EEE": lambda: DAY_NAMES_SHORT[dow()],
        "E": lambda: DAY_NAMES_SHORT[dow()][0],
        "ERA": lambda: era,
    }

    return "".join(values[text]() if kind == "tok" else text for kind, text in tokens)


def parse_ymd(converter, text: str) -> Optional[CalendarDate]:
    """Parse ``[-]Y-M-D`` with an optional trailing era label; None when malformed or invalid."""
    m = _DATE_RE.match(text or "")
    if m is None:
        logger.debug("parse rejected %r for %s: no match", text, converter.kind)
        return None
    year, month, day = int(m.group(1)), int(m.group(2)), int(m.group(3))
    era = m.group(4)
    if era is not None:
        if era == "BCE":
            if year <= 0:
                logger.debug("parse rejected %r for %s: BCE needs a positive year", text, converter.kind)
                return None
            year = 1 - year
        elif era != converter.info().era_name or year <= 0:
            logger.debug("parse rejected %r for %s: era %r", text, converter.kind, era)
            return None
    try:
        converter.to_jdn(year, month, day)
    except InvalidDateError as e:
        logger.debug("parse rejected %r for %s: %s", text, converter.kind, e.reason)
        return None
    return converter.make_date(year, month, day)
