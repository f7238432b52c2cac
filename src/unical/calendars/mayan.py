"""
unical.calendars.mayan
----------------------
Fixed-cycle Mesoamerican calendars sharing the GMT correlation epoch
(JDN 584283): Tzolk'in, Haab', Long Count and the Aztec Xiuhpohualli.

None of these has leap days; the 365-day years drift against the solar year.
``year`` is a free-running cycle counter for the cyclic calendars: 1 for the
cycle starting at the epoch, -1 for the one before it (no cycle 0).
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Tuple

from ..core.types import CalendarDate, CalendarKind
from ..formatter import DATE_TOKENS, DEFAULT_PATTERN, render_tokens, tokenize
from .base import CalendarBase
from .names import MONTH_NAMES
from .specs import MAYAN_EPOCH

logger = logging.getLogger(__name__)

TZOLKIN_DAYS = 260
HAAB_DAYS = 365
CALENDAR_ROUND_DAYS = 18980

KIN, UINAL, TUN, KATUN, BAKTUN = 1, 20, 360, 7200, 144000


def _cycle_counter(index: int) -> int:
    return index + 1 if index >= 0 else index


def _cycle_index(counter: int) -> int:
    return counter - 1 if counter > 0 else counter


class _CycleCalendar(CalendarBase):
    epoch_jdn = MAYAN_EPOCH

    def validate(self, year: int, month: int, day: int) -> None:
        if year == 0:
            self._invalid(year, month, day, "cycle counter 0 does not exist")
        super().validate(year, month, day)


class TzolkinCalendar(_CycleCalendar):
    """month = day-name index 1..20, day = number 1..13. The epoch is 1 Imix."""
    kind = CalendarKind.MAYAN_TZOLKIN

    def months_in_year(self, year: int) -> int:
        return 20

    def days_in_month(self, year: int, month: int) -> int:
        return 13

    def position(self, month: int, day: int) -> int:
        """Day 0..259 within the cycle for (name index, number)."""
        k = month - 1
        return k + 20 * ((2 * (day - 1 - k)) % 13)

    def to_jdn(self, year: int, month: int, day: int) -> int:
        self.validate(year, month, day)
        return self.epoch_jdn + _cycle_index(year) * TZOLKIN_DAYS + self.position(month, day)

    def from_jdn(self, jdn: int) -> CalendarDate:
        c, p = divmod(jdn - self.epoch_jdn, TZOLKIN_DAYS)
        return self.make_date(_cycle_counter(c), p % 20 + 1, p % 13 + 1)

    def label(self, d: CalendarDate) -> str:
        return f"{d.day} {MONTH_NAMES[self.kind][d.month - 1]}"


class HaabCalendar(_CycleCalendar):
    """18 months of 20 days then a 5-day closing month (month 19)."""
    kind = CalendarKind.MAYAN_HAAB

    def months_in_year(self, year: int) -> int:
        return 19

    def days_in_month(self, year: int, month: int) -> int:
        return 5 if month == 19 else 20

    def to_jdn(self, year: int, month: int, day: int) -> int:
        self.validate(year, month, day)
        return self.epoch_jdn + _cycle_index(year) * HAAB_DAYS + (month - 1) * 20 + day - 1

    def from_jdn(self, jdn: int) -> CalendarDate:
        c, r = divmod(jdn - self.epoch_jdn, HAAB_DAYS)
        return self.make_date(_cycle_counter(c), r // 20 + 1, r % 20 + 1)

    def label(self, d: CalendarDate) -> str:
        return f"{d.day} {MONTH_NAMES[self.kind][d.month - 1]}"


class AztecXiuhpohualliCalendar(HaabCalendar):
    kind = CalendarKind.AZTEC_XIUHPOHUALLI


# ------------------------------------------------------------
# Long Count
# ------------------------------------------------------------

LongCount = Tuple[int, int, int, int, int]

_LC_RE = re.compile(r"^\s*(-?\d+)\.(\d{1,2})\.(\d{1,2})\.(\d{1,2})\.(\d{1,2})(?:\s+(BCE))?\s*$")


def encode_day(tun: int, uinal: int, kin: int) -> int:
    return tun * 400 + uinal * 20 + kin


def decode_day(day: int) -> Tuple[int, int, int]:
    tun, rest = divmod(day, 400)
    uinal, kin = divmod(rest, 20)
    return tun, uinal, kin


class LongCountCalendar(CalendarBase):
    """
    (year, month, day) = (baktun, katun, tun*400 + uinal*20 + kin).

    Baktun is floor-based, so dates before the epoch carry a negative baktun
    and non-negative lower units.
    """
    kind = CalendarKind.MAYAN_LONGCOUNT
    epoch_jdn = MAYAN_EPOCH

    def months_in_year(self, year: int) -> int:
        return 20

    def validate(self, year: int, month: int, day: int) -> None:
        if not (0 <= month <= 19):
            self._invalid(year, month, day, "katun must be in 0..19")
        if day < 0:
            self._invalid(year, month, day, "encoded day must be non-negative")
        tun, uinal, _ = decode_day(day)
        if tun > 19:
            self._invalid(year, month, day, "tun must be in 0..19")
        if uinal > 17:
            self._invalid(year, month, day, "uinal must be in 0..17")

    def to_jdn(self, year: int, month: int, day: int) -> int:
        self.validate(year, month, day)
        tun, uinal, kin = decode_day(day)
        return self.epoch_jdn + year * BAKTUN + month * KATUN + tun * TUN + uinal * UINAL + kin

    def from_jdn(self, jdn: int) -> CalendarDate:
        b, rest = divmod(jdn - self.epoch_jdn, BAKTUN)
        k, rest = divmod(rest, KATUN)
        t, rest = divmod(rest, TUN)
        u, kin = divmod(rest, UINAL)
        return self.make_date(b, k, encode_day(t, u, kin))

    def units(self, d: CalendarDate) -> LongCount:
        return (d.year, d.month) + decode_day(d.day)

    def from_units(self, baktun: int, katun: int, tun: int, uinal: int, kin: int) -> CalendarDate:
        if not (0 <= kin <= 19):
            self._invalid(baktun, katun, encode_day(tun, uinal, kin), "kin must be in 0..19")
        if not (0 <= uinal <= 17) or not (0 <= tun <= 19):
            self._invalid(baktun, katun, encode_day(tun, uinal, kin), "tun/uinal out of range")
        d = encode_day(tun, uinal, kin)
        self.validate(baktun, katun, d)
        return self.make_date(baktun, katun, d)

    def format(self, d: CalendarDate, pattern: str = DEFAULT_PATTERN) -> str:
        """The run of year/month/day tokens renders as b.k.t.u.k; weekday and era tokens resolve as usual."""
        tokens = tokenize(pattern)
        at = [i for i, (kind, text) in enumerate(tokens) if kind == "tok" and text in DATE_TOKENS]
        if at:
            notation = ".".join(str(x) for x in self.units(d))
            tokens[at[0]:at[-1] + 1] = [("lit", notation)]
        return render_tokens(self, d, tokens).rstrip()

    def parse(self, text: str) -> Optional[CalendarDate]:
        m = _LC_RE.match(text or "")
        if m is None:
            logger.debug("parse rejected %r for %s: no match", text, self.kind)
            return None
        b, k, t, u, kin = (int(g) for g in m.groups()[:5])
        if m.group(6) and b > 0:
            logger.debug("parse rejected %r for %s: BCE needs baktun <= 0", text, self.kind)
            return None
        if not (0 <= kin <= 19 and 0 <= u <= 17 and 0 <= t <= 19 and 0 <= k <= 19):
            return None
        return self.make_date(b, k, encode_day(t, u, kin))
