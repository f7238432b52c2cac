"""
unical.diagnostics.pretty_month
-------------------------------
One month of any month-structured calendar as a Monday-first grid. Each cell
shows the native day number over the Gregorian month-day.
"""

from __future__ import annotations

import argparse
from typing import Iterable, List, Optional, Tuple

import unical
from unical.core.time import DAY_NAMES_SHORT, day_of_week, jdn_to_gregorian

CELL_WIDTH = 6
# Monday-first column order over the 0=Sunday weekday index
COLUMNS = (1, 2, 3, 4, 5, 6, 0)

Cell = Tuple[str, str]
BLANK: Cell = ("", "")


def dow_header(width: int = CELL_WIDTH) -> str:
    return " ".join(DAY_NAMES_SHORT[i][:2].ljust(width) for i in COLUMNS).rstrip()


def month_jdns(calendar: str, year: int, month: int) -> List[int]:
    conv = unical.get_calendar_converter(calendar)
    first = conv.to_jdn(year, month, 1)
    return list(range(first, first + conv.days_in_month(year, month)))


def weeks_of(jdns: List[int], cells: Iterable[Cell]) -> List[List[Cell]]:
    """Pad to whole Monday..Sunday rows and split."""
    lead = COLUMNS.index(day_of_week(jdns[0]))
    flat = [BLANK] * lead + list(cells)
    flat += [BLANK] * (-len(flat) % 7)
    return [flat[i:i + 7] for i in range(0, len(flat), 7)]


def render(title: str, weeks: List[List[Cell]], width: int = CELL_WIDTH) -> str:
    header = dow_header(width)
    lines = [title, header, "-" * len(header)]
    for row in weeks:
        for part in (0, 1):
            lines.append(" ".join(c[part][:width].ljust(width) for c in row).rstrip())
    return "\n".join(lines) + "\n"


def month_calendar(calendar: str, year: int, month: int) -> str:
    conv = unical.get_calendar_converter(calendar)
    if conv.info().type == "other":
        raise SystemExit(f"{calendar} has no contiguous months to print")
    jdns = month_jdns(calendar, year, month)

    cells = []
    for j in jdns:
        _, gm, gd = jdn_to_gregorian(j)
        cells.append((f"{conv.from_jdn(j).day:2d}", f"{gm:02d}-{gd:02d}"))

    head = conv.from_jdn(jdns[0])
    title = f"{calendar}  {conv.format(head, 'MMMM YYYY ERA').rstrip()}   (JDN {jdns[0]} .. {jdns[-1]})"
    return render(title, weeks_of(jdns, cells))


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Print one month of a calendar as a Monday-first grid with Gregorian labels."
    )
    p.add_argument("--calendar", default="hebrew", help="calendar kind (default: hebrew)")
    p.add_argument("--month", nargs=2, type=int, metavar=("Y", "M"),
                   help="Month to print: Y M (default: the month containing 2024-01-01)")
    args = p.parse_args(argv)

    if args.month:
        y, m = args.month
    else:
        d = unical.from_jdn(unical.to_jdn(2024, 1, 1), calendar=args.calendar)
        y, m = d.year, d.month
    print(month_calendar(args.calendar, y, m))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
