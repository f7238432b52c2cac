#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import unical
from unical.core.time import gregorian_to_jdn, jdn_to_gregorian


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "unical[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "unical[diagnostics]"') from e


def parse_calendars(s: str) -> List[str]:
    out = [x.strip() for x in s.split(",") if x.strip()]
    for name in out:
        if unical.calendar_info(name).type == "other":
            raise SystemExit(f"{name} has no year start to plot")
    return out


def year_starts(calendar: str, start_year: int, end_year: int) -> List[Tuple[int, int]]:
    """(Gregorian year, Gregorian day-of-year) of each year start in the range."""
    conv = unical.get_calendar_converter(calendar)
    lo = gregorian_to_jdn(start_year, 1, 1)
    hi = gregorian_to_jdn(end_year, 12, 31)
    y = conv.from_jdn(lo).year
    out = []
    while True:
        if y == 0 and calendar in ("hebrew", "mayan-haab", "aztec-xiuhpohualli"):
            y += 1
            continue
        j = conv.to_jdn(y, 1, 1)
        if j > hi:
            break
        if j >= lo:
            gy, _, _ = jdn_to_gregorian(j)
            out.append((gy, j - gregorian_to_jdn(gy, 1, 1) + 1))
        y += 1
    return out


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Plot the Gregorian day-of-year on which each calendar's year begins."
    )
    p.add_argument("--start-year", type=int, default=1900)
    p.add_argument("--end-year", type=int, default=2100)
    p.add_argument("--calendars", default="islamic,hebrew,chinese,persian,mayan-haab")
    p.add_argument("--out", default="year_drift.png")
    p.add_argument("--title", default="Year start drift against the Gregorian year")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    fig, ax = plt.subplots(figsize=(11, 5))
    for name in parse_calendars(args.calendars):
        pts = year_starts(name, args.start_year, args.end_year)
        if not pts:
            continue
        xs = np.array([p[0] for p in pts], dtype=int)
        ys = np.array([p[1] for p in pts], dtype=int)
        ax.scatter(xs, ys, s=12, label=unical.calendar_info(name).name)

    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("Day of year of new year")
    ax.set_ylim(0, 367)
    ax.set_title(args.title)
    ax.legend(loc="upper right", fontsize=8)
    fig.tight_layout()
    fig.savefig(args.out, dpi=150)
    print(f"Wrote {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
