from __future__ import annotations

import argparse
import random
from typing import List

import unical

# Calendars whose own definition is approximate
TOLERANCE = {"chinese": 1}


def parse_calendars(s: str) -> List[str]:
    # "hebrew,islamic" -> ["hebrew", "islamic"]
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(
    calendar: str,
    N: int,
    start_jdn: int,
    end_jdn: int,
    seed: int,
    *,
    max_failures: int,
) -> int:
    random.seed(seed)
    conv = unical.get_calendar_converter(calendar)
    tol = TOLERANCE.get(calendar, 0)
    failures = 0

    for _ in range(N):
        j0 = random.randint(start_jdn, end_jdn)
        d = conv.from_jdn(j0)
        j1 = conv.to_jdn(d.year, d.month, d.day)
        if abs(j1 - j0) > tol:
            failures += 1
            print("\nFAIL")
            print("calendar:", calendar)
            print("jdn in:", j0)
            print("date:", d, conv.format(d, "YYYY-MM-DD ERA"))
            print("jdn out:", j1)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: JDN -> calendar date -> JDN.")
    p.add_argument("--calendars", type=str, default=",".join(unical.list_calendars()),
                   help="Comma-separated calendar list.")
    p.add_argument("--N", type=int, default=2000, help="Trials per calendar.")
    p.add_argument("--start-jdn", type=int, default=0, help="Lowest JDN sampled.")
    p.add_argument("--end-jdn", type=int, default=3000000, help="Highest JDN sampled.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    total = 0
    for cal in parse_calendars(args.calendars):
        n = roundtrip_test(cal, args.N, args.start_jdn, args.end_jdn, args.seed, max_failures=args.max_failures)
        print(f"{cal:20s} failures: {n}/{args.N}")
        total += n

    return 1 if total else 0


if __name__ == "__main__":
    raise SystemExit(main())
