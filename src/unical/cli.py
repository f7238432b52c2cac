from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

from .core.types import CalendarDate, CalendarKind, Granularity

_DATE_RE = re.compile(r"^-?\d+-\d{1,2}-\d{1,2}$")
_KINDS = [k.value for k in CalendarKind]


def _parse_date(s: str, kind: str) -> CalendarDate:
    import unical

    d = unical.parse_calendar_date(s, kind)
    if d is None:
        raise SystemExit(f"Not a valid {kind} date: {s!r}")
    return d


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_list(argv: list[str]) -> int:
    import unical

    argparse.ArgumentParser(prog="unical list", description="List calendar kinds").parse_args(argv)
    for name in unical.list_calendars():
        info = unical.calendar_info(name)
        print(f"{name:20s} {info.name} ({info.native_name})")
    return 0


def cmd_info(argv: list[str]) -> int:
    import unical

    p = argparse.ArgumentParser(prog="unical info", description="Show a calendar's static descriptor")
    p.add_argument("calendar", choices=_KINDS)
    args = p.parse_args(argv)

    info = unical.calendar_info(args.calendar)
    print(f"{info.name} ({info.native_name})")
    print(f"  type         : {info.type}")
    print(f"  months       : {info.months[0]}..{info.months[1]}")
    print(f"  days in year : {info.days_in_year[0]}..{info.days_in_year[1]}")
    print(f"  era          : {info.era_name or '-'} (starts {info.era_start})")
    print(f"  leap rule    : {info.leap_year_rule}")
    print(f"  epoch JDN    : {info.epoch_jdn}")
    return 0


def cmd_convert(argv: list[str]) -> int:
    import unical

    p = argparse.ArgumentParser(prog="unical convert", description="Convert a date between calendars")
    p.add_argument("date", help="[-]Y-M-D in the source calendar (b.k.t.u.k for the Long Count)")
    p.add_argument("--from", dest="source", default="gregorian", choices=_KINDS)
    p.add_argument("--to", dest="target", action="append", choices=_KINDS,
                   help="target calendar (repeatable; default: all)")
    p.add_argument("--pattern", default="YYYY-MM-DD ERA")
    args = p.parse_args(argv)

    d = _parse_date(args.date, args.source)
    jdn = unical.to_jdn(d.year, d.month, d.day, calendar=d.calendar)
    print(f"JDN {jdn}")
    for target in args.target or _KINDS:
        out = unical.convert_date(d, target)
        print(f"  {target:20s} {unical.format_calendar_date(out, args.pattern)}")
    return 0


def cmd_format(argv: list[str]) -> int:
    import unical

    p = argparse.ArgumentParser(prog="unical format", description="Format a date with a token pattern")
    p.add_argument("date")
    p.add_argument("pattern", help="e.g. 'EEEE, MMMM D, YYYY ERA'")
    p.add_argument("--calendar", default="gregorian", choices=_KINDS)
    args = p.parse_args(argv)

    print(unical.format_calendar_date(_parse_date(args.date, args.calendar), args.pattern))
    return 0


def cmd_range(argv: list[str]) -> int:
    import unical

    p = argparse.ArgumentParser(prog="unical range", description="Gregorian period bounds in another calendar")
    p.add_argument("date", help="Gregorian anchor [-]Y-M-D")
    p.add_argument("--granularity", default="month", choices=[g.value for g in Granularity])
    p.add_argument("--to", dest="target", default="gregorian", choices=_KINDS)
    p.add_argument("--pattern", default="YYYY-MM-DD ERA")
    args = p.parse_args(argv)

    r = unical.time_range(_parse_date(args.date, "gregorian"), args.granularity, args.target)
    print(r.label)
    print(f"  start : {unical.format_calendar_date(r.start, args.pattern)}  (JDN {r.start_jdn})")
    print(f"  end   : {unical.format_calendar_date(r.end, args.pattern)}  (JDN {r.end_jdn})")
    print(f"  days  : {r.days}")
    return 0


def cmd_day(argv: list[str]) -> int:
    import unical

    p = argparse.ArgumentParser(prog="unical day", description="Gregorian -> calendar day label")
    p.add_argument("date", help="Gregorian [-]Y-M-D")
    p.add_argument("--calendar", default="gregorian", choices=_KINDS)
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    info = unical.day_info(_parse_date(args.date, "gregorian"), calendar=args.calendar, attributes=tuple(args.attr))
    print(info)
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `unical YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="unical", description="Universal calendar conversion toolkit CLI.")
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("list", help="List calendar kinds")
    sub.add_parser("info", help="Show a calendar's static descriptor")
    sub.add_parser("convert", help="Convert a date between calendars")
    sub.add_parser("format", help="Format a date with a token pattern")
    sub.add_parser("range", help="Gregorian period bounds and label in another calendar")
    sub.add_parser("day", help="Gregorian -> calendar day label with attributes")

    # diagnostics
    sub.add_parser("pretty-month", help="Print a month grid in any calendar (diagnostics)")
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "year-drift"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    commands = {
        "list": cmd_list,
        "info": cmd_info,
        "convert": cmd_convert,
        "format": cmd_format,
        "range": cmd_range,
        "day": cmd_day,
    }
    if args.cmd in commands:
        return commands[args.cmd](rest)

    if args.cmd == "pretty-month":
        return _run_module_main("unical.diagnostics.pretty_month", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "unical.diagnostics.round_trip",
            "year-drift": "unical.diagnostics.year_drift",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
