from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import sys
from pathlib import Path


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


def _add_calendar_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--calendar", default=None, help="registered calendar name (default: simple365)")
    p.add_argument("--config", default=None, help="path to a calendar config JSON file")


def _resolve_calendar(args: argparse.Namespace) -> str:
    import storycal

    if args.config:
        text = Path(args.config).read_text(encoding="utf-8")
        engine = storycal.register_calendar(storycal.load_config(text), overwrite=True)
        if args.calendar and args.calendar != engine.id:
            raise SystemExit(f"--calendar {args.calendar!r} does not match config id {engine.id!r}")
        return engine.id
    return args.calendar or "simple365"


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def cmd_list(argv: list[str]) -> int:
    import storycal

    p = argparse.ArgumentParser(prog="storycal list", description="List available calendars")
    p.parse_args(argv)

    for name in storycal.list_calendars():
        info = storycal.calendar_info(name)
        print(f"{name:12s}  {info['days_per_year']:4d} days  {info['name']}")
    return 0


def cmd_show(argv: list[str]) -> int:
    import storycal

    p = argparse.ArgumentParser(prog="storycal show", description="StoryTime -> calendar date")
    p.add_argument("time", type=int, help="minutes since universal time zero")
    _add_calendar_args(p)
    p.add_argument("--short", action="store_true", help="use the short format")
    p.add_argument("--debug", action="store_true")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)
    _configure_logging(args.debug)

    calendar = _resolve_calendar(args)
    include_time = False if args.short else None
    print(storycal.format_story_time(args.time, calendar=calendar, include_time=include_time))
    if args.attr:
        info = storycal.date_info(args.time, calendar=calendar, attributes=tuple(args.attr))
        for key, value in info["attributes"].items():
            print(f"  {key}: {value}")
    if args.debug:
        for key, value in storycal.explain(args.time, calendar=calendar).items():
            print(f"  {key}: {value}")
    return 0


def cmd_to_time(argv: list[str]) -> int:
    import storycal

    p = argparse.ArgumentParser(prog="storycal to-time", description="Calendar date -> StoryTime")
    p.add_argument("--year", type=int, required=True, help="signed year (negative for the negative era)")
    p.add_argument("--day", type=int, default=1, help="1-indexed day of year")
    p.add_argument("--hour", type=int, default=0)
    p.add_argument("--minute", type=int, default=0)
    _add_calendar_args(p)
    args = p.parse_args(argv)
    _configure_logging(False)

    eng = storycal.get_engine(_resolve_calendar(args))
    cfg = eng.config
    if not (1 <= args.day <= cfg.days_per_year):
        raise SystemExit(f"--day must be in 1..{cfg.days_per_year}")
    if not (0 <= args.hour < cfg.hours_per_day):
        raise SystemExit(f"--hour must be in 0..{cfg.hours_per_day - 1}")
    if not (0 <= args.minute < cfg.minutes_per_hour):
        raise SystemExit(f"--minute must be in 0..{cfg.minutes_per_hour - 1}")

    print(eng.date_to_story_time(eng.make_date(args.year, args.day, args.hour, args.minute)))
    return 0


def cmd_age(argv: list[str]) -> int:
    import storycal

    p = argparse.ArgumentParser(prog="storycal age", description="Age between two story times")
    p.add_argument("birth", type=int)
    p.add_argument("current", type=int)
    _add_calendar_args(p)
    args = p.parse_args(argv)
    _configure_logging(False)

    print(storycal.format_age(args.birth, args.current, calendar=_resolve_calendar(args)))
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `storycal 12345 ...`
    if argv and argv[0].lstrip("-").isdigit():
        return cmd_show(argv)

    p = argparse.ArgumentParser(prog="storycal", description="Story calendar toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("list", help="List available calendars")
    sub.add_parser("show", help="StoryTime -> calendar date")
    sub.add_parser("to-time", help="Calendar date -> StoryTime")
    sub.add_parser("age", help="Age between two story times")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "year-table"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.cmd == "list":
        return cmd_list(rest)

    if args.cmd == "show":
        return cmd_show(rest)

    if args.cmd == "to-time":
        return cmd_to_time(rest)

    if args.cmd == "age":
        return cmd_age(rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "storycal.diagnostics.round_trip",
            "year-table": "storycal.diagnostics.year_table",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
