from __future__ import annotations

import argparse

import storycal
from storycal.engines.batch import story_times_to_fields


def header(sub_ids: list[str]) -> str:
    cols = ["day", *sub_ids, "label"]
    return "  ".join(c[:12].ljust(12) if c != "day" else c.rjust(5) for c in cols)


def print_year(calendar: str, year: int, step: int) -> None:
    eng = storycal.get_engine(calendar)
    cfg = eng.config
    start = eng.date_to_story_time(eng.make_date(year))
    times = [start + d * cfg.minutes_per_day for d in range(0, cfg.days_per_year, step)]

    fields = story_times_to_fields(cfg, times)
    sub_ids = list(fields.subdivisions)

    print(f"{cfg.name}  year {abs(year)} {cfg.eras.label('negative' if year < 0 else 'positive')}")
    print(header(sub_ids))
    print("-" * len(header(sub_ids)))
    for i in range(len(fields)):
        date = fields.date_at(i)
        row = [f"{date.day_of_year:5d}"]
        for sid in sub_ids:
            unit = date.subdivisions[sid]
            cell = f"{unit}/{eng.get_day_of_subdivision(date, sid)}"
            row.append(cell.ljust(12))
        row.append(eng.formatter.special_day_label(date) or "")
        print("  ".join(row))
    print()


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print subdivision units (unit/day-within-unit) for one year.")
    p.add_argument("--calendar", default="coruscant")
    p.add_argument("--year", type=int, default=0)
    p.add_argument("--step", type=int, default=1, help="Print every N-th day.")
    args = p.parse_args(argv)

    if args.step <= 0:
        raise SystemExit("--step must be positive")

    print_year(args.calendar, args.year, args.step)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
