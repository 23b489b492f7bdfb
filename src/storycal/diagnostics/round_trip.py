from __future__ import annotations

import argparse
import random
from typing import List

import storycal


def parse_calendars(s: str) -> List[str]:
    # "coruscant,simple365" -> ["coruscant", "simple365"]
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(
    calendar: str,
    N: int,
    lo: int,
    hi: int,
    seed: int,
    *,
    max_failures: int,
) -> int:
    random.seed(seed)
    eng = storycal.get_engine(calendar)
    failures = 0
    prev = None

    samples = sorted(random.randint(lo, hi) for _ in range(N))
    for t0 in samples:
        date = eng.story_time_to_date(t0)
        back = eng.date_to_story_time(date)
        if back != t0:
            failures += 1
            print("\nFAIL (round-trip)")
            print("calendar:", calendar)
            print("t0:", t0)
            print("date:", date)
            print("back:", back)
            if failures >= max_failures:
                return failures

        if prev is not None and prev[1].key() > date.key():
            failures += 1
            print("\nFAIL (monotonic)")
            print("calendar:", calendar)
            print("t_prev:", prev[0], prev[1])
            print("t0:", t0, date)
            if failures >= max_failures:
                return failures
        prev = (t0, date)

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: story time -> date -> story time.")
    p.add_argument("--calendars", type=str, default=",".join(storycal.list_calendars()),
                   help="Comma-separated calendar list.")
    p.add_argument("--N", type=int, default=2000, help="Trials per calendar.")
    p.add_argument("--lo", type=int, default=-10_000_000, help="Lowest story time (minutes).")
    p.add_argument("--hi", type=int, default=10_000_000, help="Highest story time (minutes).")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    if args.hi < args.lo:
        raise SystemExit("--hi must be >= --lo")

    total_fail = 0
    for cal in parse_calendars(args.calendars):
        print(f"Testing {cal} ...")
        total_fail += roundtrip_test(cal, N=args.N, lo=args.lo, hi=args.hi, seed=args.seed,
                                     max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
