# tests/test_batch.py

import random

import numpy as np

from storycal.engines.batch import format_story_times, story_times_to_fields


def test_batch_matches_scalar(coruscant, harvest, simple365):
    random.seed(11)
    times = [0, -1, 1440, -529920, 10_000_000, -10_000_000]
    times += [random.randint(-10_000_000, 10_000_000) for _ in range(2000)]
    for eng in (coruscant, harvest, simple365):
        fields = story_times_to_fields(eng.config, times)
        assert len(fields) == len(times)
        for i, t in enumerate(times):
            date = eng.story_time_to_date(t)
            got = fields.date_at(i)
            assert got == date, (eng.id, t)
            assert dict(got.subdivisions) == dict(date.subdivisions), (eng.id, t)


def test_batch_accepts_arrays(simple365):
    fields = story_times_to_fields(simple365.config, np.array([-1, 0, 1440], dtype=np.int64))
    assert fields.year.tolist() == [-1, 0, 0]
    assert fields.day_of_year.tolist() == [365, 1, 2]
    assert fields.hour.tolist() == [23, 0, 0]
    assert fields.minute.tolist() == [59, 0, 0]
    assert fields.subdivisions == {}


def test_empty_batch(coruscant):
    fields = story_times_to_fields(coruscant.config, [])
    assert len(fields) == 0
    assert fields.subdivisions["quarter"].shape == (0,)


def test_format_story_times(coruscant):
    times = [0, 91 * 1440, -22 * 529920]
    assert format_story_times(coruscant, times) == [coruscant.format_story_time(t) for t in times]
    assert format_story_times(coruscant, times, include_time=False)[0] == "Q1 Day 1, 0 ABY"
