"""
Stress tests for sharing units, fields, and values between threads.

Note this isn't a unit test: it's meant to be run on a free-threaded
build of Python to surface data races.
"""

import sys
import time
from threading import Thread

from temporals import ChronoField, ChronoUnit, Duration, Period

if not hasattr(sys, "_is_gil_enabled") or sys._is_gil_enabled():
    # Running with GIL enabled can still be useful to compare performance,
    # but be sure to warn that threading hasn't been stress tested.
    print("WARNING: Running with GIL enabled. Threading not stress tested.")


NUM_THREADS = 16
NUM_ITERATIONS = 500
DURATION_SAMPLE = [
    "PT0S",
    "P1DT2H3M4S",
    "-P1DT2H3M4.523S",
    "PT-90M",
    "PT0.000001S",
    "P365D",
    "PT12H",
]
PERIOD_SAMPLE = [
    "P0D",
    "P1Y15M",
    "-P2W",
    "P1Y-2M3D",
    "P10Y",
]
assert (
    len(DURATION_SAMPLE) % NUM_THREADS
), "Duration sample should not be evenly divisible by number of threads"
DURATIONS = DURATION_SAMPLE * (NUM_THREADS * NUM_ITERATIONS)
PERIODS = PERIOD_SAMPLE * (NUM_THREADS * NUM_ITERATIONS)
SHARED = Duration.of_hours(1)


def touch_catalogue(texts):
    """Query the shared units and fields"""
    for _ in texts:
        for unit in ChronoUnit:
            if unit is not ChronoUnit.FOREVER:
                unit.duration()
        for field in ChronoField:
            field.range().is_valid_value(1)


def parse_durations(texts):
    """Parse durations and combine them with a shared value"""
    for s in texts:
        d = Duration.parse(s)
        assert Duration.parse(str(d)) == d
        d = (d + SHARED).divided_by(3)
        del d


def parse_periods(texts):
    for s in texts:
        p = Period.parse(s)
        assert p.normalized().normalized() == p.normalized()
        del p


def main(func, sample):
    print(f"Starting test: {func.__name__}")
    threads = []

    start_time = time.time()

    for n in range(NUM_THREADS):
        thread = Thread(target=func, args=(sample[n::NUM_THREADS],))
        threads.append(thread)
        thread.start()

    for thread in threads:
        thread.join()

    end_time = time.time()
    print(f"Execution time: {end_time - start_time:.2f} seconds")


if __name__ == "__main__":
    main(touch_catalogue, DURATION_SAMPLE * NUM_THREADS)
    main(parse_durations, DURATIONS)
    main(parse_periods, PERIODS)
