# Run with: python <script> -o <output>.json, then compare with pyperf
import pyperf

runner = pyperf.Runner()

runner.timeit(
    "various operations",
    "d = Duration.parse('PT4H30M');"
    "(d + Duration.of_days(1)).multiplied_by(3).to_minutes()",
    setup="from temporals import Duration",
)

runner.timeit(
    "new duration",
    "Duration.of_seconds(93784, 523000)",
    "from temporals import Duration",
)

runner.timeit(
    "duration add",
    "d + Duration.of_millis(-1500)",
    setup="from temporals import Duration; d = Duration.of_hours(26)",
)

runner.timeit(
    "parse duration",
    "f('P1DT2H3M4.523S')",
    setup="from temporals import Duration; f = Duration.parse",
)

runner.timeit(
    "format duration",
    "str(d)",
    setup="from temporals import Duration; d = Duration.of_seconds(93784, 523000)",
)
