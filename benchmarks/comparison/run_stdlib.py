# Run with: python <script> -o <output>.json, then compare with pyperf
import pyperf

runner = pyperf.Runner()

runner.timeit(
    "various operations",
    "d = timedelta(hours=4, minutes=30);"
    "(d + timedelta(days=1)) * 3 // timedelta(minutes=1)",
    setup="from datetime import timedelta",
)

runner.timeit(
    "new duration",
    "timedelta(seconds=93784, microseconds=523000)",
    "from datetime import timedelta",
)

runner.timeit(
    "duration add",
    "d + timedelta(milliseconds=-1500)",
    setup="from datetime import timedelta; d = timedelta(hours=26)",
)

runner.timeit(
    "format duration",
    "str(d)",
    setup="from datetime import timedelta; "
    "d = timedelta(seconds=93784, microseconds=523000)",
)
