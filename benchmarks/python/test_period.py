from temporals import Duration, Period


def test_hash(benchmark):
    p = Period.of(1, 15, 3)
    benchmark(hash, p)


def test_new(benchmark):
    benchmark(Period, years=1, months=2, weeks=3, days=4)


def test_format_iso(benchmark):
    p = Period.of(1, -2, 3)
    benchmark(p.format_iso)


def test_parse(benchmark):
    benchmark(Period.parse, "P1Y15M3W4D")


def test_normalized(benchmark):
    p = Period.of(1, 15, 3)
    benchmark(p.normalized)


def test_plus_amount(benchmark):
    p = Period.of(1, 2, 3)
    d = Duration.of_days(4)
    benchmark(p.plus_amount, d)
