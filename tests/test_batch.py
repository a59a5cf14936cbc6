import math
from contextlib import redirect_stdout
from io import StringIO

from structlog.testing import capture_logs

from ore_encoding.batch import encode_floats, filter_orderable, is_orderable
from ore_encoding.encoding.float import encode_f64


def test_is_orderable():
    assert is_orderable(1.0)
    assert is_orderable(-0.0)
    assert is_orderable(math.inf)
    assert is_orderable(-math.inf)
    assert not is_orderable(math.nan)


def test_filter_orderable_keeps_order():
    values = [3.0, math.nan, -1.0, math.inf, math.nan, 0.5]
    with capture_logs() as logs:
        kept = filter_orderable(values)

    assert kept == [3.0, -1.0, math.inf, 0.5]
    assert logs == [
        {
            'event': 'dropped values without a defined order',
            'log_level': 'debug',
            'dropped': 2,
            'kept': 4,
        },
    ]


def test_filter_orderable_without_nan_is_silent():
    with capture_logs() as logs:
        kept = filter_orderable(iter([1.0, 2.0]))
    assert kept == [1.0, 2.0]
    assert logs == []


def test_encode_floats():
    values = [2.0, math.nan, -1.0]
    assert encode_floats(values) == [encode_f64(2.0), encode_f64(-1.0)]
    assert len(encode_floats(values, drop_nan=False)) == 3
    assert encode_floats([]) == []


def test_encode_floats_sorts_like_the_floats():
    values = [0.1, -7.25, math.nan, 1e-310, -0.0, 1e308, -math.inf]
    encoded = encode_floats(values)
    assert sorted(encoded) == [encode_f64(value) for value in sorted(filter_orderable(values))]


def test_dropping_nan_keeps_stdout_clean():
    # doctests compare stdout, so the debug line must not end up there
    f = StringIO()
    with redirect_stdout(f):
        kept = filter_orderable([math.nan, 1.0])

    assert kept == [1.0]
    assert f.getvalue() == ''
