from datetime import timedelta

import pytest

from node_diag.duration import parse_duration


def test_simple_units():
    assert parse_duration("7s") == timedelta(seconds=7)
    assert parse_duration("3m") == timedelta(minutes=3)
    assert parse_duration("2h") == timedelta(hours=2)
    assert parse_duration("300ms") == timedelta(milliseconds=300)
    assert parse_duration("15us") == timedelta(microseconds=15)
    assert parse_duration("15µs") == timedelta(microseconds=15)


def test_compound_and_fractional():
    assert parse_duration("1h30m") == timedelta(minutes=90)
    assert parse_duration("2h45m10.5s") == timedelta(hours=2, minutes=45, seconds=10.5)
    assert parse_duration("1.5h") == timedelta(minutes=90)
    assert parse_duration(".5s") == timedelta(milliseconds=500)


def test_signs_and_zero():
    assert parse_duration("0") == timedelta(0)
    assert parse_duration("-0") == timedelta(0)
    assert parse_duration("+5s") == timedelta(seconds=5)
    assert parse_duration("-1m30s") == -timedelta(seconds=90)


def test_nanoseconds_truncate_to_microseconds():
    assert parse_duration("1500ns") == timedelta(microseconds=1)
    assert parse_duration("999ns") == timedelta(0)


def test_invalid_values():
    for bad in ["", "abc", "7", "5d", "s", "1h 30m", "--5s", "1.2.3s", "."]:
        with pytest.raises(ValueError):
            parse_duration(bad)


def test_range_limit():
    assert parse_duration("2562047h") == timedelta(hours=2562047)
    assert parse_duration("9223372036854775807ns") == timedelta(
        microseconds=9223372036854775
    )
    too_big = ["2562048h", "-2562048h", "99999999999999999999h", "9223372036854775808ns"]
    for bad in too_big:
        with pytest.raises(ValueError):
            parse_duration(bad)
