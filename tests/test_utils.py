"""Tests for date parameter normalization."""

from datetime import date, datetime, timedelta, timezone

from aiowithings.utils import normalize_date_params

NEW_YEAR_EPOCH = 1672531200  # 2023-01-01T00:00:00Z


def test_date_converted_to_epoch():
    params = {"startdate": date(2023, 1, 1), "other": "x"}
    result = normalize_date_params(params)
    assert result == {"startdate": NEW_YEAR_EPOCH, "other": "x"}


def test_idempotent():
    once = normalize_date_params(
        {"startdate": date(2023, 1, 1), "enddateymd": date(2023, 1, 2), "other": "x"}
    )
    assert normalize_date_params(once) == once


def test_input_not_mutated():
    params = {"enddate": date(2023, 1, 1)}
    normalize_date_params(params)
    assert params == {"enddate": date(2023, 1, 1)}


def test_aware_datetime_uses_its_offset():
    cet = timezone(timedelta(hours=1))
    result = normalize_date_params({"lastupdate": datetime(2023, 1, 1, 1, tzinfo=cet)})
    assert result["lastupdate"] == NEW_YEAR_EPOCH


def test_naive_datetime_is_utc():
    result = normalize_date_params({"enddate": datetime(2023, 1, 1, 0, 0, 10)})
    assert result["enddate"] == NEW_YEAR_EPOCH + 10


def test_ymd_params():
    result = normalize_date_params(
        {
            "startdateymd": date(2023, 1, 1),
            "enddateymd": datetime(2023, 1, 31, 23, 59),
            "date": "2023-02-01",
        }
    )
    assert result == {
        "startdateymd": "2023-01-01",
        "enddateymd": "2023-01-31",
        "date": "2023-02-01",
    }


def test_primitives_and_unknown_keys_untouched():
    params = {"startdate": NEW_YEAR_EPOCH, "meastype": 1, "since": date(2023, 1, 1)}
    assert normalize_date_params(params) == params
