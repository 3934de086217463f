"""Tests for response models."""

from datetime import date, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from aiowithings import (
    Activity,
    MeasurementGroup,
    MeasureType,
    Notification,
    SleepSeries,
    SleepSummary,
)


def test_activity_ignores_unknown_fields():
    activity = Activity.model_validate(
        {"date": "2023-01-01", "steps": 9000, "totalcalories": 2100.5, "brand": 18}
    )
    assert activity.date == date(2023, 1, 1)
    assert activity.total_calories == 2100.5


def test_measurement_group():
    group = MeasurementGroup.model_validate(
        {
            "grpid": 12,
            "attrib": 0,
            "date": 1672531200,
            "category": 1,
            "measures": [
                {"value": 72345, "type": 1, "unit": -3},
                {"value": 180, "type": 4, "unit": -2},
            ],
        }
    )
    assert group.date == datetime(2023, 1, 1, tzinfo=timezone.utc)
    assert group.measure(MeasureType.WEIGHT).scaled_value == pytest.approx(72.345)
    assert group.measure(MeasureType.FAT_RATIO) is None


def test_sleep_series_duration():
    series = SleepSeries.model_validate(
        {"startdate": 1672531200, "enddate": 1672533000, "state": 2}
    )
    assert series.duration == timedelta(minutes=30)


def test_sleep_summary_data():
    summary = SleepSummary.model_validate(
        {
            "id": 1,
            "date": "2023-01-01",
            "model": 32,
            "data": {"deepsleepduration": 3600, "wakeupcount": 2},
        }
    )
    assert summary.data.deep_sleep_duration == 3600
    assert summary.data.wakeup_count == 2


def test_notification():
    notification = Notification.model_validate(
        {"callbackurl": "https://example.com", "expires": 1672531200}
    )
    assert notification.callback_url == "https://example.com"


def test_non_object_rejected():
    with pytest.raises(ValidationError):
        Activity.model_validate([1, 2])
