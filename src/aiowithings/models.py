"""Pydantic models for Withings API responses."""

from __future__ import annotations

import datetime as dt
from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field


class WithingsModel(BaseModel):
    """Base model that ignores unknown fields."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class MeasureType(IntEnum):
    """Body measure types."""

    WEIGHT = 1
    HEIGHT = 4
    FAT_FREE_MASS = 5
    FAT_RATIO = 6
    FAT_MASS_WEIGHT = 8
    DIASTOLIC_BLOOD_PRESSURE = 9
    SYSTOLIC_BLOOD_PRESSURE = 10
    HEART_PULSE = 11
    TEMPERATURE = 12
    SP02 = 54
    BODY_TEMPERATURE = 71
    SKIN_TEMPERATURE = 73
    MUSCLE_MASS = 76
    HYDRATION = 77
    BONE_MASS = 88
    PULSE_WAVE_VELOCITY = 91


class SleepState(IntEnum):
    """Sleep series states."""

    AWAKE = 0
    LIGHT = 1
    DEEP = 2
    REM = 3


class NotificationAppli(IntEnum):
    """Notification categories (the `appli` parameter)."""

    WEIGHT = 1
    HEART = 4
    ACTIVITY = 16
    SLEEP = 44
    USER = 46
    BED_IN = 50
    BED_OUT = 51


class Activity(WithingsModel):
    """Daily activity summary."""

    date: dt.date | None = None
    timezone: str | None = None
    steps: int | None = None
    distance: float | None = None
    calories: float | None = None
    total_calories: float | None = Field(default=None, alias="totalcalories")
    elevation: float | None = None
    soft: int | None = None
    moderate: int | None = None
    intense: int | None = None


class Measure(WithingsModel):
    """Single measure inside a measurement group."""

    value: int
    type: int
    unit: int = 0

    @property
    def scaled_value(self) -> float:
        """Value in the measure's SI unit."""
        return self.value * 10**self.unit


class MeasurementGroup(WithingsModel):
    """Group of measures taken at the same time."""

    grpid: int | None = None
    attrib: int | None = None
    date: dt.datetime | None = None
    category: int | None = None
    comment: str | None = None
    measures: list[Measure] = Field(default_factory=list)

    def measure(self, measure_type: int) -> Measure | None:
        """Return the first measure of the given type."""
        for item in self.measures:
            if item.type == measure_type:
                return item
        return None


class SleepSeries(WithingsModel):
    """One sleep state interval."""

    start_date: dt.datetime | None = Field(default=None, alias="startdate")
    end_date: dt.datetime | None = Field(default=None, alias="enddate")
    state: int | None = None

    @property
    def duration(self) -> dt.timedelta | None:
        if self.start_date is None or self.end_date is None:
            return None
        return self.end_date - self.start_date


class SleepSummaryData(WithingsModel):
    """Durations and counts for one night."""

    wakeup_duration: int | None = Field(default=None, alias="wakeupduration")
    light_sleep_duration: int | None = Field(default=None, alias="lightsleepduration")
    deep_sleep_duration: int | None = Field(default=None, alias="deepsleepduration")
    rem_sleep_duration: int | None = Field(default=None, alias="remsleepduration")
    wakeup_count: int | None = Field(default=None, alias="wakeupcount")
    duration_to_sleep: int | None = Field(default=None, alias="durationtosleep")
    duration_to_wakeup: int | None = Field(default=None, alias="durationtowakeup")


class SleepSummary(WithingsModel):
    """Summary of one night."""

    id: int | None = None
    timezone: str | None = None
    model: int | None = None
    start_date: dt.datetime | None = Field(default=None, alias="startdate")
    end_date: dt.datetime | None = Field(default=None, alias="enddate")
    date: dt.date | None = None
    modified: dt.datetime | None = None
    data: SleepSummaryData | None = None


class Notification(WithingsModel):
    """Registered notification callback."""

    callback_url: str | None = Field(default=None, alias="callbackurl")
    comment: str | None = None
    expires: dt.datetime | None = None
    appli: int | None = None


class Response(WithingsModel):
    """Bare acknowledgement returned by write endpoints."""

    status: int = 0
