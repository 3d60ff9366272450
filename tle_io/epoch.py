from dataclasses import dataclass
from datetime import datetime

from tle_io.tleconverter import TLEConverter

TAI_UTC_OFFSET_S = 37.0 # fixed leap second count, not looked up
MJD_OFFSET = 2400000.5
SECONDS_PER_DAY = 86400.0

# cumulative days before each month, non leap year
_CUM_DAYS = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334, 365)


class EpochError(ValueError):
    """Epoch day outside the calendar year."""


@dataclass(frozen=True)
class EpochDateTime:
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int

    def to_datetime(self):
        """naive UTC datetime"""
        return datetime(self.year, self.month, self.day, self.hour, self.minute, self.second)

    def __str__(self):
        return (f"{self.year:04d}-{self.month:02d}-{self.day:02d} "
                f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}")


def full_year(epoch_year):
    """2 digit TLE year -> 4 digit year (pivot at 57)"""
    year = int(epoch_year)
    if year < 57:
        return 2000 + year
    return 1900 + year

def is_leap_year(year):
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0

def days_in_year(year):
    return 366 if is_leap_year(year) else 365


def epoch_to_datetime(epoch_year, epoch_day):
    """
    TLE epoch (2 digit year, fractional day of year) -> calendar date time.

    Day 1.0 is January 1 00:00:00. Hour, minute and second are truncated at
    each stage, so the seconds can come out up to one second early.
    """
    year = full_year(epoch_year)
    epoch_day = float(epoch_day)

    if not 1.0 <= epoch_day < days_in_year(year) + 1:
        raise EpochError(f"epoch day {epoch_day} outside year {year} (1..{days_in_year(year)})")

    day_of_year = int(epoch_day)
    leap = 1 if is_leap_year(year) else 0

    month = 12
    for m in range(1, 13):
        # leap day is added for every month after February
        end = _CUM_DAYS[m] + (leap if m >= 2 else 0)
        if day_of_year <= end:
            month = m
            break

    start = _CUM_DAYS[month - 1] + (leap if month > 2 else 0)
    day = day_of_year - start

    frac = epoch_day - day_of_year
    hours = frac * 24.0
    hour = int(hours)
    minutes = (hours - hour) * 60.0
    minute = int(minutes)
    second = int((minutes - minute) * 60.0)

    return EpochDateTime(year, month, day, hour, minute, second)


def _idiv(a, b):
    # integer division truncating toward zero
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q

def julian_day(dt):
    """
    Calendar date time -> Julian Date.
    Fliegel & Van Flandern (1968) for the day number at noon, then time of day.
    """
    Y, M, D = dt.year, dt.month, dt.day
    c = _idiv(M - 14, 12)

    jdn = (_idiv(1461 * (Y + 4800 + c), 4)
           + _idiv(367 * (M - 2 - 12 * c), 12)
           - _idiv(3 * _idiv(Y + 4900 + c, 100), 4)
           + D - 32075)

    return jdn + (dt.hour - 12) / 24.0 + dt.minute / 1440.0 + dt.second / SECONDS_PER_DAY

def tai_mjd(dt):
    """UTC calendar date time -> Modified Julian Date on the TAI scale"""
    return julian_day(dt) - MJD_OFFSET + TAI_UTC_OFFSET_S / SECONDS_PER_DAY

def tle_epoch(line1):
    """line 1 -> EpochDateTime"""
    epoch_year, epoch_day = TLEConverter.parse_epoch_fields(line1)
    return epoch_to_datetime(epoch_year, epoch_day)

def tle_epoch_tai_mjd(line1):
    return tai_mjd(tle_epoch(line1))
