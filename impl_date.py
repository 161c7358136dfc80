"""
calendar anchors and transitions for datetime.date

every transition returns a new date, or None when the result falls outside
what the date type can represent (e.g. going back from year 1)

weeks follow ISO 8601: monday to sunday

# usage
```python
from datetime import date

import impl_date

d = date(1996, 2, 23)
impl_date.end_of_month(d)          # date(1996, 2, 29)
impl_date.start_of_pred_month(d)   # date(1996, 1, 1)
impl_date.start_of_iso8601_week(d) # date(1996, 2, 19)
```
"""

from datetime import date, timedelta
import logging
from typing import Callable, Optional


LOG_NAME = "impl_date"

ONE_DAY = timedelta(days=1)
ONE_WEEK = ONE_DAY * 7
SUNDAY = 6

# index i -> days in month i+1
MONTH_MIN_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
MONTH_MAX_DAYS = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

Transition = Callable[[date], Optional[date]]

log = logging.getLogger(LOG_NAME)


def _ymd(d: date, year: int, month: int, day: int) -> Optional[date]:
    """rebuild d on another day, None if the date type rejects it"""
    try:
        return d.replace(year=year, month=month, day=day)
    except (ValueError, OverflowError):
        log.debug("cannot build %s-%s-%s from %r", year, month, day, d)
        return None


def _shift(d: Optional[date], delta: timedelta) -> Optional[date]:
    if d is None:
        return None
    try:
        return d + delta
    except (ValueError, OverflowError):
        log.debug("cannot shift %r by %s days", d, delta.days)
        return None


def _pred_month(d: date) -> tuple[int, int]:
    if d.month == 1:
        return d.year - 1, 12
    return d.year, d.month - 1


def _succ_month(d: date) -> tuple[int, int]:
    if d.month == 12:
        return d.year + 1, 1
    return d.year, d.month + 1


def _leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


# classification


def is_leap_year(d: date) -> bool:
    return _leap_year(d.year)


def last_day_of_month(d: date) -> int:
    table = MONTH_MAX_DAYS if is_leap_year(d) else MONTH_MIN_DAYS
    return table[d.month - 1]


# current period


def start_of_month(d: date) -> Optional[date]:
    return _ymd(d, d.year, d.month, 1)


def end_of_month(d: date) -> Optional[date]:
    return _ymd(d, d.year, d.month, last_day_of_month(d))


def start_of_year(d: date) -> Optional[date]:
    return _ymd(d, d.year, 1, 1)


def end_of_year(d: date) -> Optional[date]:
    return _ymd(d, d.year, 12, 31)


def start_of_iso8601_week(d: date) -> Optional[date]:
    return _shift(d, -ONE_DAY * d.weekday())


def end_of_iso8601_week(d: date) -> Optional[date]:
    return _shift(d, ONE_DAY * (SUNDAY - d.weekday()))


# preceding period


def start_of_pred_month(d: date) -> Optional[date]:
    year, month = _pred_month(d)
    return _ymd(d, year, month, 1)


def end_of_pred_month(d: date) -> Optional[date]:
    start = start_of_pred_month(d)
    if start is None:
        return None
    return _ymd(start, start.year, start.month, last_day_of_month(start))


def start_of_pred_year(d: date) -> Optional[date]:
    return _ymd(d, d.year - 1, 1, 1)


def end_of_pred_year(d: date) -> Optional[date]:
    return _ymd(d, d.year - 1, 12, 31)


def start_of_pred_iso8601_week(d: date) -> Optional[date]:
    return _shift(start_of_iso8601_week(d), -ONE_WEEK)


def end_of_pred_iso8601_week(d: date) -> Optional[date]:
    return _shift(start_of_iso8601_week(d), -ONE_DAY)


# succeeding period


def start_of_succ_month(d: date) -> Optional[date]:
    year, month = _succ_month(d)
    return _ymd(d, year, month, 1)


def end_of_succ_month(d: date) -> Optional[date]:
    start = start_of_succ_month(d)
    if start is None:
        return None
    return _ymd(start, start.year, start.month, last_day_of_month(start))


def start_of_succ_year(d: date) -> Optional[date]:
    return _ymd(d, d.year + 1, 1, 1)


def end_of_succ_year(d: date) -> Optional[date]:
    return _ymd(d, d.year + 1, 12, 31)


def start_of_succ_iso8601_week(d: date) -> Optional[date]:
    return _shift(start_of_iso8601_week(d), ONE_WEEK)


def end_of_succ_iso8601_week(d: date) -> Optional[date]:
    return _shift(start_of_succ_iso8601_week(d), ONE_DAY * SUNDAY)
