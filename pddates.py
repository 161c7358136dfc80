"""
impl_date transitions over pandas columns

```python
import impl_date
from pddates import period_bounds, transition

df["next_bill"] = transition(df["billed_on"], impl_date.start_of_succ_month)
df = df.pipe(period_bounds, "billed_on", "month", prefix="period")
```
"""

import functools
from typing import Callable, Literal, Optional

import pandas as pd
from pandas import DataFrame as DF, Series

import impl_date
from impl_date import Transition


Period = Literal["week", "month", "year"]

_PERIODS: dict[str, tuple[Transition, Transition]] = {
    "week": (impl_date.start_of_iso8601_week, impl_date.end_of_iso8601_week),
    "month": (impl_date.start_of_month, impl_date.end_of_month),
    "year": (impl_date.start_of_year, impl_date.end_of_year),
}


def pipable(f: Callable):
    """decorator for functions fed to pandas.pipe"""
    @functools.wraps(f)
    def inner(*args, **kwargs) -> DF:
        assert isinstance(args[0], DF), f"{f.__name__} expects a DataFrame"
        r = f(*args, **kwargs)
        return r if isinstance(r, DF) else args[0]
    return inner


def transition(s: Series, op: Transition) -> Series:
    """apply op to every date in s, missing in -> missing out"""
    res = s.map(lambda x: None if pd.isna(x) else op(x))
    if pd.api.types.is_datetime64_any_dtype(s.dtype):
        return pd.to_datetime(res)
    return res


@pipable
def period_bounds(df: DF, col: str, period: Period, prefix: Optional[str] = None) -> DF:
    """add <prefix>_start / <prefix>_end holding the anchors of the period containing col"""
    if period not in _PERIODS:
        raise ValueError(f"unknown period {period!r}, expected one of {list(_PERIODS)}")
    start, end = _PERIODS[period]
    name = prefix or col
    return df.assign(**{
        f"{name}_start": transition(df[col], start),
        f"{name}_end": transition(df[col], end),
    })
