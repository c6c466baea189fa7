import datetime as dt
from typing import List

from .base import CamelModel
from .post_schema import PostOut


class CalendarDay(CamelModel):
    date: dt.date
    posts: List[PostOut]


class CalendarOut(CamelModel):
    view: str
    start_date: dt.date
    end_date: dt.date
    days: List[CalendarDay]
