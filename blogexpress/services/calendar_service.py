from __future__ import annotations
import calendar
from datetime import date, datetime, time, timedelta, timezone
from typing import Dict, Iterable, List, Optional, Tuple

from loguru import logger
from sqlalchemy import func
from sqlalchemy.orm import Session

from blogexpress.models import Post, CalendarView
from blogexpress.schemas.calendar_schema import CalendarDay, CalendarOut
from blogexpress.schemas.post_schema import PostOut


def date_range(selected: date, view: CalendarView) -> Tuple[date, date]:
    """
    Inclusive (start, end) shown by the content calendar.
    - day:   the selected date
    - week:  Sunday .. Saturday around it
    - month: first .. last day of its month
    """
    if view == CalendarView.day:
        return selected, selected
    if view == CalendarView.week:
        # date.weekday(): Monday=0 .. Sunday=6
        start = selected - timedelta(days=(selected.weekday() + 1) % 7)
        return start, start + timedelta(days=6)
    last_day = calendar.monthrange(selected.year, selected.month)[1]
    return selected.replace(day=1), selected.replace(day=last_day)


def post_day(post: Post) -> date:
    stamp: datetime = post.published_at or post.created_at
    if stamp.tzinfo is not None:
        stamp = stamp.astimezone(timezone.utc)
    return stamp.date()


def bucket_by_day(posts: Iterable[Post], start: date, end: date) -> Dict[date, List[Post]]:
    buckets: Dict[date, List[Post]] = {}
    day = start
    while day <= end:
        buckets[day] = []
        day += timedelta(days=1)

    for post in posts:
        d = post_day(post)
        if start <= d <= end:
            buckets[d].append(post)
    return buckets


class CalendarService:

    def get_calendar(
        self,
        db: Session,
        selected: date,
        view: CalendarView = CalendarView.week,
        status: Optional[str] = None,
    ) -> CalendarOut:
        logger.info(f"[CalendarService] Method : get_calendar view={view.value} date={selected}")
        start, end = date_range(selected, view)

        # stored timestamps are UTC wall-clock; [lo, hi) covers whole days
        stamp = func.coalesce(Post.published_at, Post.created_at)
        lo = datetime.combine(start, time.min)
        hi = datetime.combine(end + timedelta(days=1), time.min)

        query = db.query(Post).filter(stamp >= lo, stamp < hi)
        if status:
            query = query.filter(Post.status == status)
        posts = query.order_by(stamp.asc(), Post.id.asc()).all()

        buckets = bucket_by_day(posts, start, end)
        return CalendarOut(
            view=view.value,
            start_date=start,
            end_date=end,
            days=[
                CalendarDay(date=d, posts=[PostOut.model_validate(p) for p in items])
                for d, items in buckets.items()
            ],
        )
