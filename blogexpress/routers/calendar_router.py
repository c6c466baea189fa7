from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from blogexpress.models.enums import CalendarView
from blogexpress.schemas.calendar_schema import CalendarOut
from blogexpress.services.calendar_service import CalendarService
from blogexpress.db import get_db

router = APIRouter()
calendar_service = CalendarService()


@router.get("", response_model=CalendarOut)
def fetch_calendar(
    selected: Optional[date] = Query(None, alias="date"),
    view: CalendarView = Query(CalendarView.week),
    status: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    return calendar_service.get_calendar(db, selected or date.today(), view, status)
