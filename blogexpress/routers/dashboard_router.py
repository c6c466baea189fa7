from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from blogexpress.schemas.dashboard_schema import DashboardStats
from blogexpress.services.dashboard_service import DashboardService
from blogexpress.db import get_db

router = APIRouter()
dashboard_service = DashboardService()


@router.get("/stats", response_model=DashboardStats)
def fetch_dashboard_stats(db: Session = Depends(get_db)):
    return dashboard_service.get_stats(db)
