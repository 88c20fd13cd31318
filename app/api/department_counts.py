"""Department headcount router (Admin)."""
import logging
from typing import Annotated
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.services.department_service import DepartmentService
from app.schemas.department import DepartmentCountsUpdate, DepartmentStats
from app.api.dependencies import AnyAdmin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/department-counts", tags=["Departments"])


def _stats_body(stats: dict) -> dict:
    body = DepartmentStats(**stats).model_dump(by_alias=True, exclude_none=True)
    return {"success": True, **body}


@router.get("")
def get_department_counts(
    db: Annotated[Session, Depends(get_db)],
    current_user: AnyAdmin,
    survey_period: str = Query("default", alias="surveyPeriod"),
):
    """
    Staff, responses, remaining and response rate per department.
    """
    service = DepartmentService(db)
    return _stats_body(service.get_department_stats(survey_period))


@router.put("")
def update_department_counts(
    data: DepartmentCountsUpdate,
    db: Annotated[Session, Depends(get_db)],
    current_user: AnyAdmin,
    survey_period: str = Query("default", alias="surveyPeriod"),
):
    """
    Replace the active headcounts. Previous counts are kept, inactive.
    """
    logger.info("Admin %s replacing department counts", current_user.username)
    service = DepartmentService(db)
    return _stats_body(service.replace_counts(data, survey_period))
