"""Response browsing, export and analytics router (Admin)."""
import logging
from typing import Annotated, Optional
from fastapi import APIRouter, Depends, Query
from fastapi.responses import StreamingResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.exceptions import StorageUnavailable
from app.services.export_service import iter_csv
from app.services.response_service import ResponseService, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from app.schemas.response import (
    AnalyticsSummary,
    Pagination,
    ResetResponsesRequest,
    SurveyPeriodSummary,
    SurveyResponseDetail,
)
from app.api.dependencies import AnyAdmin

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Admin - Responses"])


@router.get("/responses")
def list_responses(
    db: Annotated[Session, Depends(get_db)],
    current_user: AnyAdmin,
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    department: Optional[str] = None,
    survey_period: str = Query("default", alias="surveyPeriod"),
):
    """
    Paginated responses, newest first.

    ``department=all`` (or no department) lists every department.
    """
    logger.info("Admin %s listing responses (page %s, %s)", current_user.username, page, survey_period)
    service = ResponseService(db)
    result = service.list_responses(page=page, limit=limit, department=department, survey_period=survey_period)

    body = {
        "success": True,
        "data": [
            SurveyResponseDetail.model_validate(item).model_dump(by_alias=True, mode="json")
            for item in result["data"]
        ],
        "pagination": Pagination(**result["pagination"]).model_dump(by_alias=True),
    }
    if result["warning"]:
        body["warning"] = result["warning"]
    return body


@router.get("/responses/{response_id}")
def get_response(
    response_id: str,
    db: Annotated[Session, Depends(get_db)],
    current_user: AnyAdmin
):
    """
    Get one response by id.
    """
    service = ResponseService(db)
    response = service.get_response(response_id)
    return {
        "success": True,
        "data": SurveyResponseDetail.model_validate(response).model_dump(by_alias=True, mode="json"),
    }


@router.get("/export")
def export_responses(
    db: Annotated[Session, Depends(get_db)],
    current_user: AnyAdmin,
    survey_period: Optional[str] = Query(None, alias="surveyPeriod"),
):
    """
    Download responses as CSV, newest first. Multi-select answers are joined with "; ".

    Without ``surveyPeriod`` every period is exported, archived ones included.
    """
    logger.info("Admin %s exporting responses of %s", current_user.username, survey_period or "all periods")
    service = ResponseService(db)
    try:
        responses = service.get_all_responses(survey_period)
        # Rendered before the session closes
        lines = list(iter_csv(responses))
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to load responses for export")
        raise StorageUnavailable("Failed to export responses: database unavailable")

    filename = f"survey-responses-{survey_period or 'all'}.csv"
    return StreamingResponse(
        iter(lines),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/reset-responses")
def reset_responses(
    data: ResetResponsesRequest,
    db: Annotated[Session, Depends(get_db)],
    current_user: AnyAdmin
):
    """
    Permanently delete every response of one period. Requires ``confirmReset: true``.
    """
    logger.warning("Admin %s deleting responses of %s", current_user.username, data.survey_period)
    service = ResponseService(db)
    deleted = service.reset_period_responses(data.survey_period, data.confirm_reset)
    return {
        "success": True,
        "message": f"Deleted {deleted} response(s) from {data.survey_period}",
        "deletedCount": deleted,
    }


@router.get("/analytics")
def get_analytics(
    db: Annotated[Session, Depends(get_db)],
    current_user: AnyAdmin,
    survey_period: str = Query("default", alias="surveyPeriod"),
):
    """
    Summary aggregates: counts by department and confidence, awareness averages.
    """
    service = ResponseService(db)
    summary = AnalyticsSummary(**service.get_analytics(survey_period))
    return {"success": True, **summary.model_dump(by_alias=True, exclude_none=True)}


@router.get("/survey-periods")
def list_survey_periods(
    db: Annotated[Session, Depends(get_db)],
    current_user: AnyAdmin
):
    """
    Survey periods with their response counts, including archive tags left by resets.
    """
    logger.info("Admin %s listing survey periods", current_user.username)
    service = ResponseService(db)
    result = service.list_survey_periods()

    body = {
        "success": True,
        "data": [
            SurveyPeriodSummary(**period).model_dump(by_alias=True, mode="json")
            for period in result["data"]
        ],
    }
    if result["warning"]:
        body["warning"] = result["warning"]
    return body
