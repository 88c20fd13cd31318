"""Survey response service: the submission lifecycle and admin reads."""
import json
import logging
import math
import time
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import BadRequest, NotFound, StorageUnavailable
from app.core.logging_config import get_recovery_logger
from app.core.rate_limiter import RateLimiter
from app.models.response import SurveyResponse
from app.models.types import utcnow
from app.repositories.response_repository import ResponseRepository
from app.schemas.questionnaire import AWARENESS_AREAS, HIGH_CONFIDENCE_LEVELS
from app.schemas.response import SubmissionResult, SurveySubmission
from app.services.survey_config_service import SurveyConfigService
from app.services.survey_window import ensure_accepting
from app.services.validation_service import SubmissionValidator

logger = logging.getLogger(__name__)

# A submission that cannot be stored is logged in full and acknowledged anyway.
ACCEPT_ON_STORAGE_FAILURE = True

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

FALLBACK_WARNING = "Response logged but database unavailable"
READ_FALLBACK_WARNING = "Database unavailable, no responses could be loaded"


class ResponseService:
    """Survey response business logic."""

    def __init__(self, db: Session):
        self.db = db
        self.response_repo = ResponseRepository(db)

    # -- submission lifecycle -------------------------------------------------

    def process_submission(
        self,
        payload: Any,
        client_address: str,
        limiter: RateLimiter,
        now: Optional[datetime] = None,
    ) -> SubmissionResult:
        """
        Validate, gate, rate limit and persist one submission.

        Invalid or rejected submissions consume no rate limit budget.

        Raises:
            ValidationError: If the payload does not match the questionnaire
            SurveyUnavailable: If the survey window is closed
            RateLimited: If the client is over its submission budget
        """
        submission = SubmissionValidator(strict_others=settings.STRICT_OTHER_TEXT).validate(payload)
        ensure_accepting(self._window_config(), now or utcnow())
        limiter.check(f"submit:{client_address}")
        return self.submit_response(submission)

    def _window_config(self):
        try:
            return SurveyConfigService(self.db).find_current_config()
        except SQLAlchemyError:
            self.db.rollback()
            logger.warning("Survey config lookup failed, accepting submission", exc_info=True)
            return None

    def submit_response(self, submission: SurveySubmission) -> SubmissionResult:
        """
        Store a validated submission.

        When storage fails the full payload goes to the recovery log and a
        synthetic ``logged-<epoch ms>`` id is returned.
        """
        try:
            response = self.response_repo.create(
                survey_period=settings.DEFAULT_SURVEY_PERIOD,
                **submission.to_record(),
            )
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to store survey response")
            get_recovery_logger().error(
                "Unsaved survey response: %s",
                json.dumps(submission.model_dump(by_alias=True), ensure_ascii=False),
            )
            if not ACCEPT_ON_STORAGE_FAILURE:
                raise StorageUnavailable("Failed to save survey response")
            return SubmissionResult(
                id=f"logged-{int(time.time() * 1000)}",
                fallback=True,
                warning=FALLBACK_WARNING,
            )

        logger.info("Stored survey response %s (%s)", response.id, response.department)
        return SubmissionResult(id=response.id)

    # -- admin reads ------------------------------------------------------------

    @staticmethod
    def _pagination(page: int, limit: int, total: int) -> Dict[str, Any]:
        total_pages = math.ceil(total / limit) if total else 0
        return {
            "page": page,
            "limit": limit,
            "total_count": total,
            "total_pages": total_pages,
            "has_next_page": page < total_pages,
            "has_prev_page": page > 1,
        }

    def list_responses(
        self,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
        department: Optional[str] = None,
        survey_period: str = "default",
    ) -> Dict[str, Any]:
        """
        One page of responses, newest first.

        On a storage error an empty first page is returned with a warning.
        """
        page = max(page, 1)
        limit = min(max(limit, 1), MAX_PAGE_SIZE)
        if department == "all":
            department = None

        try:
            items, total = self.response_repo.get_page(
                survey_period, offset=(page - 1) * limit, limit=limit, department=department
            )
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to load survey responses")
            return {
                "data": [],
                "pagination": self._pagination(1, DEFAULT_PAGE_SIZE, 0),
                "warning": READ_FALLBACK_WARNING,
            }

        return {"data": items, "pagination": self._pagination(page, limit, total), "warning": None}

    def get_response(self, response_id: str) -> SurveyResponse:
        """
        Raises:
            NotFound: If no response has this id
        """
        response = self.response_repo.get_by_id(response_id)
        if not response:
            raise NotFound("Response not found")
        return response

    def get_all_responses(self, survey_period: Optional[str] = None) -> List[SurveyResponse]:
        return self.response_repo.get_all(survey_period)

    def list_survey_periods(self) -> Dict[str, Any]:
        """
        Every survey period holding responses, most recently active first.

        Archived generations are listed under their archive tags.
        """
        current = settings.DEFAULT_SURVEY_PERIOD
        try:
            rows = self.response_repo.period_summaries()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to load survey periods")
            return {"data": [], "warning": READ_FALLBACK_WARNING}

        periods = [
            {
                "survey_period": period,
                "response_count": count,
                "latest_response_at": latest,
                "is_current": period == current,
            }
            for period, count, latest in rows
        ]
        return {"data": periods, "warning": None}

    def get_analytics(self, survey_period: str = "default") -> Dict[str, Any]:
        """Summary aggregates for the dashboard."""
        try:
            responses = self.response_repo.get_all(survey_period)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to load responses for analytics")
            summary = summarize_responses([])
            summary["warning"] = READ_FALLBACK_WARNING
            return summary
        return summarize_responses(responses)

    # -- admin writes ---------------------------------------------------------

    def reset_period_responses(self, survey_period: str, confirm_reset: bool) -> int:
        """
        Delete every response of one period.

        Raises:
            BadRequest: Unless ``confirm_reset`` is true
            StorageUnavailable: If the database cannot be written
        """
        if not confirm_reset:
            raise BadRequest("Reset must be confirmed with confirmReset: true")
        try:
            deleted = self.response_repo.delete_period(survey_period)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to delete responses of %s", survey_period)
            raise StorageUnavailable("Failed to reset responses: database unavailable")
        logger.warning("Deleted %d response(s) of period %s", deleted, survey_period)
        return deleted


def summarize_responses(responses: List[SurveyResponse]) -> Dict[str, Any]:
    """Counts and awareness averages over ``responses``."""
    by_department: Dict[str, int] = {}
    by_confidence: Dict[str, int] = {}
    area_totals = {area: 0 for area in AWARENESS_AREAS}
    area_counts = {area: 0 for area in AWARENESS_AREAS}
    high_confidence = 0
    faced_unsure = 0

    for response in responses:
        by_department[response.department] = by_department.get(response.department, 0) + 1
        by_confidence[response.confidence_level] = by_confidence.get(response.confidence_level, 0) + 1
        if response.confidence_level in HIGH_CONFIDENCE_LEVELS:
            high_confidence += 1
        if response.faced_unsure_situation:
            faced_unsure += 1
        for area, rating in (response.awareness or {}).items():
            if area in area_totals:
                area_totals[area] += rating
                area_counts[area] += 1

    averages = {
        area: round(area_totals[area] / area_counts[area], 1) if area_counts[area] else 0
        for area in AWARENESS_AREAS
    }
    rated = sum(area_counts.values())
    overall = round(sum(area_totals.values()) / rated, 1) if rated else 0

    return {
        "total_responses": len(responses),
        "by_department": by_department,
        "by_confidence": by_confidence,
        "average_awareness": averages,
        "overall_average_awareness": overall,
        "high_confidence_count": high_confidence,
        "faced_unsure_count": faced_unsure,
    }
