"""Department headcount service."""
import logging
from typing import Dict, Iterable, List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import StorageUnavailable
from app.repositories.department_repository import DepartmentRepository
from app.repositories.response_repository import ResponseRepository
from app.schemas.department import DepartmentCountsUpdate
from app.schemas.questionnaire import DEFAULT_DEPARTMENT_COUNTS

logger = logging.getLogger(__name__)


def response_rate(responses: int, staff: int) -> int:
    """Whole-number percentage; 0 when there is no staff to answer."""
    if staff <= 0:
        return 0
    return round(responses / staff * 100)


def build_stats(staff_counts: Iterable[Tuple[str, int]], response_counts: Dict[str, int]) -> Dict:
    departments = []
    for department, staff in staff_counts:
        responses = response_counts.get(department, 0)
        departments.append({
            "department": department,
            "staff_count": staff,
            "response_count": responses,
            "remaining_count": staff - responses,
            "response_rate": response_rate(responses, staff),
        })

    total_expected = sum(item["staff_count"] for item in departments)
    total_responses = sum(item["response_count"] for item in departments)
    return {
        "departments": departments,
        "totals": {
            "total_expected": total_expected,
            "total_responses": total_responses,
            "total_remaining": total_expected - total_responses,
            "overall_response_rate": response_rate(total_responses, total_expected),
        },
    }


class DepartmentService:
    """Department headcounts and response progress."""

    def __init__(self, db: Session):
        self.db = db
        self.department_repo = DepartmentRepository(db)
        self.response_repo = ResponseRepository(db)

    def get_department_stats(self, survey_period: str = "default") -> Dict:
        """
        Staff, responses, remaining and rate per active department.

        On a storage error the built-in headcounts are shown with zero
        responses and a warning.
        """
        try:
            rows = self.department_repo.get_active()
            counts = self.response_repo.count_by_department(survey_period)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to load department statistics")
            stats = build_stats(DEFAULT_DEPARTMENT_COUNTS.items(), {})
            stats["warning"] = "Database unavailable, showing default department counts"
            return stats

        stats = build_stats(((row.department, row.staff_count) for row in rows), counts)
        stats["warning"] = None
        return stats

    def replace_counts(self, data: DepartmentCountsUpdate, survey_period: str = "default") -> Dict:
        """
        Swap the active headcounts for ``data``.

        Raises:
            StorageUnavailable: If the database cannot be written
        """
        counts = {item.department: item.staff_count for item in data.departments}
        try:
            self.department_repo.replace_active(counts)
        except SQLAlchemyError:
            logger.exception("Failed to replace department counts")
            raise StorageUnavailable("Failed to update department counts: database unavailable")
        logger.info("Department counts replaced (%d departments)", len(counts))
        return self.get_department_stats(survey_period)

    def seed_defaults(self) -> Optional[List]:
        """Load the built-in headcounts unless active counts already exist."""
        if self.department_repo.get_active():
            return None
        return self.department_repo.replace_active(dict(DEFAULT_DEPARTMENT_COUNTS))
