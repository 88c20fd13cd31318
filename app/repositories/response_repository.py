"""Survey response repository."""
from typing import Any, Dict, List, Optional, Tuple
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.response import SurveyResponse


class ResponseRepository:
    """Data access for survey responses."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, **kwargs) -> SurveyResponse:
        response = SurveyResponse(**kwargs)
        self.db.add(response)
        self.db.commit()
        self.db.refresh(response)
        return response

    def get_by_id(self, response_id: str) -> Optional[SurveyResponse]:
        return self.db.query(SurveyResponse).filter(SurveyResponse.id == response_id).first()

    def _filtered(self, survey_period: Optional[str], department: Optional[str] = None):
        query = self.db.query(SurveyResponse)
        if survey_period is not None:
            query = query.filter(SurveyResponse.survey_period == survey_period)
        if department:
            query = query.filter(SurveyResponse.department == department)
        return query

    def get_page(
        self,
        survey_period: str,
        offset: int,
        limit: int,
        department: Optional[str] = None,
    ) -> Tuple[List[SurveyResponse], int]:
        """Return one page (newest first) and the total count."""
        query = self._filtered(survey_period, department)
        total = query.count()
        items = (
            query.order_by(SurveyResponse.created_at.desc(), SurveyResponse.id.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )
        return items, total

    def get_all(self, survey_period: Optional[str] = None) -> List[SurveyResponse]:
        """Responses newest first. ``None`` spans every period."""
        return (
            self._filtered(survey_period)
            .order_by(SurveyResponse.created_at.desc(), SurveyResponse.id.desc())
            .all()
        )

    def count_by(self, column: Any, survey_period: str) -> Dict[str, int]:
        """Grouped counts of ``column`` within a period."""
        rows = (
            self.db.query(column, func.count(SurveyResponse.id))
            .filter(SurveyResponse.survey_period == survey_period)
            .group_by(column)
            .all()
        )
        return {value: count for value, count in rows}

    def count_by_department(self, survey_period: str) -> Dict[str, int]:
        return self.count_by(SurveyResponse.department, survey_period)

    def period_summaries(self) -> List[Tuple[str, int, Any]]:
        """(period, response count, newest created_at) per period, most recent first."""
        latest = func.max(SurveyResponse.created_at)
        return (
            self.db.query(SurveyResponse.survey_period, func.count(SurveyResponse.id), latest)
            .group_by(SurveyResponse.survey_period)
            .order_by(latest.desc())
            .all()
        )

    def period_exists(self, survey_period: str) -> bool:
        return self.db.query(
            self._filtered(survey_period).exists()
        ).scalar()

    def retag_period(self, from_period: str, to_period: str) -> int:
        """Move every response of ``from_period`` to ``to_period``. Does not commit."""
        return (
            self.db.query(SurveyResponse)
            .filter(SurveyResponse.survey_period == from_period)
            .update({SurveyResponse.survey_period: to_period}, synchronize_session=False)
        )

    def delete_period(self, survey_period: str) -> int:
        deleted = (
            self.db.query(SurveyResponse)
            .filter(SurveyResponse.survey_period == survey_period)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted
