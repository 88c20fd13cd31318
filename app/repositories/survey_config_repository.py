"""Survey configuration repository."""
from typing import Optional
from sqlalchemy.orm import Session

from app.models.survey_config import SurveyConfig


class SurveyConfigRepository:
    """Data access for survey configurations."""

    def __init__(self, db: Session):
        self.db = db

    def get_current(self, survey_period: str) -> Optional[SurveyConfig]:
        """Newest config row for the period."""
        return (
            self.db.query(SurveyConfig)
            .filter(SurveyConfig.survey_period == survey_period)
            .order_by(SurveyConfig.created_at.desc(), SurveyConfig.id.desc())
            .first()
        )

    def create(self, commit: bool = True, **kwargs) -> SurveyConfig:
        config = SurveyConfig(**kwargs)
        self.db.add(config)
        if commit:
            self.db.commit()
            self.db.refresh(config)
        return config

    def update(self, config: SurveyConfig, **kwargs) -> SurveyConfig:
        for field, value in kwargs.items():
            setattr(config, field, value)
        self.db.commit()
        self.db.refresh(config)
        return config

    def delete_period(self, survey_period: str) -> int:
        """Remove every config of the period. Does not commit."""
        return (
            self.db.query(SurveyConfig)
            .filter(SurveyConfig.survey_period == survey_period)
            .delete(synchronize_session="fetch")
        )
