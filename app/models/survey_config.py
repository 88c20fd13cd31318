"""Survey configuration model."""
from sqlalchemy import Column, Integer, String, Text, Boolean

from app.core.database import Base
from app.models.types import UTCDateTime, utcnow


class SurveyConfig(Base):
    """
    Survey window and metadata for one survey period.
    The newest row for the current period is authoritative.
    """

    __tablename__ = "survey_configs"
    # Ids of deleted configs are never reused
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    survey_period = Column(String(64), nullable=False, default="default", index=True)
    is_active = Column(Boolean, nullable=False, default=True)
    start_date = Column(UTCDateTime, nullable=False)
    end_date = Column(UTCDateTime, nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    expected_responses = Column(Integer, nullable=False, default=100)
    created_at = Column(UTCDateTime, default=utcnow, nullable=False)
    updated_at = Column(UTCDateTime, onupdate=utcnow)

    def __repr__(self):
        return f"<SurveyConfig(id={self.id}, period={self.survey_period}, active={self.is_active})>"
