"""Survey response model."""
import uuid

from sqlalchemy import Column, String, Text, Boolean, Index

from app.core.database import Base
from app.models.types import JSONEncoded, UTCDateTime, utcnow


def _new_id() -> str:
    return uuid.uuid4().hex


class SurveyResponse(Base):
    """
    Survey response model - one anonymous questionnaire submission.
    Created once and never edited; re-tagged to an archive period on reset.
    """

    __tablename__ = "survey_responses"

    id = Column(String(32), primary_key=True, default=_new_id)
    department = Column(String(100), nullable=False, index=True)

    # Section B: policy area -> rating
    awareness = Column(JSONEncoded, nullable=False)

    # Sections C-G: training needs
    urgent_trainings = Column(JSONEncoded, nullable=False, default=list)
    urgent_trainings_other = Column(Text, nullable=True)
    finance_wellness_needs = Column(JSONEncoded, nullable=False, default=list)
    culture_wellness_needs = Column(JSONEncoded, nullable=False, default=list)
    culture_wellness_other = Column(Text, nullable=True)
    digital_skills_needs = Column(JSONEncoded, nullable=False, default=list)
    digital_skills_other = Column(Text, nullable=True)
    professional_dev_needs = Column(JSONEncoded, nullable=False, default=list)
    professional_dev_other = Column(Text, nullable=True)

    # Section H: confidence and observed issues
    confidence_level = Column(String(50), nullable=False)
    faced_unsure_situation = Column(Boolean, nullable=False, default=False)
    unsure_situation_description = Column(Text, nullable=True)
    observed_issues = Column(JSONEncoded, nullable=False, default=list)
    observed_issues_other = Column(Text, nullable=True)
    knew_reporting_channel = Column(String(20), nullable=False)

    # Section I: training delivery
    training_method = Column(String(100), nullable=False)
    training_method_other = Column(Text, nullable=True)
    refresher_frequency = Column(String(50), nullable=False)

    # Section J: priorities and feedback
    prioritized_policies = Column(JSONEncoded, nullable=False, default=list)
    prioritization_reason = Column(Text, nullable=True)
    policy_challenges = Column(JSONEncoded, nullable=False, default=list)
    policy_challenges_other = Column(Text, nullable=True)
    compliance_suggestions = Column(Text, nullable=True)
    general_comments = Column(Text, nullable=True)

    survey_period = Column(String(64), nullable=False, default="default", index=True)
    created_at = Column(UTCDateTime, default=utcnow, nullable=False)

    __table_args__ = (
        Index("ix_survey_responses_period_created", "survey_period", "created_at"),
    )

    def __repr__(self):
        return f"<SurveyResponse(id={self.id}, department={self.department}, period={self.survey_period})>"
