"""Survey response schemas."""
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, BeforeValidator, field_validator
from pydantic.alias_generators import to_camel
from typing import Annotated, Any, Dict, List, Literal, Optional
from datetime import datetime

from app.schemas.questionnaire import (
    DEPARTMENTS,
    URGENT_TRAININGS,
    FINANCE_WELLNESS_NEEDS,
    CULTURE_WELLNESS_NEEDS,
    DIGITAL_SKILLS_NEEDS,
    PROFESSIONAL_DEV_NEEDS,
    CONFIDENCE_LEVELS,
    OBSERVED_ISSUES,
    REPORTING_CHANNEL_ANSWERS,
    TRAINING_METHODS,
    REFRESHER_FREQUENCIES,
    PRIORITIZED_POLICIES,
    POLICY_CHALLENGES,
)


def _whole_number(value: Any) -> Any:
    """Let 3.0 through as 3; booleans are never ratings."""
    if isinstance(value, bool):
        raise ValueError("Rating must be an integer between 1 and 5")
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


Rating = Annotated[StrictInt, Field(ge=1, le=5), BeforeValidator(_whole_number)]

Department = Literal[DEPARTMENTS]
ConfidenceLevel = Literal[CONFIDENCE_LEVELS]
ReportingChannelAnswer = Literal[REPORTING_CHANNEL_ANSWERS]
TrainingMethod = Literal[TRAINING_METHODS]
RefresherFrequency = Literal[REFRESHER_FREQUENCIES]


class CamelModel(BaseModel):
    """Accepts and emits the camelCase keys the survey form uses."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AwarenessRatings(CamelModel):
    """Section B: self-rated awareness per policy area (1-5)."""
    anti_social_behavior: Rating
    anti_discrimination: Rating
    sexual_harassment: Rating
    safeguarding: Rating
    hr_policy_manual: Rating
    code_of_conduct: Rating
    finance_wellness: Rating
    work_life_balance: Rating
    digital_workplace: Rating
    soft_skills: Rating
    professionalism: Rating


class SurveySubmission(CamelModel):
    """
    One anonymous questionnaire submission as posted by the form.
    Unknown keys are ignored.
    """
    department: Department
    awareness: AwarenessRatings

    urgent_trainings: List[Literal[URGENT_TRAININGS]] = Field(min_length=1)
    urgent_trainings_other: Optional[str] = None
    finance_wellness_needs: List[Literal[FINANCE_WELLNESS_NEEDS]] = Field(default_factory=list)
    culture_wellness_needs: List[Literal[CULTURE_WELLNESS_NEEDS]] = Field(default_factory=list)
    culture_wellness_other: Optional[str] = None
    digital_skills_needs: List[Literal[DIGITAL_SKILLS_NEEDS]] = Field(default_factory=list)
    digital_skills_other: Optional[str] = None
    professional_dev_needs: List[Literal[PROFESSIONAL_DEV_NEEDS]] = Field(default_factory=list)
    professional_dev_other: Optional[str] = None

    confidence_level: ConfidenceLevel
    faced_unsure_situation: StrictBool
    unsure_situation_description: Optional[str] = None
    observed_issues: List[Literal[OBSERVED_ISSUES]] = Field(default_factory=list)
    observed_issues_other: Optional[str] = None
    knew_reporting_channel: ReportingChannelAnswer

    training_method: TrainingMethod
    training_method_other: Optional[str] = None
    refresher_frequency: RefresherFrequency

    prioritized_policies: List[Literal[PRIORITIZED_POLICIES]] = Field(min_length=1)
    prioritization_reason: Optional[str] = None
    policy_challenges: List[Literal[POLICY_CHALLENGES]] = Field(min_length=1)
    policy_challenges_other: Optional[str] = None
    compliance_suggestions: Optional[str] = None
    general_comments: Optional[str] = None

    @field_validator("prioritization_reason", "compliance_suggestions")
    @classmethod
    def not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            raise ValueError("must not be empty")
        return value

    def to_record(self) -> Dict[str, Any]:
        """Column values for a new SurveyResponse row (awareness keeps its camelCase keys)."""
        record = self.model_dump()
        record["awareness"] = self.awareness.model_dump(by_alias=True)
        return record


class SurveyResponseDetail(CamelModel):
    """Stored response as returned to admins."""
    id: str
    department: str
    awareness: Dict[str, int]
    urgent_trainings: List[str] = []
    urgent_trainings_other: Optional[str] = None
    finance_wellness_needs: List[str] = []
    culture_wellness_needs: List[str] = []
    culture_wellness_other: Optional[str] = None
    digital_skills_needs: List[str] = []
    digital_skills_other: Optional[str] = None
    professional_dev_needs: List[str] = []
    professional_dev_other: Optional[str] = None
    confidence_level: str
    faced_unsure_situation: bool
    unsure_situation_description: Optional[str] = None
    observed_issues: List[str] = []
    observed_issues_other: Optional[str] = None
    knew_reporting_channel: str
    training_method: str
    training_method_other: Optional[str] = None
    refresher_frequency: str
    prioritized_policies: List[str] = []
    prioritization_reason: Optional[str] = None
    policy_challenges: List[str] = []
    policy_challenges_other: Optional[str] = None
    compliance_suggestions: Optional[str] = None
    general_comments: Optional[str] = None
    survey_period: str
    created_at: datetime

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class SubmissionResult(BaseModel):
    """Outcome of persisting a submission."""
    id: str
    fallback: bool = False
    warning: Optional[str] = None


class Pagination(CamelModel):
    """Page metadata for admin listings."""
    page: int
    limit: int
    total_count: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool


class ResponsePage(BaseModel):
    """One page of responses, newest first."""
    data: List[SurveyResponseDetail]
    pagination: Pagination
    warning: Optional[str] = None


class ResetResponsesRequest(CamelModel):
    """Body of POST /reset-responses."""
    survey_period: str = "default"
    confirm_reset: bool = False


class AnalyticsSummary(CamelModel):
    """Dashboard aggregates for one survey period."""
    total_responses: int
    by_department: Dict[str, int]
    by_confidence: Dict[str, int]
    average_awareness: Dict[str, float]
    overall_average_awareness: float
    high_confidence_count: int
    faced_unsure_count: int
    warning: Optional[str] = None


class SurveyPeriodSummary(CamelModel):
    """One survey generation and its responses."""
    survey_period: str
    response_count: int
    latest_response_at: Optional[datetime] = None
    is_current: bool = False
