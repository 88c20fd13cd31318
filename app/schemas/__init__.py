"""Pydantic schemas for API validation and serialization."""
from app.schemas.user import (
    UserCreate, UserUpdate, UserLogin, UserResponse, Token, TokenUser
)
from app.schemas.response import (
    SurveySubmission, AwarenessRatings, SurveyResponseDetail,
    SubmissionResult, Pagination, ResponsePage, ResetResponsesRequest,
    AnalyticsSummary, SurveyPeriodSummary
)
from app.schemas.survey_config import SurveyConfigUpdate, SurveyConfigOut
from app.schemas.department import (
    DepartmentCountIn, DepartmentCountsUpdate, DepartmentStat,
    DepartmentTotals, DepartmentStats
)

__all__ = [
    "UserCreate",
    "UserUpdate",
    "UserLogin",
    "UserResponse",
    "Token",
    "TokenUser",
    "SurveySubmission",
    "AwarenessRatings",
    "SurveyResponseDetail",
    "SubmissionResult",
    "Pagination",
    "ResponsePage",
    "ResetResponsesRequest",
    "AnalyticsSummary",
    "SurveyPeriodSummary",
    "SurveyConfigUpdate",
    "SurveyConfigOut",
    "DepartmentCountIn",
    "DepartmentCountsUpdate",
    "DepartmentStat",
    "DepartmentTotals",
    "DepartmentStats",
]
