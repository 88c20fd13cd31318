"""Service layer for business logic."""
from app.services.auth_service import AuthService
from app.services.user_service import UserService
from app.services.response_service import ResponseService
from app.services.survey_config_service import SurveyConfigService
from app.services.department_service import DepartmentService
from app.services.validation_service import SubmissionValidator

__all__ = [
    "AuthService",
    "UserService",
    "ResponseService",
    "SurveyConfigService",
    "DepartmentService",
    "SubmissionValidator",
]
