"""Submission validation service."""
import logging
from typing import Any, Dict, List

from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from app.core.exceptions import ValidationError
from app.schemas.questionnaire import OTHER_TEXT_PAIRS
from app.schemas.response import SurveySubmission

logger = logging.getLogger(__name__)


def violations_from_pydantic(exc: PydanticValidationError) -> List[Dict[str, Any]]:
    """Flatten Pydantic errors into ``{path, expected, received}`` entries."""
    violations = []
    for error in exc.errors(include_url=False):
        ctx = error.get("ctx") or {}
        expected = ctx.get("expected")
        if expected is None:
            expected = error["msg"]
        received = None if error["type"] == "missing" else error.get("input")
        violations.append({
            "path": ".".join(str(part) for part in error["loc"]),
            "expected": str(expected),
            "received": received,
        })
    return violations


class SubmissionValidator:
    """
    Checks a raw submission payload against the questionnaire.

    Pure: the payload is not modified and nothing is stored or logged
    beyond a debug line.
    """

    def __init__(self, strict_others: bool = False):
        self.strict_others = strict_others

    def validate(self, payload: Any) -> SurveySubmission:
        """
        Validate ``payload`` and return the parsed submission.

        Raises:
            ValidationError: With one violation per offending field
        """
        if not isinstance(payload, dict):
            raise ValidationError([{
                "path": "",
                "expected": "JSON object",
                "received": type(payload).__name__,
            }])

        try:
            submission = SurveySubmission.model_validate(payload)
        except PydanticValidationError as exc:
            violations = violations_from_pydantic(exc)
            logger.debug("Submission rejected: %d violation(s)", len(violations))
            raise ValidationError(violations)

        if self.strict_others:
            violations = self.missing_other_text(submission)
            if violations:
                raise ValidationError(violations)

        return submission

    @staticmethod
    def missing_other_text(submission: SurveySubmission) -> List[Dict[str, Any]]:
        """Selections of an "Others" option whose paired text is blank."""
        violations = []
        for field, (sentinels, other_field) in OTHER_TEXT_PAIRS.items():
            selected = getattr(submission, field)
            if not any(sentinel in selected for sentinel in sentinels):
                continue
            text = getattr(submission, other_field)
            if text is None or not text.strip():
                violations.append({
                    "path": to_camel(other_field),
                    "expected": f"non-empty text when {to_camel(field)} includes {sentinels[0]!r}",
                    "received": text,
                })
        return violations
