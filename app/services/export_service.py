"""CSV export of survey responses."""
import csv
import io
from typing import Iterable, Iterator, List

from app.models.response import SurveyResponse
from app.schemas.questionnaire import AWARENESS_AREAS

LIST_SEPARATOR = "; "

# (header, attribute) for the plain columns, in output order
COLUMNS = [
    ("ID", "id"),
    ("Submitted At", "created_at"),
    ("Survey Period", "survey_period"),
    ("Department", "department"),
    ("Urgent Trainings", "urgent_trainings"),
    ("Urgent Trainings Other", "urgent_trainings_other"),
    ("Finance Wellness Needs", "finance_wellness_needs"),
    ("Culture Wellness Needs", "culture_wellness_needs"),
    ("Culture Wellness Other", "culture_wellness_other"),
    ("Digital Skills Needs", "digital_skills_needs"),
    ("Digital Skills Other", "digital_skills_other"),
    ("Professional Dev Needs", "professional_dev_needs"),
    ("Professional Dev Other", "professional_dev_other"),
    ("Confidence Level", "confidence_level"),
    ("Faced Unsure Situation", "faced_unsure_situation"),
    ("Unsure Situation Description", "unsure_situation_description"),
    ("Observed Issues", "observed_issues"),
    ("Observed Issues Other", "observed_issues_other"),
    ("Knew Reporting Channel", "knew_reporting_channel"),
    ("Training Method", "training_method"),
    ("Training Method Other", "training_method_other"),
    ("Refresher Frequency", "refresher_frequency"),
    ("Prioritized Policies", "prioritized_policies"),
    ("Prioritization Reason", "prioritization_reason"),
    ("Policy Challenges", "policy_challenges"),
    ("Policy Challenges Other", "policy_challenges_other"),
    ("Compliance Suggestions", "compliance_suggestions"),
    ("General Comments", "general_comments"),
]


def header_row() -> List[str]:
    return [title for title, _ in COLUMNS] + [f"Awareness: {area}" for area in AWARENESS_AREAS]


def _cell(value) -> str:
    if value is None:
        return ""
    if isinstance(value, list):
        return LIST_SEPARATOR.join(str(item) for item in value)
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


def response_row(response: SurveyResponse) -> List[str]:
    awareness = response.awareness or {}
    return [_cell(getattr(response, attr)) for _, attr in COLUMNS] + [
        _cell(awareness.get(area)) for area in AWARENESS_AREAS
    ]


def iter_csv(responses: Iterable[SurveyResponse]) -> Iterator[str]:
    """Yield the CSV document line by line: a header, then one row per response."""
    buffer = io.StringIO()
    writer = csv.writer(buffer)

    def flush() -> str:
        chunk = buffer.getvalue()
        buffer.seek(0)
        buffer.truncate(0)
        return chunk

    writer.writerow(header_row())
    yield flush()
    for response in responses:
        writer.writerow(response_row(response))
        yield flush()
