"""
Unit tests for CSV export rendering
"""
import csv
import io
from datetime import datetime, timezone

from app.models.response import SurveyResponse
from app.services.export_service import header_row, iter_csv, response_row


def _response(**overrides) -> SurveyResponse:
    values = dict(
        id='abc123',
        department='Technical Team',
        awareness={'antiSocialBehavior': 4, 'safeguarding': 2},
        urgent_trainings=['Code of Conduct', 'Safeguarding Policy'],
        finance_wellness_needs=[],
        culture_wellness_needs=[],
        digital_skills_needs=[],
        professional_dev_needs=[],
        confidence_level='Neutral',
        faced_unsure_situation=True,
        observed_issues=['None of the above'],
        knew_reporting_channel='No',
        training_method='Shared Policy handbooks',
        refresher_frequency='2 trainings /Month',
        prioritized_policies=['HR Policy Manual'],
        prioritization_reason='Clear rules, "quoted", with commas',
        policy_challenges=['Language barriers or technical jargon'],
        survey_period='default',
        created_at=datetime(2026, 3, 10, 12, 0, tzinfo=timezone.utc),
    )
    values.update(overrides)
    return SurveyResponse(**values)


def test_arrays_joined_with_semicolons():
    row = dict(zip(header_row(), response_row(_response())))

    assert row['Urgent Trainings'] == 'Code of Conduct; Safeguarding Policy'
    assert row['Finance Wellness Needs'] == ''
    assert row['Faced Unsure Situation'] == 'Yes'
    assert row['Awareness: antiSocialBehavior'] == '4'
    assert row['Awareness: professionalism'] == ''
    assert row['Submitted At'] == '2026-03-10T12:00:00+00:00'


def test_one_row_per_response_and_quoting():
    document = ''.join(iter_csv([_response(), _response(id='def456')]))

    rows = list(csv.reader(io.StringIO(document)))

    assert rows[0] == header_row()
    assert len(rows) == 3
    assert rows[2][0] == 'def456'
    assert 'Clear rules, "quoted", with commas' in rows[1]


def test_empty_export_has_header_only():
    rows = list(csv.reader(io.StringIO(''.join(iter_csv([])))))

    assert rows == [header_row()]
