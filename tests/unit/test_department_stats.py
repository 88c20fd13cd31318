"""
Unit tests for department response statistics
"""
import pytest

from app.schemas.department import DepartmentCountsUpdate
from app.services.department_service import DepartmentService, build_stats, response_rate


@pytest.mark.parametrize('responses, staff, expected', [
    (3, 10, 30),
    (0, 10, 0),
    (1, 3, 33),
    (2, 3, 67),
    (5, 0, 0),
    (12, 10, 120),
])
def test_response_rate(responses, staff, expected):
    assert response_rate(responses, staff) == expected


def test_build_stats_rows_and_totals():
    stats = build_stats(
        [('Technical Team', 10), ('Security Department', 0)],
        {'Technical Team': 3, 'Security Department': 2},
    )

    technical, security = stats['departments']
    assert technical == {
        'department': 'Technical Team',
        'staff_count': 10,
        'response_count': 3,
        'remaining_count': 7,
        'response_rate': 30,
    }
    assert security['response_rate'] == 0
    assert security['remaining_count'] == -2
    assert stats['totals'] == {
        'total_expected': 10,
        'total_responses': 5,
        'total_remaining': 5,
        'overall_response_rate': 50,
    }


def test_departments_without_responses_report_zero():
    stats = build_stats([('Sanitation Department', 2)], {})

    assert stats['departments'][0]['response_count'] == 0
    assert stats['departments'][0]['remaining_count'] == 2


class TestDepartmentService:
    def test_replace_deactivates_previous_set(self, db_session):
        service = DepartmentService(db_session)
        service.replace_counts(DepartmentCountsUpdate(departments=[
            {'department': 'Technical Team', 'staffCount': 10},
        ]))

        stats = service.replace_counts(DepartmentCountsUpdate(departments=[
            {'department': 'Technical Team', 'staffCount': 12},
            {'department': 'Security Department', 'staffCount': 4},
        ]))

        assert [(d['department'], d['staff_count']) for d in stats['departments']] == [
            ('Security Department', 4),
            ('Technical Team', 12),
        ]

    def test_seed_defaults_is_idempotent(self, db_session):
        service = DepartmentService(db_session)

        rows = service.seed_defaults()

        assert len(rows) == 9
        assert service.seed_defaults() is None

    def test_duplicate_department_rejected(self):
        with pytest.raises(ValueError):
            DepartmentCountsUpdate(departments=[
                {'department': 'Technical Team', 'staffCount': 1},
                {'department': 'Technical Team', 'staffCount': 2},
            ])
