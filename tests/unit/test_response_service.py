"""
Unit tests for the response service: persistence, fallback, reads and analytics
"""
import logging
from datetime import datetime, timedelta, timezone

import pytest
from limits.storage import MemoryStorage
from sqlalchemy.exc import OperationalError

from app.core.exceptions import BadRequest, NotFound, RateLimited, SurveyUnavailable
from app.core.rate_limiter import RateLimiter
from app.models.response import SurveyResponse
from app.models.survey_config import SurveyConfig
from app.repositories.response_repository import ResponseRepository
from app.services.response_service import ResponseService, summarize_responses
from app.services.validation_service import SubmissionValidator


def _store(db, payload, period='default', created_at=None) -> SurveyResponse:
    record = SubmissionValidator().validate(payload).to_record()
    response = SurveyResponse(survey_period=period, **record)
    if created_at is not None:
        response.created_at = created_at
    db.add(response)
    db.commit()
    return response


def _storage_down(*args, **kwargs):
    raise OperationalError('INSERT INTO survey_responses', {}, Exception('database is locked'))


class TestSubmitResponse:
    def test_roundtrip_preserves_order(self, db_session, make_payload):
        payload = make_payload(
            urgentTrainings=['Soft Skills', 'Anti-Social Behavior Policy', 'Code of Conduct'],
            policyChallenges=['Limited time to read and understand all policies', 'Others (Specify)'],
            policyChallengesOther='Too many documents',
        )
        submission = SubmissionValidator().validate(payload)

        result = ResponseService(db_session).submit_response(submission)
        db_session.expire_all()
        stored = ResponseRepository(db_session).get_by_id(result.id)

        assert not result.fallback
        assert stored.urgent_trainings == payload['urgentTrainings']
        assert stored.policy_challenges == payload['policyChallenges']
        assert stored.awareness == payload['awareness']
        assert list(stored.awareness) == list(payload['awareness'])
        assert stored.survey_period == 'default'
        assert stored.created_at.tzinfo is not None

    def test_storage_failure_falls_back_to_log(self, db_session, valid_payload, monkeypatch, caplog):
        monkeypatch.setattr(ResponseRepository, 'create', _storage_down)
        submission = SubmissionValidator().validate(valid_payload)

        with caplog.at_level(logging.ERROR, logger='app.recovery'):
            result = ResponseService(db_session).submit_response(submission)

        assert result.fallback
        assert result.id.startswith('logged-')
        assert int(result.id.split('-', 1)[1]) > 0
        assert result.warning
        recovery = [r for r in caplog.records if r.name == 'app.recovery']
        assert recovery and 'Technical Team' in recovery[0].getMessage()


class TestProcessSubmission:
    @pytest.fixture
    def limiter(self):
        return RateLimiter('5/minute', storage=MemoryStorage())

    def test_closed_window_rejected_before_rate_limit(self, db_session, valid_payload, limiter):
        now = datetime.now(timezone.utc)
        db_session.add(SurveyConfig(
            survey_period='default', is_active=True,
            start_date=now + timedelta(days=1), end_date=now + timedelta(days=8),
            title='Policy Awareness Survey', expected_responses=100,
        ))
        db_session.commit()
        service = ResponseService(db_session)

        with pytest.raises(SurveyUnavailable):
            service.process_submission(valid_payload, '10.0.0.1', limiter)

        assert limiter.hit('submit:10.0.0.1').remaining == 4

    def test_config_lookup_failure_fails_open(self, db_session, valid_payload, limiter, monkeypatch):
        from app.repositories.survey_config_repository import SurveyConfigRepository
        monkeypatch.setattr(SurveyConfigRepository, 'get_current', _storage_down)

        result = ResponseService(db_session).process_submission(valid_payload, '10.0.0.1', limiter)

        assert not result.fallback

    def test_sixth_submission_rate_limited(self, db_session, valid_payload, limiter):
        service = ResponseService(db_session)
        for _ in range(5):
            service.process_submission(valid_payload, '10.0.0.1', limiter)

        with pytest.raises(RateLimited):
            service.process_submission(valid_payload, '10.0.0.1', limiter)

        assert len(ResponseRepository(db_session).get_all('default')) == 5


class TestListResponses:
    def test_second_page_of_twenty_five(self, db_session, valid_payload):
        base = datetime(2026, 3, 1, tzinfo=timezone.utc)
        for i in range(25):
            _store(db_session, valid_payload, created_at=base + timedelta(minutes=i))

        result = ResponseService(db_session).list_responses(page=2, limit=10)

        assert len(result['data']) == 10
        assert result['pagination'] == {
            'page': 2,
            'limit': 10,
            'total_count': 25,
            'total_pages': 3,
            'has_next_page': True,
            'has_prev_page': True,
        }
        # newest first: page 2 starts at the 11th newest
        assert result['data'][0].created_at == base + timedelta(minutes=14)

    def test_department_filter_and_all(self, db_session, make_payload):
        _store(db_session, make_payload(department='Security Department'))
        _store(db_session, make_payload(department='Technical Team'))
        service = ResponseService(db_session)

        filtered = service.list_responses(department='Security Department')
        everything = service.list_responses(department='all')

        assert [r.department for r in filtered['data']] == ['Security Department']
        assert everything['pagination']['total_count'] == 2

    def test_period_scoping(self, db_session, valid_payload):
        _store(db_session, valid_payload, period='archive-20260101000000')

        assert ResponseService(db_session).list_responses()['pagination']['total_count'] == 0

    def test_limit_clamped(self, db_session):
        result = ResponseService(db_session).list_responses(page=0, limit=500)

        assert result['pagination']['page'] == 1
        assert result['pagination']['limit'] == 100

    def test_storage_failure_returns_empty_page(self, db_session, monkeypatch):
        monkeypatch.setattr(ResponseRepository, 'get_page', _storage_down)

        result = ResponseService(db_session).list_responses(page=3, limit=50)

        assert result['data'] == []
        assert result['pagination']['page'] == 1
        assert result['pagination']['limit'] == 10
        assert result['warning']


class TestGetAndDelete:
    def test_missing_response_not_found(self, db_session):
        with pytest.raises(NotFound):
            ResponseService(db_session).get_response('does-not-exist')

    def test_reset_requires_confirmation(self, db_session, valid_payload):
        _store(db_session, valid_payload)

        with pytest.raises(BadRequest):
            ResponseService(db_session).reset_period_responses('default', False)

    def test_reset_deletes_only_that_period(self, db_session, valid_payload):
        _store(db_session, valid_payload)
        _store(db_session, valid_payload, period='archive-20260101000000')

        deleted = ResponseService(db_session).reset_period_responses('default', True)

        repo = ResponseRepository(db_session)
        assert deleted == 1
        assert len(repo.get_all('default')) == 0
        assert len(repo.get_all('archive-20260101000000')) == 1

    def test_get_all_without_period_spans_every_period(self, db_session, valid_payload):
        base = datetime(2026, 1, 1, tzinfo=timezone.utc)
        old = _store(db_session, valid_payload, period='archive-20260101000000', created_at=base)
        new = _store(db_session, valid_payload, created_at=base + timedelta(days=1))

        responses = ResponseService(db_session).get_all_responses()

        assert [r.id for r in responses] == [new.id, old.id]


class TestSurveyPeriods:
    def test_counts_and_latest_per_period(self, db_session, valid_payload):
        base = datetime(2026, 1, 1, tzinfo=timezone.utc)
        _store(db_session, valid_payload, period='archive-20260101000000', created_at=base)
        _store(db_session, valid_payload, period='archive-20260101000000', created_at=base + timedelta(hours=1))
        _store(db_session, valid_payload, created_at=base + timedelta(days=2))

        result = ResponseService(db_session).list_survey_periods()

        assert result['warning'] is None
        assert result['data'] == [
            {'survey_period': 'default', 'response_count': 1,
             'latest_response_at': base + timedelta(days=2), 'is_current': True},
            {'survey_period': 'archive-20260101000000', 'response_count': 2,
             'latest_response_at': base + timedelta(hours=1), 'is_current': False},
        ]

    def test_storage_failure_returns_empty_list(self, db_session, monkeypatch):
        monkeypatch.setattr(ResponseRepository, 'period_summaries', _storage_down)

        result = ResponseService(db_session).list_survey_periods()

        assert result['data'] == []
        assert result['warning']


def test_summarize_responses(db_session, make_payload):
    first = make_payload(confidenceLevel='Very confident', facedUnsureSituation=True)
    first['awareness'] = {area: 5 for area in first['awareness']}
    second = make_payload(department='Security Department', confidenceLevel='Neutral')
    second['awareness'] = {area: 2 for area in second['awareness']}
    responses = [_store(db_session, first), _store(db_session, second)]

    summary = summarize_responses(responses)

    assert summary['total_responses'] == 2
    assert summary['by_department'] == {'Technical Team': 1, 'Security Department': 1}
    assert summary['by_confidence'] == {'Very confident': 1, 'Neutral': 1}
    assert summary['average_awareness']['safeguarding'] == 3.5
    assert summary['overall_average_awareness'] == 3.5
    assert summary['high_confidence_count'] == 1
    assert summary['faced_unsure_count'] == 1


def test_summarize_no_responses():
    summary = summarize_responses([])

    assert summary['total_responses'] == 0
    assert summary['overall_average_awareness'] == 0
