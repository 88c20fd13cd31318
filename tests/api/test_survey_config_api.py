"""
API tests for /api/survey-config
"""
from datetime import datetime, timedelta, timezone

from app.models.response import SurveyResponse
from app.services.validation_service import SubmissionValidator


def _window(**overrides) -> dict:
    now = datetime.now(timezone.utc)
    body = {
        'isActive': True,
        'startDate': now.isoformat(),
        'endDate': (now + timedelta(days=10)).isoformat(),
    }
    body.update(overrides)
    return body


class TestReadConfig:
    def test_public_read_creates_default(self, client):
        response = client.get('/api/survey-config')

        assert response.status_code == 200
        config = response.json()['config']
        assert config['isActive'] is True
        assert config['title'] == 'Policy Awareness Survey'
        assert config['expectedResponses'] == 100
        assert config['surveyPeriod'] == 'default'


class TestUpdateConfig:
    def test_requires_auth(self, client):
        response = client.put('/api/survey-config', json=_window())

        assert response.status_code == 401

    def test_put_and_post_both_update(self, client, auth_headers):
        put = client.put('/api/survey-config', json=_window(title='Spring round'), headers=auth_headers)
        post = client.post('/api/survey-config', json=_window(isActive=False), headers=auth_headers)

        assert put.status_code == 200
        assert put.json()['config']['title'] == 'Spring round'
        assert post.status_code == 200
        assert post.json()['config']['isActive'] is False
        assert post.json()['config']['id'] == put.json()['config']['id']

    def test_end_before_start_rejected(self, client, auth_headers):
        now = datetime.now(timezone.utc)
        body = _window(startDate=now.isoformat(), endDate=(now - timedelta(days=1)).isoformat())

        response = client.put('/api/survey-config', json=body, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()['details'][0]['path'] == 'endDate'

    def test_missing_dates_rejected(self, client, auth_headers):
        response = client.put('/api/survey-config', json={'isActive': True}, headers=auth_headers)

        assert response.status_code == 400

    def test_deactivated_survey_blocks_submissions(self, client, auth_headers, valid_payload):
        client.put('/api/survey-config', json=_window(isActive=False), headers=auth_headers)

        response = client.post('/api/submit', json=valid_payload)

        assert response.status_code == 403
        assert response.json()['details']['reason'] == 'inactive'


class TestResetSurvey:
    def test_reset_archives_responses(self, client, db_session, auth_headers, valid_payload):
        created = client.post('/api/submit', json=valid_payload).json()
        before = datetime.now(timezone.utc).replace(microsecond=0)

        response = client.delete('/api/survey-config', headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        tag = body['archiveTag']
        assert tag.startswith('archive-')
        assert body['archivedCount'] == 1
        assert datetime.fromisoformat(body['config']['startDate'].replace('Z', '+00:00')) >= before

        archived = client.get(f"/api/responses/{created['id']}", headers=auth_headers).json()['data']
        assert archived['surveyPeriod'] == tag
        current = client.get('/api/responses', headers=auth_headers).json()
        assert current['pagination']['totalCount'] == 0
        by_tag = client.get(f'/api/responses?surveyPeriod={tag}', headers=auth_headers).json()
        assert by_tag['pagination']['totalCount'] == 1

    def test_reset_requires_auth(self, client):
        assert client.delete('/api/survey-config').status_code == 401

    def test_reset_keeps_response_rows(self, client, db_session, auth_headers, valid_payload):
        record = SubmissionValidator().validate(valid_payload).to_record()
        db_session.add(SurveyResponse(survey_period='default', **record))
        db_session.commit()

        client.delete('/api/survey-config', headers=auth_headers)

        assert db_session.query(SurveyResponse).count() == 1
