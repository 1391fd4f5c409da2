"""Tests for /api/scorer/<tenant_id> and /api/tenants/<tenant_id>/remove-pros-cons-score."""
import pytest
from unittest.mock import patch

import httpx
import openai

from leasematch.config import ScoringSettings
from leasematch.models.tenant import TenantProfile
from leasematch.scoring.pipeline import build_pipeline
from leasematch.services.openai_client import ScoringClient
from leasematch.services.store import RecordStore


GOOD_ANSWER = "Score: 87\nPros:\n- Stable income\n- Quiet\n- Long stay\nCons:\n- Cat\n- Far from work\n- Young company"


@pytest.fixture
def use_pipeline(mock_openai):
    """Route build_pipeline() to a real pipeline over the test DB and a mocked OpenAI client."""
    def _use(api_key='sk-test'):
        settings = ScoringSettings(api_key=api_key)
        pipeline = build_pipeline(
            settings=settings,
            store=RecordStore(),
            scoring_client=ScoringClient(settings, client=mock_openai),
        )
        return patch('leasematch.routes.scorer.build_pipeline', return_value=pipeline)
    return _use


def _stored(db_session, tenant_id):
    db_session.expire_all()
    tenant = db_session.get(TenantProfile, tenant_id)
    return tenant.score, tenant.pros, tenant.cons


class TestScorer:

    def test_success(self, client, use_pipeline, mock_openai, make_tenant, make_owner, db_session):
        tenant_id = make_tenant()
        make_owner()
        mock_openai.reply(GOOD_ANSWER)

        with use_pipeline():
            resp = client.post(f'/api/scorer/{tenant_id}')

        assert resp.status_code == 200
        data = resp.get_json()
        assert data['success'] is True
        assert data['score'] == 87
        assert data['pros'] == "- Stable income\n- Quiet\n- Long stay"
        assert data['cons'] == "- Cat\n- Far from work\n- Young company"
        assert _stored(db_session, tenant_id)[0] == 87

    def test_unknown_tenant_404(self, client, use_pipeline, make_owner):
        make_owner()
        with use_pipeline():
            resp = client.post('/api/scorer/missing-tenant')
        assert resp.status_code == 404
        assert resp.get_json()['kind'] == 'missing_input'

    def test_no_owner_preferences_404(self, client, use_pipeline, make_tenant):
        tenant_id = make_tenant()
        with use_pipeline():
            resp = client.post(f'/api/scorer/{tenant_id}')
        assert resp.status_code == 404

    def test_missing_api_key_500(self, client, use_pipeline, mock_openai, make_tenant, make_owner):
        tenant_id = make_tenant()
        make_owner()
        with use_pipeline(api_key=None):
            resp = client.post(f'/api/scorer/{tenant_id}')
        assert resp.status_code == 500
        assert resp.get_json() == {'error': 'Missing OpenAI API key', 'kind': 'upstream_misconfigured'}
        mock_openai.chat.completions.create.assert_not_called()

    def test_openai_error_502_with_detail(self, client, use_pipeline, mock_openai, make_tenant, make_owner):
        tenant_id = make_tenant()
        make_owner()
        request = httpx.Request('POST', 'https://api.openai.com/v1/chat/completions')
        body = '{"error": {"message": "Incorrect API key provided"}}'
        mock_openai.chat.completions.create.side_effect = openai.APIStatusError(
            "Error code: 401", response=httpx.Response(401, text=body, request=request), body=None,
        )

        with use_pipeline():
            resp = client.post(f'/api/scorer/{tenant_id}')

        assert resp.status_code == 502
        data = resp.get_json()
        assert data['kind'] == 'upstream_unavailable'
        assert data['detail'] == body

    def test_unparseable_answer_502_nothing_written(self, client, use_pipeline, mock_openai,
                                                    make_tenant, make_owner, db_session):
        tenant_id = make_tenant()
        make_owner()
        mock_openai.reply("I'm sorry, I can't help with that.")

        with use_pipeline():
            resp = client.post(f'/api/scorer/{tenant_id}')

        assert resp.status_code == 502
        data = resp.get_json()
        assert data['kind'] == 'invalid_model_output'
        assert data['detail'] == "I'm sorry, I can't help with that."
        assert _stored(db_session, tenant_id) == (None, None, None)

    def test_cors_headers_on_post(self, client, use_pipeline, make_owner):
        make_owner()
        with use_pipeline():
            resp = client.post('/api/scorer/anything')
        assert resp.headers['Access-Control-Allow-Origin'] == '*'
        assert 'POST' in resp.headers['Access-Control-Allow-Methods']
        assert 'Content-Type' in resp.headers['Access-Control-Allow-Headers']

    def test_options_preflight(self, client):
        with patch('leasematch.routes.scorer.build_pipeline') as mock_build:
            resp = client.options('/api/scorer/t-1')
        assert resp.status_code == 204
        assert resp.headers['Access-Control-Allow-Origin'] == '*'
        assert 'OPTIONS' in resp.headers['Access-Control-Allow-Methods']
        mock_build.assert_not_called()

    def test_get_not_allowed(self, client):
        assert client.get('/api/scorer/t-1').status_code == 405


class TestRemoveScoring:

    def test_clears_score_pros_cons(self, client, make_tenant, db_session):
        tenant_id = make_tenant(score=64, pros='- p', cons='- c')

        resp = client.post(f'/api/tenants/{tenant_id}/remove-pros-cons-score')

        assert resp.status_code == 200
        assert resp.get_json() == {'success': True}
        assert _stored(db_session, tenant_id) == (None, None, None)

    def test_cors_headers(self, client, make_tenant):
        tenant_id = make_tenant()
        resp = client.post(f'/api/tenants/{tenant_id}/remove-pros-cons-score')
        assert resp.headers['Access-Control-Allow-Origin'] == '*'

    def test_unknown_tenant_is_store_error(self, client):
        resp = client.post('/api/tenants/missing/remove-pros-cons-score')
        assert resp.status_code == 500
        assert resp.get_json()['kind'] == 'store_error'
