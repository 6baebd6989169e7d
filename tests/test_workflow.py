import pytest
import requests

from services import workflow
from services.workflow import WorkflowClient, WorkflowError, FALLBACK_CHAT_RESPONSE


class FakeResponse:
    def __init__(self, status_code=200, payload=None, reason='OK'):
        self.status_code = status_code
        self.reason = reason
        self._payload = payload

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


@pytest.fixture
def posted(monkeypatch):
    calls = []

    def install(response):
        def fake_post(url, json=None, timeout=None):
            calls.append({'url': url, 'json': json, 'timeout': timeout})
            if isinstance(response, Exception):
                raise response
            return response
        monkeypatch.setattr(workflow.requests, 'post', fake_post)
        return calls

    return install


def test_chat_message_payload_and_reply(posted):
    calls = posted(FakeResponse(payload={'aiResponse': 'Try a frittata.'}))
    client = WorkflowClient('http://n8n.test/webhook', timeout=7)

    assert client.process_chat_message('What can I cook?', {'pantry': ['eggs']}) == 'Try a frittata.'

    call = calls[0]
    assert call['url'] == 'http://n8n.test/webhook'
    assert call['timeout'] == 7
    assert call['json']['type'] == 'chat_message'
    assert call['json']['message'] == 'What can I cook?'
    assert call['json']['context'] == {'pantry': ['eggs']}
    assert 'timestamp' in call['json']


def test_chat_message_without_reply_uses_fallback(posted):
    posted(FakeResponse(payload={}))
    assert WorkflowClient('http://n8n.test').process_chat_message('hi') == FALLBACK_CHAT_RESPONSE


def test_parse_recipe_returns_default_structure(posted):
    calls = posted(FakeResponse(payload={'parsedRecipe': None}))
    recipe = WorkflowClient('http://n8n.test').parse_recipe('2 eggs, fry them', {'measurement_system': 'metric'})
    assert recipe['ingredients'] == []
    assert calls[0]['json']['type'] == 'recipe_parsing'
    assert calls[0]['json']['userPreferences'] == {'measurement_system': 'metric'}


def test_http_error_raises(posted):
    posted(FakeResponse(status_code=500, reason='Internal Server Error'))
    with pytest.raises(WorkflowError):
        WorkflowClient('http://n8n.test').process_chat_message('hi')


def test_transport_error_raises(posted):
    posted(requests.ConnectionError('refused'))
    with pytest.raises(WorkflowError):
        WorkflowClient('http://n8n.test').process_chat_message('hi')


def test_invalid_json_raises(posted):
    posted(FakeResponse(payload=ValueError('not json')))
    with pytest.raises(WorkflowError):
        WorkflowClient('http://n8n.test').parse_recipe('text')


def test_missing_url_raises():
    with pytest.raises(WorkflowError):
        WorkflowClient('').process_chat_message('hi')
