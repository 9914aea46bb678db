import httpx
import pytest


class Recorder:
    """httpx.MockTransport handler that records requests and replays canned responses."""

    def __init__(self, status_code=200, json_data=None, text=None, exc=None):
        self.status_code = status_code
        self.json_data = json_data
        self.text = text
        self.exc = exc
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc("boom", request=request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.json_data)

    @property
    def calls(self):
        return len(self.requests)

    def install(self, api_client):
        api_client._client = httpx.Client(transport=httpx.MockTransport(self))
        return api_client


@pytest.fixture
def recorder():
    def make(**kwargs):
        return Recorder(**kwargs)
    return make


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ('RADAR_API_KEY', 'OWM_API_KEY', 'OWM_LANG', 'WUI_HTTP_TIMEOUT', 'WUI_HTTP_MAX_ATTEMPTS'):
        monkeypatch.delenv(name, raising=False)
