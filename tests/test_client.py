import pytest
import requests

from bionova.client import NETWORK_ERROR_MESSAGE, ResearchClient
from bionova.errors import BackendError, ConnectivityError
from bionova.schema import AiSearchResult, SearchFilters


class StubResponse:
    def __init__(self, status_code=200, body=None, invalid_json=False):
        self.status_code = status_code
        self._body = body
        self._invalid_json = invalid_json

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._invalid_json:
            raise ValueError("No JSON object could be decoded")
        return self._body


class StubSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []

    def request(self, method, url, timeout=None, **kwargs):
        self.requests.append({"method": method, "url": url, "timeout": timeout, **kwargs})
        if self.error:
            raise self.error
        return self.response


def test_search_posts_query_and_filters(sample_payload):
    session = StubSession(StubResponse(body=sample_payload))
    client = ResearchClient(base_url="http://backend/api/", session=session)
    result = client.search("bone loss", SearchFilters(organisms=["Mice"]))
    assert isinstance(result, AiSearchResult)
    sent = session.requests[0]
    assert sent["method"] == "POST"
    assert sent["url"] == "http://backend/api/search"
    assert sent["json"]["query"] == "bone loss"
    assert sent["json"]["filters"]["organisms"] == ["Mice"]


def test_connection_failure_is_connectivity_error():
    session = StubSession(error=requests.ConnectionError("refused"))
    client = ResearchClient(base_url="http://backend/api", session=session)
    with pytest.raises(ConnectivityError) as excinfo:
        client.metadata()
    assert str(excinfo.value) == NETWORK_ERROR_MESSAGE


@pytest.mark.parametrize("body, expected", [
    ({"detail": "Query is required"}, "Query is required"),
    ({"error": "Failed to process your request.", "details": "quota"}, "quota"),
    ({"unexpected": True}, "Request failed with status 400"),
])
def test_error_status_uses_server_message(body, expected):
    client = ResearchClient(base_url="http://backend/api", session=StubSession(StubResponse(400, body)))
    with pytest.raises(BackendError) as excinfo:
        client.search("")
    assert str(excinfo.value) == expected
    assert excinfo.value.status_code == 400


def test_non_json_body_is_backend_error():
    client = ResearchClient(base_url="http://backend/api", session=StubSession(StubResponse(200, invalid_json=True)))
    with pytest.raises(BackendError):
        client.metadata()


def test_malformed_result_is_backend_error():
    body = {"detailed_report": [{"title": "missing everything"}]}
    client = ResearchClient(base_url="http://backend/api", session=StubSession(StubResponse(200, body)))
    with pytest.raises(BackendError):
        client.search("x")


def test_extend_search_sends_existing_result(sample_payload, sample_result):
    session = StubSession(StubResponse(body=sample_payload))
    client = ResearchClient(base_url="http://backend/api", session=session)
    client.extend_search("more", sample_result)
    sent = session.requests[0]
    assert sent["url"].endswith("/extend-search")
    assert sent["json"]["existingResult"]["summary"]["years_range"] == "2015-2021"


def test_health_hits_server_root():
    session = StubSession(StubResponse(body={"status": "ok"}))
    client = ResearchClient(base_url="http://backend/api", session=session)
    assert client.health() == {"status": "ok"}
    assert session.requests[0]["url"] == "http://backend/health"


def test_health_non_json_body_is_backend_error(caplog):
    client = ResearchClient(base_url="http://backend/api", session=StubSession(StubResponse(200, invalid_json=True)))
    with pytest.raises(BackendError) as excinfo:
        client.health()
    assert "/health" in str(excinfo.value)
    assert "/health" in caplog.text


def test_health_connection_failure_is_connectivity_error(caplog):
    client = ResearchClient(base_url="http://backend/api", session=StubSession(error=requests.Timeout("slow")))
    with pytest.raises(ConnectivityError):
        client.health()
    assert "Error fetching from backend endpoint /health" in caplog.text
