"""HTTP client for the search proxy, used by scripts and the demo"""

import logging
from typing import Any, Dict, List, Optional

import requests

from .config import get_settings
from .errors import BackendError, ConnectivityError
from .schema import AiSearchResult, SearchFilters

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = (
    "Network Error: Could not connect to the backend service. "
    "Please ensure the backend server is running and accessible."
)


class ResearchClient:
    """Talks to the /api endpoints of a running Bionova service"""

    def __init__(self, base_url: Optional[str] = None, timeout: float = 60, session: Optional[requests.Session] = None):
        self.base_url = (base_url or get_settings().api_base_url).rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(self, method: str, endpoint: str, **kwargs) -> Any:
        endpoint = endpoint.lstrip("/")
        return self._send(method, f"{self.base_url}/{endpoint}", f"/{endpoint}", **kwargs)

    def _send(self, method: str, url: str, label: str, **kwargs) -> Any:
        """Issue a request to an absolute ``url``; ``label`` names it in logs and errors"""
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except (requests.ConnectionError, requests.Timeout) as e:
            logger.error("Error fetching from backend endpoint %s: %s", label, e)
            raise ConnectivityError(NETWORK_ERROR_MESSAGE) from e

        if not response.ok:
            message = self._error_message(response)
            logger.error("Backend endpoint %s failed (%s): %s", label, response.status_code, message)
            raise BackendError(message, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            logger.error("Backend endpoint %s returned a non-JSON body", label)
            raise BackendError(
                f"Backend returned a non-JSON body from {label}", status_code=response.status_code
            ) from e

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            for key in ("details", "detail", "error"):
                if body.get(key):
                    return str(body[key])
        return f"Request failed with status {response.status_code}"

    def _post(self, endpoint: str, body: Dict[str, Any]) -> Any:
        return self._request("POST", endpoint, json=body)

    @staticmethod
    def _as_result(payload: Any) -> AiSearchResult:
        try:
            return AiSearchResult.model_validate(payload)
        except ValueError as e:
            raise BackendError(f"Backend returned a malformed search result: {e}") from e

    def search(self, query: str, filters: Optional[SearchFilters] = None) -> AiSearchResult:
        body = {"query": query, "filters": filters.model_dump() if filters else None}
        return self._as_result(self._post("search", body))

    def extend_search(self, query: str, existing: AiSearchResult, filters: Optional[SearchFilters] = None) -> AiSearchResult:
        body = {
            "query": query,
            "existingResult": existing.model_dump(mode="json"),
            "filters": filters.model_dump() if filters else None,
        }
        return self._as_result(self._post("extend-search", body))

    def analytics(self, result: AiSearchResult) -> Dict[str, Any]:
        return self._post("analytics", result.model_dump(mode="json"))

    def metadata(self) -> Dict[str, List[str]]:
        return self._request("GET", "metadata")

    def health(self) -> Dict[str, Any]:
        # /health lives at the server root, not under /api
        root = self.base_url[:-len("/api")] if self.base_url.endswith("/api") else self.base_url
        return self._send("GET", f"{root}/health", "/health")
