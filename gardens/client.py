"""HTTP client for the gardens REST API, mirroring the frontend's fetch wrapper."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests

from gardens.config import load_settings
from gardens.exceptions import ApiError
from gardens.logs import get_logger

logger = get_logger(__name__)

LOCAL_HOSTS = ("localhost", "127.0.0.1")
LOCAL_BASE_URL = "http://localhost:3000"


def resolve_base_url(hostname: str, scheme: str = "https") -> str:
    """Local hosts talk to the dev server; anything else is same-origin."""
    if hostname in LOCAL_HOSTS:
        return LOCAL_BASE_URL
    return f"{scheme}://{hostname}"


class GardenApiClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        hostname: str = "localhost",
        session: Optional[requests.Session] = None,
        timeout: float = 10.0,
        api_prefix: Optional[str] = None,
    ):
        root = (base_url or resolve_base_url(hostname)).rstrip("/")
        prefix = api_prefix if api_prefix is not None else load_settings().api_prefix
        self.api_url = f"{root}/{prefix.strip('/')}"
        self._session = session or requests.Session()
        self._timeout = timeout

    def _handle_response(self, resp: requests.Response) -> Any:
        if not resp.ok:
            text = resp.text or ""
            msg = text or resp.reason or "API error"
            logger.error("API Error: status=%s reason=%s message=%s", resp.status_code, resp.reason, msg)
            raise ApiError(msg, status_code=resp.status_code)
        return resp.json()

    def _request(self, method: str, url: str, **kwargs) -> Any:
        resp = self._session.request(method, url, timeout=self._timeout, **kwargs)
        return self._handle_response(resp)

    def get_gardens(self) -> List[Dict[str, Any]]:
        logger.debug("Fetching from: %s", self.api_url)
        return self._request("GET", self.api_url)

    def create_garden(self, garden: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", self.api_url, json=garden)

    def update_garden(self, garden_id: int, garden: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"{self.api_url}/{garden_id}", json=garden)

    def delete_garden(self, garden_id: int) -> Dict[str, Any]:
        return self._request("DELETE", f"{self.api_url}/{garden_id}")


_default_client: Optional[GardenApiClient] = None


def _client() -> GardenApiClient:
    global _default_client
    if _default_client is None:
        _default_client = GardenApiClient()
    return _default_client


def get_gardens() -> List[Dict[str, Any]]:
    return _client().get_gardens()


def create_garden(garden: Dict[str, Any]) -> Dict[str, Any]:
    return _client().create_garden(garden)


def update_garden(garden_id: int, garden: Dict[str, Any]) -> Dict[str, Any]:
    return _client().update_garden(garden_id, garden)


def delete_garden(garden_id: int) -> Dict[str, Any]:
    return _client().delete_garden(garden_id)
