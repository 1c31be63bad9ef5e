"""
JSON-over-HTTP transport for the match API.

Every failure (network, status, content type, body) surfaces as an
APIClientError subclass so callers only handle one exception family.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

import requests
from requests import Response
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .exceptions import APIClientError, APINotFoundError, APIRateLimitError


class HTTPClient:
    """
    GET JSON documents relative to the match API root.

    Retries are off unless ``max_retries`` is raised; timeouts are per request.
    """

    def __init__(
        self,
        base_url: str,
        *,
        auth_token: Optional[str] = None,
        timeout: int = 30,
        max_retries: int = 0,
        backoff_factor: float = 0.5,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        retry = Retry(
            total=max_retries,
            read=max_retries,
            connect=max_retries,
            backoff_factor=backoff_factor,
            status_forcelist=(429, 500, 502, 503, 504),
            allowed_methods=("GET",),
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry)
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)
        self.session.headers.update({"Accept": "application/json"})
        if auth_token:
            self.session.headers.update({"Authorization": f"Bearer {auth_token}"})

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Send ``method`` to ``path`` under the API root and return the decoded body.

        An empty body yields None.
        """
        url = f"{self.base_url}/{path.lstrip('/')}"
        try:
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise APIClientError(str(exc)) from exc

        self._raise_for_status(response)
        if not response.content:
            return None
        content_type = response.headers.get("Content-Type", "").lower()
        if "application/json" not in content_type:
            raise APIClientError(
                f"Unexpected content type '{content_type or 'unknown'}' from API response."
            )
        try:
            return response.json()
        except ValueError as exc:
            raise APIClientError("Failed to parse JSON response from API.") from exc

    def get(self, path: str, *, params: Optional[Dict[str, Any]] = None) -> Any:
        return self.request("GET", path, params=params)

    def close(self) -> None:
        self.session.close()

    def _raise_for_status(self, response: Response) -> None:
        """
        Raise APINotFoundError for 404, APIRateLimitError for 429, APIClientError otherwise.
        """
        if 200 <= response.status_code < 300:
            return
        status = response.status_code
        message = f"API request failed with status {status}"
        if status == 404:
            raise APINotFoundError(message, status_code=status)
        if status == 429:
            raise APIRateLimitError(message, status_code=status)
        raise APIClientError(message, status_code=status)
