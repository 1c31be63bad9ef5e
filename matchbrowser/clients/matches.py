"""
Client for the match list REST API.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ..cache import DataCache
from ..config import APISettings
from ..exceptions import ResponseFormatError
from ..http import HTTPClient
from ..models import QueryResult, Season, Team, Tournament

LOGGER = logging.getLogger(__name__)


class MatchesClient:
    """
    Provide typed wrappers around the seasons, tournaments, teams and match list endpoints.
    """

    def __init__(
        self,
        settings: Optional[APISettings] = None,
        *,
        cache: Optional[DataCache] = None,
    ):
        self.settings = settings or APISettings.from_env()
        self.http = HTTPClient(
            self.settings.base_url,
            auth_token=self.settings.api_token,
            timeout=self.settings.timeout,
            max_retries=self.settings.max_retries,
        )
        self.cache = cache or DataCache(
            self.settings.cache_dir, default_ttl=self.settings.reference_ttl
        )

    def __enter__(self) -> "MatchesClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self.http.close()

    def _fetch_list(self, path: str, *, use_cache: bool) -> List[Dict[str, Any]]:
        key = path.strip("/")
        if use_cache:
            cached = self.cache.get(key)
            if isinstance(cached, list):
                return cached
        payload = self.http.get(path)
        if not isinstance(payload, list):
            raise ResponseFormatError(f"Expected a JSON array from '{path}'")
        if use_cache:
            try:
                self.cache.set(key, payload)
            except OSError as exc:
                LOGGER.warning("Could not cache %s payload: %s", key, exc)
        return payload

    def list_seasons(self, *, use_cache: bool = True) -> List[Season]:
        """
        Fetch every season known to the server.
        """
        return [Season.from_dict(item) for item in self._fetch_list("/seasons", use_cache=use_cache)]

    def list_tournaments(self, *, use_cache: bool = True) -> List[Tournament]:
        """
        Fetch every tournament known to the server.
        """
        return [
            Tournament.from_dict(item)
            for item in self._fetch_list("/tournaments", use_cache=use_cache)
        ]

    def list_teams(self, *, use_cache: bool = True) -> List[Team]:
        """
        Fetch every team known to the server.
        """
        return [Team.from_dict(item) for item in self._fetch_list("/teams", use_cache=use_cache)]

    def get_matches(self, path: str, params: Dict[str, Any]) -> QueryResult:
        """
        Fetch one page of matches; pages are never cached.
        """
        LOGGER.debug("GET %s params=%s", path, params)
        return QueryResult.from_dict(self.http.get(path, params=params))
