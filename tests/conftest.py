from __future__ import annotations

import json
from typing import Any

import pytest
from requests import Response

from matchbrowser.config import APISettings


def make_response(
    status_code: int,
    payload: Any,
    *,
    url: str = "https://matches.test/api",
    content_type: str = "application/json",
) -> Response:
    response = Response()
    response.status_code = status_code
    if isinstance(payload, (bytes, str)):
        response._content = payload.encode("utf-8") if isinstance(payload, str) else payload
    else:
        response._content = json.dumps(payload).encode("utf-8")
    response.headers["Content-Type"] = content_type
    response.url = url
    return response


@pytest.fixture
def settings(tmp_path) -> APISettings:
    return APISettings(
        base_url="https://matches.test/api",
        api_token="token",
        cache_dir=str(tmp_path / "cache"),
    )
