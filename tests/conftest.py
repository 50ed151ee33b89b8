"""Shared fixtures for s2-recs tests. All HTTP goes through httpx.MockTransport."""

import json
from typing import Callable, List

import httpx
import pytest

from s2_recs.client import RecommendationClient

BASE_URL = "https://api.semanticscholar.org/recommendations/v1"


@pytest.fixture
def sample_payload() -> dict:
    """Response shape returned by the recommendations service."""
    return {
        "recommendedPapers": [
            {"paperId": "aaa111", "title": "Attention Is All You Need", "url": "https://example.org/aaa111"},
            {"paperId": "bbb222", "title": "BERT", "url": "https://example.org/bbb222"},
        ]
    }


@pytest.fixture
def captured() -> List[httpx.Request]:
    return []


@pytest.fixture
def make_client(captured) -> Callable[..., RecommendationClient]:
    """Build a RecommendationClient whose transport records requests and replies with a canned response."""

    def _make(status_code: int = 200, body=None, content: bytes | None = None, exc: Exception | None = None):
        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            if exc is not None:
                raise exc
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, content=json.dumps(body).encode())

        return RecommendationClient(base_url=BASE_URL, transport=httpx.MockTransport(handler))

    return _make
