from __future__ import annotations

import logging
from typing import Any, Callable

import httpx
from pydantic import ValidationError

from s2_recs.errors import (
    DeserializationError,
    HttpStatusError,
    InvalidQueryError,
    NetworkError,
    RecommendationError,
)
from s2_recs.http import HttpClientFactory
from s2_recs.models import (
    DEFAULT_FIELDS,
    DEFAULT_LIMIT,
    FetchResult,
    MultiSeedQuery,
    RecommendationFailure,
    RecommendationQuery,
    RecommendationSuccess,
    Scope,
    SingleSeedQuery,
)
from s2_recs.settings import settings

logger = logging.getLogger(__name__)


class RecommendationClient:
    """Semantic Scholar Recommendations API client.

    Docs: https://api.semanticscholar.org/api-docs/recommendations

    Every fetch is a single round trip. Failures never propagate: they are
    logged and returned as ``RecommendationFailure`` so callers branch on
    ``result.ok`` instead of catching.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.base_url
        self._owns_client = client is None
        self._client = client or HttpClientFactory.client(
            base_url=self.base_url, transport=transport
        )

    async def aclose(self):
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> RecommendationClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    def build_single_seed_request(self, query: SingleSeedQuery) -> httpx.Request:
        return self._client.build_request(
            "GET", f"/papers/forpaper/{query.paper_id}", params=query.params()
        )

    def build_multi_seed_request(self, query: MultiSeedQuery) -> httpx.Request:
        return self._client.build_request(
            "POST",
            "/papers",
            params=query.params(),
            json=query.body(),
            headers={"Content-Type": "application/json"},
        )

    async def fetch_by_single_seed(
        self,
        paper_id: str,
        limit: int = DEFAULT_LIMIT,
        fields: str = DEFAULT_FIELDS,
        scope: Scope = "all-cs",
    ) -> FetchResult:
        def prepare() -> httpx.Request:
            query = SingleSeedQuery(paper_id=paper_id, limit=limit, fields=fields, scope=scope)
            return self.build_single_seed_request(query)

        return await self._fetch(prepare, "Error fetching recommendations from single id")

    async def fetch_by_multiple_seeds(
        self,
        positive_ids: list[str],
        negative_ids: list[str] | None = None,
        limit: int = DEFAULT_LIMIT,
        fields: str = DEFAULT_FIELDS,
    ) -> FetchResult:
        def prepare() -> httpx.Request:
            query = MultiSeedQuery(
                positive_ids=positive_ids,
                negative_ids=negative_ids or [],
                limit=limit,
                fields=fields,
            )
            return self.build_multi_seed_request(query)

        return await self._fetch(prepare, "Error fetching recommendations from multiple ids")

    async def fetch(self, query: RecommendationQuery) -> FetchResult:
        if isinstance(query, SingleSeedQuery):
            return await self.fetch_by_single_seed(
                query.paper_id, limit=query.limit, fields=query.fields, scope=query.scope
            )
        if isinstance(query, MultiSeedQuery):
            return await self.fetch_by_multiple_seeds(
                query.positive_ids,
                query.negative_ids,
                limit=query.limit,
                fields=query.fields,
            )
        raise TypeError(f"Unsupported query type: {type(query).__name__}")

    async def _fetch(
        self, prepare: Callable[[], httpx.Request], error_prefix: str
    ) -> FetchResult:
        try:
            request = self._prepare(prepare)
            data = await self._send(request)
        except RecommendationError as err:
            logger.error("%s: %s", error_prefix, err)
            return RecommendationFailure(error=err)
        return RecommendationSuccess(data=data)

    def _prepare(self, prepare: Callable[[], httpx.Request]) -> httpx.Request:
        try:
            return prepare()
        except (ValidationError, httpx.InvalidURL) as e:
            raise InvalidQueryError(str(e)) from e

    async def _send(self, request: httpx.Request) -> Any:
        logger.debug("%s %s", request.method, request.url)
        try:
            r = await self._client.send(request)
        except httpx.DecodingError as e:
            raise DeserializationError(f"Could not decode response body: {e}") from e
        except httpx.RequestError as e:
            # TransportError (DNS, refused, TLS, timeout) and TooManyRedirects
            raise NetworkError(str(e) or type(e).__name__) from e

        if not r.is_success:
            raise HttpStatusError(r.status_code, r.reason_phrase)

        try:
            return r.json()
        except ValueError as e:
            raise DeserializationError(f"Invalid JSON in response body: {e}") from e
