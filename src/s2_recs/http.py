from __future__ import annotations

import httpx

from s2_recs.settings import settings


def default_timeout() -> httpx.Timeout:
    return httpx.Timeout(
        connect=settings.connect_timeout,
        read=settings.read_timeout,
        write=settings.write_timeout,
        pool=settings.pool_timeout,
    )


def default_limits() -> httpx.Limits:
    return httpx.Limits(max_connections=20, max_keepalive_connections=5)


class HttpClientFactory:
    """Creates httpx clients with sane defaults.

    Keep one client per RecommendationClient; do not create per-request.
    """

    @staticmethod
    def client(
        base_url: str | None = None,
        headers: dict | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=base_url or "",
            headers=headers,
            timeout=default_timeout(),
            limits=default_limits(),
            transport=transport,
            follow_redirects=True,
        )
