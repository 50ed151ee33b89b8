from __future__ import annotations

import asyncio
import json

from s2_recs.client import RecommendationClient
from s2_recs.models import FetchResult
from s2_recs.settings import settings


def _dump(title: str, result: FetchResult) -> None:
    # A failed call prints null; the error was already logged by the client.
    payload = result.data if result.ok else None
    print(f"{title}:\n", json.dumps(payload, indent=2), "\n")


async def run_demo(
    seed_id: str | None = None,
    negative_id: str | None = None,
    client: RecommendationClient | None = None,
) -> int:
    """Run the three example calls sequentially and print each result."""
    seed_id = seed_id or settings.demo_seed_id
    negative_id = negative_id or settings.demo_negative_id

    recs = client or RecommendationClient()
    try:
        r1 = await recs.fetch_by_single_seed(seed_id, limit=2)
        _dump("Single paper recommendations", r1)

        r2 = await recs.fetch_by_multiple_seeds([seed_id])
        _dump("Multiple positive paperIds recommendations", r2)

        r3 = await recs.fetch_by_multiple_seeds([seed_id], [negative_id])
        _dump("Multiple positive and negative paperIds recommendations", r3)
    finally:
        if client is None:
            await recs.aclose()
    return 0


async def main():
    await run_demo()


if __name__ == "__main__":
    asyncio.run(main())
