from __future__ import annotations

import argparse
import asyncio
import json

from s2_recs.client import RecommendationClient
from s2_recs.models import DEFAULT_FIELDS, DEFAULT_LIMIT, FetchResult
from s2_recs.settings import settings


def _configure_logging() -> None:
    import logging

    level = (settings.log_level or "INFO").upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _print_result(result: FetchResult) -> int:
    if not result.ok:
        return 1
    print(json.dumps(result.data, indent=2))
    return 0


def cmd_version() -> int:
    from s2_recs import __version__

    print(__version__)
    return 0


def cmd_forpaper(args: argparse.Namespace) -> int:
    _configure_logging()

    async def run() -> FetchResult:
        async with RecommendationClient(base_url=args.base_url) as recs:
            return await recs.fetch_by_single_seed(
                args.paper_id, limit=args.limit, fields=args.fields, scope=args.scope
            )

    return _print_result(asyncio.run(run()))


def cmd_papers(args: argparse.Namespace) -> int:
    _configure_logging()

    async def run() -> FetchResult:
        async with RecommendationClient(base_url=args.base_url) as recs:
            return await recs.fetch_by_multiple_seeds(
                args.positive, args.negative, limit=args.limit, fields=args.fields
            )

    return _print_result(asyncio.run(run()))


def cmd_demo(args: argparse.Namespace) -> int:
    _configure_logging()
    from s2_recs.demo import run_demo

    async def run() -> int:
        async with RecommendationClient(base_url=args.base_url) as recs:
            return await run_demo(seed_id=args.seed, negative_id=args.negative, client=recs)

    return asyncio.run(run())


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="s2-recs")
    p.add_argument("--base-url", default=None, help="Override the recommendations API base URL")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("version").set_defaults(func=lambda _a: cmd_version())

    single = sub.add_parser("forpaper", help="Recommendations for a single seed paper")
    single.add_argument("paper_id")
    single.add_argument("--limit", type=int, default=DEFAULT_LIMIT)
    single.add_argument("--fields", default=DEFAULT_FIELDS)
    single.add_argument("--from", dest="scope", choices=["all-cs", "recent"], default="all-cs")
    single.set_defaults(func=cmd_forpaper)

    multi = sub.add_parser("papers", help="Recommendations from positive/negative seed papers")
    multi.add_argument("--positive", nargs="+", required=True, metavar="PAPER_ID")
    multi.add_argument("--negative", nargs="*", default=[], metavar="PAPER_ID")
    multi.add_argument("--limit", type=int, default=DEFAULT_LIMIT)
    multi.add_argument("--fields", default=DEFAULT_FIELDS)
    multi.set_defaults(func=cmd_papers)

    demo = sub.add_parser("demo", help="Run the three example calls and print the results")
    demo.add_argument("--seed", default=None, help="Positive seed paper id")
    demo.add_argument("--negative", default=None, help="Negative seed paper id")
    demo.set_defaults(func=cmd_demo)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


def app() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    app()
