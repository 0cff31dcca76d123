"""Command-line interface for searching the directory and serving the API."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import List, Optional

from talentscope.config import Settings
from talentscope.models import Experience, PlayerRecord
from talentscope.persistence import MemoryKeyValueStore
from talentscope.results import ServiceResult
from talentscope.search import SearchFilters
from talentscope.services import TalentScopeServices


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="TalentScope scouting services")
    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Search the player directory")
    search.add_argument("query", nargs="?", default="", help="Free-text query (name, role, summary, strengths)")
    search.add_argument("--game", default=None, help="Case-insensitive game filter")
    search.add_argument("--region", default=None, help="Case-insensitive region filter")
    search.add_argument(
        "--experience",
        choices=[level.value for level in Experience],
        default=None,
        help="Exact experience level",
    )
    availability = search.add_mutually_exclusive_group()
    availability.add_argument("--available", dest="availability", action="store_const", const=True)
    availability.add_argument("--unavailable", dest="availability", action="store_const", const=False)
    search.set_defaults(availability=None)
    search.add_argument(
        "--retries",
        type=int,
        default=2,
        help="Retries when the search backend is temporarily unavailable",
    )

    serve = subparsers.add_parser("serve", help="Run the REST API with uvicorn")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    return parser.parse_args(argv)


async def _search_with_retries(
    services: TalentScopeServices,
    query: str,
    filters: SearchFilters,
    retries: int,
) -> ServiceResult[List[PlayerRecord]]:
    result = await services.search.search(query, filters)
    attempts = 0
    while not result.success and result.error is not None and result.error.retryable and attempts < retries:
        attempts += 1
        result = await services.search.search(query, filters)
    return result


def _run_search(args: argparse.Namespace) -> int:
    services = TalentScopeServices.build(Settings.from_env(), store=MemoryKeyValueStore())
    filters = SearchFilters(
        game=args.game,
        region=args.region,
        experience=args.experience,
        availability=args.availability,
    )
    result = asyncio.run(_search_with_retries(services, args.query, filters, max(0, args.retries)))
    if not result.success:
        assert result.error is not None
        print(f"Search failed: {result.error.message}", file=sys.stderr)
        return 1
    players = result.value or []
    print(json.dumps([player.model_dump(mode="json") for player in players], indent=2))
    return 0


def _run_server(args: argparse.Namespace) -> int:
    import uvicorn

    from talentscope.api import create_app

    uvicorn.run(create_app(Settings.from_env()), host=args.host, port=args.port)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    if args.command == "search":
        return _run_search(args)
    return _run_server(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
