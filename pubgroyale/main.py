"""Command-line entry point: fetch a PUBG API resource and print it as JSON."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Any, Sequence

import httpx
from rich.console import Console

from pubgroyale.api.client import ApiError, ValidationError
from pubgroyale.api.models import Region
from pubgroyale.config import load_settings
from pubgroyale.services.pubg_service import PubgService

console = Console()
err_console = Console(stderr=True)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pubgroyale",
        description="Query the PUBG API. Reads PUBG_API_KEY from the environment or .env.",
    )
    parser.add_argument(
        "--region",
        choices=[r.value for r in Region],
        default=None,
        help="Shard to query (default: settings.yaml default_region, else steam)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log requests and cache hits")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("status", help="API status")
    sub.add_parser("seasons", help="List seasons for the shard")
    sub.add_parser("tournaments", help="List tournaments")

    player = sub.add_parser("player", help="Look up a player")
    group = player.add_mutually_exclusive_group(required=True)
    group.add_argument("--id", dest="player_id")
    group.add_argument("--name")

    stats = sub.add_parser("player-stats", help="Season stats of a player")
    stats.add_argument("player_id")
    stats.add_argument("season_id")

    match = sub.add_parser("match", help="Fetch a match")
    match.add_argument("match_id")

    telemetry = sub.add_parser("telemetry-url", help="Print the telemetry file URL of a match")
    telemetry.add_argument("match_id")

    tournament = sub.add_parser("tournament", help="Fetch a tournament")
    tournament.add_argument("tournament_id")
    return parser


async def _run(args: argparse.Namespace, service: PubgService) -> Any:
    if args.command == "status":
        return await service.status()
    if args.command == "seasons":
        return await service.seasons()
    if args.command == "tournaments":
        return await service.tournaments()
    if args.command == "tournament":
        return await service.tournament(id=args.tournament_id)
    if args.command == "player":
        return await service.player(id=args.player_id, name=args.name)
    if args.command == "player-stats":
        return await service.player_stats(player_id=args.player_id, season_id=args.season_id)
    if args.command == "match":
        return await service.match(id=args.match_id)
    document = await service.telemetry(match_id=args.match_id)
    return {"url": service.get_telemetry_url(document)}


async def _main(args: argparse.Namespace) -> int:
    settings = load_settings()
    async with PubgService(settings, default_region=args.region) as service:
        try:
            result = await _run(args, service)
        except ApiError as exc:
            err_console.print(f"[bold red]API error:[/bold red] {exc}")
            return 1
        except httpx.TransportError as exc:
            err_console.print(f"[bold red]Network error:[/bold red] {exc}")
            return 1
    console.print_json(data=result)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(list(argv) if argv is not None else None)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    try:
        return asyncio.run(_main(args))
    except ValidationError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {exc}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
