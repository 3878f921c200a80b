import asyncio
import json
import logging
import sys

from pydantic import ValidationError

from shift_leaderboard.client import open_upstream_client
from shift_leaderboard.config import Settings, get_settings
from shift_leaderboard.errors import LeaderboardError
from shift_leaderboard.models import RankedResult, Role
from shift_leaderboard.ranking import get_top_entities

USAGE = "Usage: python -m shift_leaderboard.cli {workers|workplaces}"


async def _rank(role: Role, settings: Settings) -> list[RankedResult]:
    async with open_upstream_client(settings) as client:
        return await get_top_entities(client, role, settings=settings)


def run(role: Role) -> int:
    try:
        settings = get_settings()
    except ValidationError as exc:
        print(f"Error: invalid settings: {exc}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=settings.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        ranked = asyncio.run(_rank(role, settings))
    except LeaderboardError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(
        json.dumps(
            [result.model_dump() for result in ranked], separators=(",", ":")
        )
    )
    return 0


def top_workers() -> None:
    sys.exit(run(Role.WORKERS))


def top_workplaces() -> None:
    sys.exit(run(Role.WORKPLACES))


def main() -> None:
    command = sys.argv[1] if len(sys.argv) > 1 else None

    try:
        role = Role(command)
    except ValueError:
        print(USAGE, file=sys.stderr)
        sys.exit(2)

    sys.exit(run(role))


if __name__ == "__main__":
    main()
