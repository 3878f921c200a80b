import logging
from collections.abc import Iterable, Sequence
from datetime import UTC, datetime

import httpx

from shift_leaderboard.client import PageFetcher
from shift_leaderboard.config import Settings, get_settings
from shift_leaderboard.counting import CompletionCounter, NowFn
from shift_leaderboard.errors import LeaderboardError, TopEntitiesError
from shift_leaderboard.models import Entity, RankedResult, Role
from shift_leaderboard.pagination import collect

logger = logging.getLogger(__name__)

DEFAULT_TOP_N = 3


async def aggregate(
    entities: Iterable[Entity],
    role: Role,
    counter: CompletionCounter,
    *,
    strategy: str = "per_entity",
) -> list[RankedResult]:
    """
    Pair every active entity's name with its completed shift count.

    Entities keep the order they were fetched in. Inactive entities are
    skipped; entities with no completed shifts stay in with a count of 0.
    """
    active = [entity for entity in entities if entity.is_active]

    if role is Role.WORKPLACES and strategy == "bulk":
        counts = await counter.count_workplaces(
            [entity.id for entity in active]
        )
        return [
            RankedResult(name=entity.name, count=counts[entity.id])
            for entity in active
        ]

    results: list[RankedResult] = []
    for entity in active:
        count = await counter.count(entity.id, role)
        results.append(RankedResult(name=entity.name, count=count))
    return results


def top_n(
    results: Sequence[RankedResult], n: int = DEFAULT_TOP_N
) -> list[RankedResult]:
    # sorted() is stable with reverse=True, so ties keep fetch order
    return sorted(results, key=lambda result: result.count, reverse=True)[:n]


async def get_top_entities(
    client: httpx.AsyncClient,
    role: Role,
    *,
    settings: Settings | None = None,
    now_fn: NowFn | None = None,
) -> list[RankedResult]:
    settings = settings or get_settings()
    counter = CompletionCounter(
        client,
        now_fn=now_fn or (lambda: datetime.now(UTC)),
        discard_first_shift_per_page=settings.discard_first_shift_per_page,
    )

    logger.info("computing top %d %s", settings.top_n, role.value)
    try:
        entities = await collect(
            PageFetcher(client, role.entity_model), role.entity_path
        )
        results = await aggregate(
            entities, role, counter, strategy=settings.workplace_strategy
        )
    except LeaderboardError as exc:
        raise TopEntitiesError(
            f"failed to compute top {role.value}: {exc}"
        ) from exc

    ranked = top_n(results, settings.top_n)
    logger.info(
        "ranked %d of %d active %s", len(ranked), len(results), role.value
    )
    return ranked
