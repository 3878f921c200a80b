import logging
from collections.abc import Callable, Iterable
from datetime import datetime

import httpx

from shift_leaderboard.client import PageFetcher
from shift_leaderboard.eligibility import is_completed
from shift_leaderboard.models import Role, Shift
from shift_leaderboard.pagination import walk_items, walk_pages

logger = logging.getLogger(__name__)

NowFn = Callable[[], datetime]

WORKER_CLAIMS_PATH = "/workers/claims"
SHIFTS_LOCATOR = "/shifts?workerId=&jobType=&location="


def worker_claims_locator(worker_id: int) -> str:
    return f"{WORKER_CLAIMS_PATH}?workerId={worker_id}"


class CompletionCounter:
    """
    Counts completed shifts per worker or workplace.

    The clock is read once at the start of every counting call so all pages
    of one walk are judged against the same cutoff.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        now_fn: NowFn,
        discard_first_shift_per_page: bool = True,
    ) -> None:
        self._now_fn = now_fn
        self._claims = PageFetcher(client, Shift)
        self._shifts = PageFetcher(
            client,
            Shift,
            discard_first_item=discard_first_shift_per_page,
        )

    async def count(self, entity_id: int, role: Role) -> int:
        now = self._now_fn()
        if role is Role.WORKERS:
            fetch, locator = self._claims, worker_claims_locator(entity_id)
        else:
            fetch, locator = self._shifts, SHIFTS_LOCATOR

        total = 0
        async for page in walk_pages(fetch, locator):
            total += sum(
                1
                for shift in page.data
                if is_completed(shift, now, role, entity_id)
            )

        logger.debug(
            "%s %s: %d completed shifts", role.label, entity_id, total
        )
        return total

    async def count_workplaces(
        self, workplace_ids: Iterable[int]
    ) -> dict[int, int]:
        """
        Count every workplace in one walk of the shift listing.
        """
        now = self._now_fn()
        counts = dict.fromkeys(workplace_ids, 0)

        async for shift in walk_items(self._shifts, SHIFTS_LOCATOR):
            if shift.workplace_id in counts and is_completed(
                shift, now, Role.WORKPLACES, shift.workplace_id
            ):
                counts[shift.workplace_id] += 1

        logger.debug("counted %d workplaces in one pass", len(counts))
        return counts
