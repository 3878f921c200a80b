import logging
from collections.abc import AsyncIterator

from shift_leaderboard.client import FetchPage
from shift_leaderboard.models import Page

logger = logging.getLogger(__name__)


async def walk_pages(fetch: FetchPage, locator: str) -> AsyncIterator[Page]:
    """
    Follow `links.next` from `locator` until a page has no next link.

    A failed fetch ends the walk by raising; nothing already yielded is
    retried. A cursor chain that loops back on itself is not detected.
    """
    next_locator: str | None = locator
    pages = 0
    while next_locator:
        page = await fetch(next_locator)
        pages += 1
        yield page
        next_locator = page.next_cursor
    logger.debug("walked %d page(s) starting at %s", pages, locator)


async def walk_items(fetch: FetchPage, locator: str) -> AsyncIterator:
    async for page in walk_pages(fetch, locator):
        for item in page.data:
            yield item


async def collect(fetch: FetchPage, locator: str) -> list:
    return [item async for item in walk_items(fetch, locator)]
