import logging
from collections.abc import Awaitable, Callable
from typing import Any, Generic, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from shift_leaderboard.config import Settings
from shift_leaderboard.errors import TransportError, UnexpectedResponseShape
from shift_leaderboard.models import Page

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT", bound=BaseModel)

FetchPage = Callable[[str], Awaitable[Page[Any]]]


def open_upstream_client(
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=settings.api_base_url,
        timeout=settings.request_timeout,
        transport=transport,
    )


class PageFetcher(Generic[ItemT]):
    """
    Fetches one page of a paginated resource and parses it into a `Page`.

    Locators may be absolute URLs (as returned in `links.next`) or paths
    relative to the client's base URL.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        item_model: type[ItemT],
        *,
        discard_first_item: bool = False,
    ) -> None:
        self._client = client
        self._page_model = Page[item_model]
        self._discard_first_item = discard_first_item

    async def __call__(self, locator: str) -> Page[ItemT]:
        try:
            response = await self._client.get(locator)
        except httpx.InvalidURL as exc:
            raise UnexpectedResponseShape(
                locator, "invalid page link"
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(locator) from exc

        if not response.is_success:
            raise TransportError(locator, response.status_code)

        try:
            body = response.json()
        except ValueError as exc:
            raise UnexpectedResponseShape(locator, "body is not JSON") from exc

        if self._discard_first_item:
            body = _drop_first_item(body)

        try:
            page = self._page_model.model_validate(body)
        except ValidationError as exc:
            raise UnexpectedResponseShape(locator, str(exc)) from exc

        logger.debug(
            "fetched %s: %d items, next=%s",
            locator,
            len(page.data),
            page.next_cursor,
        )
        return page


def _drop_first_item(body: Any) -> Any:
    # dropped before validation, the leading row does not have a shift's shape
    if isinstance(body, dict) and isinstance(body.get("data"), list):
        return {**body, "data": body["data"][1:]}
    return body
