"""
In-memory stand-in for the shifts API, serving the paginated contract the
leaderboard reads. Useful for local runs and as the far end of tests.
"""

from typing import Any

from fastapi import APIRouter, FastAPI, Query, Request
from pydantic import BaseModel

from shift_leaderboard.database import InMemoryRecordStore
from shift_leaderboard.models import Shift, Worker, Workplace

router = APIRouter()

DEFAULT_PAGE_SIZE = 10
SHIFT_PAGE_MARKER: dict[str, Any] = {"id": 0, "marker": "page-start"}


def _page(
    request: Request,
    records: list[BaseModel],
    cursor: int,
    *,
    marker: dict[str, Any] | None = None,
) -> dict[str, Any]:
    size: int = request.app.state.page_size
    chunk = records[cursor : cursor + size]

    data = [r.model_dump(mode="json", by_alias=True) for r in chunk]
    if marker is not None:
        data.insert(0, dict(marker))

    links: dict[str, str] = {}
    if cursor + size < len(records):
        links["next"] = str(
            request.url.include_query_params(cursor=cursor + size)
        )
    return {"data": data, "links": links}


def _db(request: Request) -> InMemoryRecordStore:
    return request.app.state.database


@router.get("/health")
async def health_check() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/workers")
async def list_workers(request: Request, cursor: int = 0) -> dict:
    return _page(request, _db(request).of_type(Worker), cursor)


@router.get("/workers/claims")
async def list_worker_claims(
    request: Request,
    worker_id: int = Query(alias="workerId"),
    cursor: int = 0,
) -> dict:
    claims = [
        s for s in _db(request).of_type(Shift) if s.worker_id == worker_id
    ]
    return _page(request, claims, cursor)


@router.get("/workplaces")
async def list_workplaces(request: Request, cursor: int = 0) -> dict:
    return _page(request, _db(request).of_type(Workplace), cursor)


@router.get("/shifts")
async def list_shifts(request: Request, cursor: int = 0) -> dict:
    # workerId/jobType/location arrive blank from the leaderboard and are
    # left unfiltered here
    return _page(
        request,
        _db(request).of_type(Shift),
        cursor,
        marker=request.app.state.shift_page_marker,
    )


def create_upstream_app(
    db: InMemoryRecordStore | None = None,
    *,
    page_size: int = DEFAULT_PAGE_SIZE,
    shift_page_marker: dict[str, Any] | None = SHIFT_PAGE_MARKER,
) -> FastAPI:
    app = FastAPI()
    app.state.database = db if db is not None else InMemoryRecordStore()
    app.state.page_size = page_size
    app.state.shift_page_marker = shift_page_marker

    app.include_router(router)
    return app
