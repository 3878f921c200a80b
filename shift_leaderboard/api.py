from datetime import UTC, datetime

import httpx
from fastapi import APIRouter, FastAPI, HTTPException, Request

from shift_leaderboard.client import open_upstream_client
from shift_leaderboard.config import Settings, get_settings
from shift_leaderboard.errors import TopEntitiesError
from shift_leaderboard.models import RankedResult, Role
from shift_leaderboard.ranking import get_top_entities

router = APIRouter()


@router.get("/health")
async def health_check() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/top/{role}")
async def top_entities(role: Role, request: Request) -> list[RankedResult]:
    settings: Settings = request.app.state.settings

    async with open_upstream_client(
        settings, transport=request.app.state.upstream_transport
    ) as client:
        try:
            return await get_top_entities(
                client,
                role,
                settings=settings,
                now_fn=request.app.state.now_fn,
            )
        except TopEntitiesError as exc:
            raise HTTPException(status_code=502, detail=str(exc)) from exc


def create_app(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    app = FastAPI()
    app.state.settings = settings or get_settings()
    app.state.upstream_transport = transport
    app.state.now_fn = lambda: datetime.now(UTC)

    app.include_router(router)
    return app
