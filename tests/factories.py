from datetime import UTC, datetime, timedelta
from itertools import count

from shift_leaderboard.models import Shift, Worker, Workplace

UPSTREAM_URL = "http://upstream"

NOW = datetime(2025, 7, 2, 12, 0, 0, tzinfo=UTC)
PAST = NOW - timedelta(days=1)
FUTURE = NOW + timedelta(days=1)

_shift_ids = count(1)


def make_shift(
    *,
    workplace_id: int,
    worker_id: int | None,
    end_at: datetime = PAST,
    cancelled_at: datetime | None = None,
) -> Shift:
    return Shift(
        id=next(_shift_ids),
        end_at=end_at,
        workplace_id=workplace_id,
        worker_id=worker_id,
        cancelled_at=cancelled_at,
    )


def completed_shifts(
    n: int, *, workplace_id: int, worker_id: int
) -> list[Shift]:
    return [
        make_shift(workplace_id=workplace_id, worker_id=worker_id)
        for _ in range(n)
    ]


def worker(id: int, name: str, status: int = 0) -> Worker:
    return Worker(id=id, name=name, status=status)


def workplace(id: int, name: str, status: int = 0) -> Workplace:
    return Workplace(id=id, name=name, status=status, location="Oakland")
