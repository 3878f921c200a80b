from datetime import datetime

from shift_leaderboard.models import Role, Shift


def is_completed(
    shift: Shift,
    now: datetime,
    role: Role,
    target_id: int | None = None,
) -> bool:
    """
    Whether `shift` counts as completed as of `now`.

    Worker claim listings are already scoped to one worker, so only the
    cancellation and end time are checked. The workplace listing is not
    scoped at all: the shift must belong to `target_id` and have a worker.
    """
    if shift.cancelled or shift.end_at >= now:
        return False
    if role is Role.WORKPLACES:
        return shift.workplace_id == target_id and shift.claimed
    return True
