class LeaderboardError(Exception):
    """Base exception for failures while computing a leaderboard."""


class TransportError(LeaderboardError):
    """Raised when a page fetch does not come back with a success status."""

    def __init__(self, locator: str, status_code: int | None = None) -> None:
        self.locator = locator
        self.status_code = status_code
        if status_code is None:
            message = f"request to {locator} failed"
        else:
            message = f"request to {locator} failed with status {status_code}"
        super().__init__(message)


class UnexpectedResponseShape(LeaderboardError):
    """Raised when a page body is not JSON or is missing expected fields."""

    def __init__(self, locator: str, reason: str) -> None:
        self.locator = locator
        super().__init__(f"unexpected response from {locator}: {reason}")


class TopEntitiesError(LeaderboardError):
    """Raised when the ranking for a role could not be produced."""
