"""
Records read from the shifts API, plus the ranked output unit.
"""

from datetime import UTC, datetime
from enum import StrEnum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

T = TypeVar("T")

ACTIVE_STATUS = 0


class Entity(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    name: str
    status: int

    @property
    def is_active(self) -> bool:
        return self.status == ACTIVE_STATUS


class Worker(Entity):
    pass


class Workplace(Entity):
    location: str | None = None


class Shift(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int
    end_at: datetime = Field(alias="endAt")
    workplace_id: int = Field(alias="workplaceId")
    worker_id: int | None = Field(default=None, alias="workerId")
    cancelled_at: datetime | None = Field(default=None, alias="cancelledAt")
    start_at: datetime | None = Field(default=None, alias="startAt")
    created_at: datetime | None = Field(default=None, alias="createdAt")

    @field_validator("end_at", "cancelled_at", "start_at", "created_at")
    @classmethod
    def _assume_utc(cls, value: datetime | None) -> datetime | None:
        # the API omits offsets on some records; those are UTC
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    @property
    def claimed(self) -> bool:
        return self.worker_id is not None

    @property
    def cancelled(self) -> bool:
        return self.cancelled_at is not None


class PageLinks(BaseModel):
    next: str | None = None


class Page(BaseModel, Generic[T]):
    data: list[T]
    links: PageLinks = Field(default_factory=PageLinks)

    @property
    def next_cursor(self) -> str | None:
        # an empty string ends the chain just like a missing link
        return self.links.next or None


class RankedResult(BaseModel):
    name: str
    count: int


class Role(StrEnum):
    WORKERS = "workers"
    WORKPLACES = "workplaces"

    @property
    def entity_path(self) -> str:
        return f"/{self.value}"

    @property
    def entity_model(self) -> type[Entity]:
        return Worker if self is Role.WORKERS else Workplace

    @property
    def label(self) -> str:
        return self.value.removesuffix("s")
