from collections.abc import Iterable
from typing import TypeVar

from pydantic import BaseModel

R = TypeVar("R", bound=BaseModel)


class InMemoryRecordStore:
    """
    Records keyed by `<type>:<id>`. Reads come back in insertion order, so
    paginated listings are stable across requests.
    """

    def __init__(self) -> None:
        self._records: dict[str, BaseModel] = {}

    def load(self, records: Iterable[BaseModel]) -> None:
        for record in records:
            self._records[record_key(record)] = record

    def of_type(self, kind: type[R]) -> list[R]:
        return [r for r in self._records.values() if isinstance(r, kind)]


def record_key(record: BaseModel) -> str:
    return f"{type(record).__name__.lower()}:{record.id}"
