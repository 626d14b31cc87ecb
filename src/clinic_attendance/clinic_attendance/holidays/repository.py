from __future__ import annotations

from typing import Protocol, Sequence

from .model import Holiday


class HolidayRepository(Protocol):
    def list_range(self, start: str, end: str) -> Sequence[Holiday]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Holiday]:
        raise NotImplementedError

    def add(self, holiday: Holiday) -> None:
        raise NotImplementedError

    def delete(self, date: str) -> bool:
        raise NotImplementedError
