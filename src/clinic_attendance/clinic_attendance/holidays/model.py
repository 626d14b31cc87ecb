from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Holiday:
    """Domain entity: a declared clinic holiday (date key YYYY-MM-DD)."""

    date: str
    name: str
    description: str = ""

    def to_dict(self) -> dict:
        return {"date": self.date, "name": self.name, "description": self.description}
