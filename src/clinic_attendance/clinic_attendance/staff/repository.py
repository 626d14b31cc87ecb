from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import StaffKind
from .model import StaffDraft, StaffMember


class StaffRepository(Protocol):
    """Repository interface for the staff roster.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, staff_id: int) -> Optional[StaffMember]:
        raise NotImplementedError

    def get_by_name(self, kind: StaffKind, name: str) -> Optional[StaffMember]:
        raise NotImplementedError

    def list_by_kinds(self, kinds: Sequence[StaffKind], *, active_only: bool = False) -> Sequence[StaffMember]:
        """Members of the given kinds ordered by name."""

        raise NotImplementedError

    def create(self, draft: StaffDraft) -> int:
        raise NotImplementedError

    def update(self, staff_id: int, draft: StaffDraft) -> bool:
        raise NotImplementedError

    def set_active(self, staff_id: int, *, active: bool) -> bool:
        raise NotImplementedError

    def delete_by_id(self, staff_id: int) -> bool:
        raise NotImplementedError
