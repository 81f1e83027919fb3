from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from .model import ShiftRoster


class RosterRepository(Protocol):
    def get_for_employee_and_date(self, *, employee_id: str, work_date: date) -> Optional[ShiftRoster]:
        """Roster assigned to the employee for one specific day, if any."""

        raise NotImplementedError

    def get_default_for_employee(self, employee_id: str) -> Optional[ShiftRoster]:
        raise NotImplementedError
