# models/attendance.py

"""
Weekly attendance tracking.

Attendance is internally represented as a dictionary mapping week numbers to
status values (e.g., Present, Absent, Excused). A week with no entry is
unmarked. `AttendanceStatus.UNMARK` is never stored: it is the instruction to
remove a week's entry.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum

MIN_WEEK = 1
MAX_WEEK = 13

WEEK_NUMBER = re.compile(r"[0-9]+")


class AttendanceStatus(str, Enum):
    PRESENT = "Present"
    ABSENT = "Absent"
    LATE = "Late"
    EXCUSED = "Excused"
    UNMARK = "Unmark"

    @classmethod
    def parse(cls, raw: str) -> AttendanceStatus:
        normalized = raw.strip().lower()
        for status in cls:
            if status.value.lower() == normalized:
                return status

        choices = ", ".join(status.value.lower() for status in cls)
        raise ValueError(f"Attendance status should be one of: {choices}.")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Attendance:
    week: int
    status: AttendanceStatus

    MESSAGE_CONSTRAINTS = (
        "Attendance should be in the form WEEK_NUMBER:STATUS, "
        f"where the week is a number from {MIN_WEEK} to {MAX_WEEK}."
    )

    def __post_init__(self) -> None:
        if isinstance(self.week, bool) or not MIN_WEEK <= self.week <= MAX_WEEK:
            raise ValueError(Attendance.MESSAGE_CONSTRAINTS)

    @classmethod
    def parse(cls, raw: str) -> Attendance:
        """
        Builds an `Attendance` from `WEEK_NUMBER:STATUS` text.

        Raises:
            ValueError: If the separator is missing, the week is not an integer in range, or the status is unknown.
        """
        week, sep, status = raw.partition(":")
        if not sep:
            raise ValueError(Attendance.MESSAGE_CONSTRAINTS)

        week = week.strip()
        if not WEEK_NUMBER.fullmatch(week):
            raise ValueError(Attendance.MESSAGE_CONSTRAINTS)

        return cls(int(week), AttendanceStatus.parse(status))

    @property
    def is_unmark(self) -> bool:
        return self.status is AttendanceStatus.UNMARK


class AttendanceRecord:
    def __init__(self, entries: Mapping[int, AttendanceStatus] | None = None):
        self._attendance: dict[int, AttendanceStatus] = {}
        for week, status in (entries or {}).items():
            if status is AttendanceStatus.UNMARK:
                raise ValueError("An unmark instruction cannot be stored as a status.")
            self._attendance[week] = status

    # === data accessors ===

    @property
    def entries(self) -> dict[int, AttendanceStatus]:
        return dict(sorted(self._attendance.items()))

    def attendance_in(self, week: int) -> AttendanceStatus | None:
        return self._attendance.get(week)

    def is_marked(self, week: int) -> bool:
        return week in self._attendance

    # === data manipulators ===

    def mark_attendance(self, week: int, status: AttendanceStatus) -> AttendanceRecord:
        entries = dict(self._attendance)
        entries[week] = status
        return AttendanceRecord(entries)

    def unmark_attendance(self, week: int) -> AttendanceRecord:
        entries = dict(self._attendance)
        entries.pop(week, None)
        return AttendanceRecord(entries)

    def apply(self, attendance: Attendance) -> AttendanceRecord:
        if attendance.is_unmark:
            return self.unmark_attendance(attendance.week)
        return self.mark_attendance(attendance.week, attendance.status)

    # === dunder methods ===

    def __iter__(self) -> Iterator[tuple[int, AttendanceStatus]]:
        return iter(self.entries.items())

    def __len__(self) -> int:
        return len(self._attendance)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttendanceRecord):
            return NotImplemented
        return self._attendance == other._attendance

    def __hash__(self) -> int:
        return hash(frozenset(self._attendance.items()))

    def __repr__(self) -> str:
        return f"AttendanceRecord({self.entries!r})"

    def __str__(self) -> str:
        if not self._attendance:
            return "None"
        return ", ".join(f"Week {week}: {status}" for week, status in self.entries.items())
