# models/consultation.py

from __future__ import annotations

import datetime
import re
from dataclasses import dataclass

import core.formatters as formatters


@dataclass(frozen=True, order=True)
class Consultation:
    date: datetime.date
    start: datetime.time
    end: datetime.time

    MESSAGE_CONSTRAINTS = (
        "Consultations should be in the form YYYY-MM-DD HH:MM-HH:MM, "
        "and must end after they start."
    )

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise ValueError(Consultation.MESSAGE_CONSTRAINTS)

    @classmethod
    def parse(cls, raw: str) -> Consultation:
        match = re.fullmatch(
            r"(\d{4}-\d{2}-\d{2})\s+(\d{1,2}:\d{2})\s*-\s*(\d{1,2}:\d{2})", raw.strip()
        )
        if match is None:
            raise ValueError(Consultation.MESSAGE_CONSTRAINTS)

        date_str, start_str, end_str = match.groups()

        try:
            slot_date = datetime.date.fromisoformat(date_str)
            start = datetime.datetime.strptime(start_str, "%H:%M").time()
            end = datetime.datetime.strptime(end_str, "%H:%M").time()
        except ValueError:
            raise ValueError(Consultation.MESSAGE_CONSTRAINTS)

        return cls(slot_date, start, end)

    def __str__(self) -> str:
        return formatters.format_consultation_slot(self.date, self.start, self.end)
