# models/grade.py

"""
Represents the assignment grades recorded for a single person.

A `Grade` pairs an assignment name with a numeric score. Grades are held in a
`GradeRecord`, a map keyed by assignment name, so each assignment has at most
one score. `GradeRecord` never mutates in place: every manipulator returns a
new record, which lets an edit build a candidate record and discard it if a
later validation step fails.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import core.formatters as formatters

MIN_SCORE = 0.0
MAX_SCORE = 100.0

SCORE_FORMAT = re.compile(r"[0-9]+(\.[0-9]+)?")


@dataclass(frozen=True)
class Grade:
    assignment_name: str
    score: float

    MESSAGE_CONSTRAINTS = (
        "Grades should be in the form ASSIGNMENT_NAME:SCORE, "
        f"where the score is a number from {MIN_SCORE:g} to {MAX_SCORE:g}."
    )

    def __post_init__(self) -> None:
        name = self.assignment_name.strip()
        if not name:
            raise ValueError(Grade.MESSAGE_CONSTRAINTS)

        score = float(self.score)
        if math.isnan(score) or not (MIN_SCORE <= score <= MAX_SCORE):
            raise ValueError(Grade.MESSAGE_CONSTRAINTS)

        object.__setattr__(self, "assignment_name", name)
        object.__setattr__(self, "score", score)

    @classmethod
    def parse(cls, raw: str) -> Grade:
        """
        Builds a `Grade` from `ASSIGNMENT_NAME:SCORE` text.

        Raises:
            ValueError: If the separator is missing, the score is not numeric, or either part is out of range.
        """
        name, sep, score = raw.rpartition(":")
        if not sep:
            raise ValueError(Grade.MESSAGE_CONSTRAINTS)

        score = score.strip()
        if not SCORE_FORMAT.fullmatch(score):
            raise ValueError(Grade.MESSAGE_CONSTRAINTS)

        return cls(name, float(score))

    def __str__(self) -> str:
        return f"{self.assignment_name}: {formatters.format_score(self.score)}"


class GradeRecord:
    def __init__(self, grades: Iterable[Grade] = ()):
        self._grades: dict[str, Grade] = {}
        for grade in grades:
            self._grades[grade.assignment_name] = grade

    # === data accessors ===

    def get(self, assignment_name: str) -> Grade | None:
        return self._grades.get(assignment_name)

    # === data manipulators ===

    def add_grade(self, grade: Grade) -> GradeRecord:
        grades = dict(self._grades)
        grades[grade.assignment_name] = grade
        return GradeRecord(grades.values())

    def update_grade(self, grade: Grade) -> GradeRecord:
        """
        Replaces the existing grade for the same assignment.

        Args:
            grade (Grade): The new grade; its assignment name selects the entry to replace.

        Returns:
            GradeRecord: A new record holding the replacement.

        Raises:
            KeyError: If no grade exists for `grade.assignment_name`.
        """
        if grade.assignment_name not in self._grades:
            raise KeyError(grade.assignment_name)

        return self.add_grade(grade)

    # === dunder methods ===

    def __iter__(self) -> Iterator[Grade]:
        return iter(self._grades.values())

    def __len__(self) -> int:
        return len(self._grades)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GradeRecord):
            return NotImplemented
        return self._grades == other._grades

    def __hash__(self) -> int:
        return hash(frozenset(self._grades.items()))

    def __repr__(self) -> str:
        return f"GradeRecord({list(self._grades.values())!r})"

    def __str__(self) -> str:
        if not self._grades:
            return "None"
        return ", ".join(str(grade) for grade in self._grades.values())
