# models/roster.py

"""
The Roster model is the central data object of the program and represents the "source of truth" for all person records.

Records are stored in a dictionary keyed by their internal uuid. Insertion order is the display order, and replacing a
record keeps its position. Alongside the full collection the Roster tracks a display filter: the filtered list is what
the user currently sees, and the 1-based indices typed into commands refer to it.

Provides functions for adding, replacing, and finding records, and for verifying unique values before adding.
Student IDs are unique across the roster. Email uniqueness is checked only by `add_person`; `set_person` does not
re-check it, so an edit can give two records the same email.
Includes the session-scoped `unsaved_changes` marker, set by every successful mutation.
"""

from __future__ import annotations

from typing import Callable

from core.logging_config import get_logger
from core.response import ErrorCode, Response
from core.utils import normalize
from models.fields import Email, StudentId
from models.person import Person

logger = get_logger("roster")

PersonPredicate = Callable[[Person], bool]


def show_all_persons(person: Person) -> bool:
    return True


class Roster:
    def __init__(self, persons: list[Person] | None = None):
        self._persons: dict[str, Person] = {}
        self._filter: PersonPredicate = show_all_persons
        self._unsaved_changes: bool = False

        for person in persons or []:
            response = self.add_person(person)
            if not response.success:
                raise ValueError(f"Failed to load person: {person} - {response.detail}")

        self._unsaved_changes = False

    # === properties ===

    @property
    def persons(self) -> list[Person]:
        return list(self._persons.values())

    @property
    def filtered_persons(self) -> list[Person]:
        return [person for person in self._persons.values() if self._filter(person)]

    @property
    def has_unsaved_changes(self) -> bool:
        return self._unsaved_changes

    # === data accessors ===

    def find_person_by_student_id(self, student_id: StudentId) -> Response:
        """
        Finds the `Person` holding the given student ID, searching the whole roster regardless of the display filter.

        Args:
            student_id (StudentId): The secondary identifier to look up.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if a record holds the student ID.
                    - False if no record holds it.
                - detail (str | None):
                    - On failure, a human-readable explanation of the problem.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no match is found.
                - status_code (int | None):
                    - 200 on success
                    - 404 if not found
                - data (dict): Payload with the following keys:
                    - On success:
                        - "record" (Person): The matched record.
                    - On failure:
                        - None

        Notes:
            - This method is read-only and does not raise.
            - Student IDs are unique, so at most one record can match.
        """
        for person in self._persons.values():
            if person.student_id == student_id:
                return Response.succeed(
                    data={
                        "record": person,
                    },
                )

        return Response.fail(
            detail=f"No student found with student ID {student_id}.",
            error=ErrorCode.NOT_FOUND,
        )

    # === data manipulators ===

    def _mark_dirty(self) -> None:
        """
        Marks the roster as having unsaved changes.
        """
        self._unsaved_changes = True

    def add_person(self, person: Person) -> Response:
        """
        Adds a `Person` to the end of the roster.

        Args:
            person (Person): The record to be added.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the record was added.
                    - False if its student ID or email is already taken, or the uuid is already tracked.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.DUPLICATE_STUDENT_ID` if the student ID is not unique.
                    - `ErrorCode.VALIDATION_FAILED` if the email is not unique or the uuid is already tracked.
                - status_code (int | None):
                    - 200 on success
                    - 409 for a duplicate student ID, 400 for other failures
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Person): The added record.
                    - On failure:
                        - None

        Notes:
            - This method mutates `Roster` state and calls `_mark_dirty()` if successful.
        """
        if person.id in self._persons:
            return Response.fail(
                detail=f"This record is already in the roster: {person}.",
                error=ErrorCode.VALIDATION_FAILED,
            )

        if person.student_id is not None:
            try:
                self.require_unique_student_id(person.student_id)

            except ValueError as e:
                return Response.fail(
                    detail=f"Unique record validation failed: {e}",
                    error=ErrorCode.DUPLICATE_STUDENT_ID,
                )

        try:
            self.require_unique_email(person.email)

        except ValueError as e:
            return Response.fail(
                detail=f"Unique record validation failed: {e}",
                error=ErrorCode.VALIDATION_FAILED,
            )

        self._persons[person.id] = person
        self._mark_dirty()
        logger.debug("added %s", person)

        return Response.succeed(
            detail="Person successfully added to the roster.",
            data={
                "record": person,
            },
        )

    def set_person(self, target: Person, edited: Person) -> Response:
        """
        Replaces `target` with `edited`, keeping its position in the roster.

        Args:
            target (Person): The tracked record being replaced.
            edited (Person): The replacement record, carrying the same internal `id` as `target`.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the record was replaced.
                    - False if `target` is not tracked or the ids disagree.
                - detail (str | None): A confirmation or a description of the error.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if `target` is not tracked.
                    - `ErrorCode.VALIDATION_FAILED` if `edited` does not share `target`'s id.
                - status_code (int | None):
                    - 200 on success
                    - 404 if `target` cannot be found
                    - 400 for other failures
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Person): The replacement record.

        Notes:
            - This method mutates `Roster` state and calls `_mark_dirty()` if successful.
            - Uniqueness of the replacement's student ID is the caller's responsibility.
        """
        if self._persons.get(target.id) != target:
            return Response.fail(
                detail=f"No matching record could be found for replacement: {target}.",
                error=ErrorCode.NOT_FOUND,
            )

        if not edited.is_same_person(target):
            return Response.fail(
                detail="The replacement record must keep the internal id of the record it replaces.",
                error=ErrorCode.VALIDATION_FAILED,
            )

        self._persons[target.id] = edited
        self._mark_dirty()
        logger.debug("replaced %s with %s", target, edited)

        return Response.succeed(
            detail="Person successfully updated.",
            data={
                "record": edited,
            },
        )

    def update_filter(self, predicate: PersonPredicate) -> None:
        self._filter = predicate

    # === data validators ===

    def require_unique_student_id(self, student_id: StudentId) -> None:
        """
        Validates that no existing record holds the given student ID.

        Raises:
            ValueError: If a record with the same student ID already exists.
        """
        if self.find_person_by_student_id(student_id).success:
            raise ValueError(f"A student with the student ID '{student_id}' already exists.")

    def require_unique_email(self, email: Email) -> None:
        """
        Validates that no existing record shares the given email address.

        Raises:
            ValueError: If a record with the same normalized email already exists.
        """
        normalized = normalize(str(email))
        if any(normalize(str(p.email)) == normalized for p in self._persons.values()):
            raise ValueError(f"A person with the email '{email}' already exists.")

    # === dunder methods ===

    def __len__(self) -> int:
        return len(self._persons)
