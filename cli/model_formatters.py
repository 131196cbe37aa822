# cli/model_formatters.py

# anything that renders domain objects
from textwrap import dedent

import core.formatters as formatters
from models.person import Person


def format_person_oneline(person: Person) -> str:
    identity = (
        f"ID: {person.student_id}"
        if person.student_id is not None
        else f"Phone: {person.phone}"
    )

    return f"{str(person.name):<20} | {identity:<16} | {person.email}"


def format_person_multiline(person: Person) -> str:
    if person.student_id is not None:
        identity = f"... Student ID: {person.student_id}"
    else:
        identity = f"... Phone: {person.phone}\n... Address: {person.address}"

    consultations = (
        ", ".join(str(c) for c in person.consultations) if person.consultations else "None"
    )
    remark = "None" if person.remark.is_empty else str(person.remark)

    header = dedent(
        f"""\
        {'Student' if person.student_id is not None else 'Contact'}:
        ... Name: {person.name}
        ... Email: {person.email}"""
    )

    details = dedent(
        f"""\
        ... Module Codes: {formatters.format_sorted_set(person.module_codes)}
        ... Tags: {formatters.format_sorted_set(person.tags)}
        ... Grades: {person.grades}
        ... Attendance: {person.attendance}
        ... Consultations: {consultations}
        ... Remark: {remark}"""
    )

    return f"{header}\n{identity}\n{details}"
