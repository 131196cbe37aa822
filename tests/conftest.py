# tests/conftest.py

import logging

import pytest

from core.logging_config import ROOT_LOGGER_NAME
from logic.logic_manager import LogicManager
from models.fields import Address, Email, ModuleCode, Name, Phone, Remark, StudentId, Tag
from models.grade import Grade, GradeRecord
from models.person import Contact, Student
from models.roster import Roster


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers = []
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True


@pytest.fixture
def sample_student():
    return Student(
        id="p001",
        name=Name("Alex Yeoh"),
        email=Email("alexyeoh@example.com"),
        student_id=StudentId("A1234567X"),
        module_codes={ModuleCode("CS2103T")},
        tags={Tag("tutee")},
        grades=GradeRecord([Grade("Quiz 1", 80)]),
        remark=Remark("Sits in the front row"),
    )


@pytest.fixture
def second_student():
    return Student(
        id="p002",
        name=Name("Bernice Yu"),
        email=Email("berniceyu@example.com"),
        student_id=StudentId("A7654321B"),
    )


@pytest.fixture
def sample_contact():
    return Contact(
        id="p003",
        name=Name("Charlotte Oliveiro"),
        email=Email("charlotte@example.com"),
        phone=Phone("93210283"),
        address=Address("Blk 11 Ang Mo Kio Street 74"),
    )


@pytest.fixture
def sample_roster(sample_student, second_student, sample_contact):
    return Roster([sample_student, second_student, sample_contact])


@pytest.fixture
def two_person_roster(sample_student, sample_contact):
    return Roster([sample_student, sample_contact])


@pytest.fixture
def logic(sample_roster):
    return LogicManager(sample_roster)
