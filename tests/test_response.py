# tests/test_response.py

import pytest

from core.response import ErrorCode, Response


def test_succeed():
    response = Response.succeed(detail="done", data={"record": "r"})

    assert response.success
    assert response.status_code == 200
    assert response.error is None
    assert response.record == "r"
    assert str(response) == "Success: done"


@pytest.mark.parametrize(
    "error, status_code",
    [
        (ErrorCode.NOT_FOUND, 404),
        (ErrorCode.DUPLICATE_STUDENT_ID, 409),
        (ErrorCode.INTERNAL_ERROR, 500),
        (ErrorCode.NOT_EDITED, 400),
        ("SOMETHING_ELSE", 400),
    ],
)
def test_fail_derives_status_code(error, status_code):
    assert Response.fail(detail="nope", error=error).status_code == status_code


def test_fail_keeps_explicit_status_code():
    assert Response.fail(error=ErrorCode.NOT_FOUND, status_code=410).status_code == 410


def test_fail_has_no_payload():
    response = Response.fail(detail="nope", error=ErrorCode.INVALID_INPUT)

    assert response.data == {}
    assert response.record is None
    assert str(response) == "Error [INVALID_INPUT]: nope"
