"""Unit tests for the response envelope."""

import json

import pytest

from api.envelope import (
    ERROR_RESPONSES,
    envelope_response,
    error_response,
    unknown_error_response,
)
from domain.user.core.exceptions.user_errors import (
    ErrorKind,
    InvalidUserIdError,
    MalformedBodyError,
    UserConflictError,
    UserDomainError,
    UserNotFoundError,
    UserValidationError,
)


def _body(response):
    return json.loads(response.body)


def test_every_error_kind_is_mapped():
    assert set(ERROR_RESPONSES) == set(ErrorKind)


def test_result_omitted_when_not_given():
    response = envelope_response(200, False)

    assert response.status_code == 200
    assert _body(response) == {"success": False, "message": ""}


def test_empty_list_result_is_kept():
    assert _body(envelope_response(200, False, result=[])) == {
        "success": False,
        "message": "",
        "result": [],
    }


@pytest.mark.parametrize(
    "error, status_code, message",
    [
        (MalformedBodyError(), 400, "malformed body"),
        (InvalidUserIdError("x"), 400, "format error"),
        (UserConflictError(), 409, "account or email already in use"),
        (UserNotFoundError("64b7f0c2a1b2c3d4e5f60718"), 404, "not found"),
        (UserValidationError("account", "account is required"), 400, "account is required"),
        (UserDomainError("internal detail"), 500, "unknown error"),
    ],
)
def test_error_response_mapping(error, status_code, message):
    response = error_response(error)

    assert response.status_code == status_code
    assert _body(response) == {"success": False, "message": message}


def test_unknown_error_response():
    response = unknown_error_response()

    assert response.status_code == 500
    assert _body(response) == {"success": False, "message": "unknown error"}
