from http import HTTPStatus

import pytest

from bmovie.response import Status, StdError, body, make_error


def _described(stat):
    """Return the response body fields the package reports for a status."""
    http_status, resp = body(None, make_error(stat, None))
    return http_status, resp.to_dict()


def test_status_codes_fixed_by_source():
    _, success = body(None, None)
    assert success.to_dict()["response_code"] == "00000"
    assert success.to_dict()["response_message"] == "Success"
    _, bad_request = _described(Status.BAD_REQUEST)
    assert bad_request["response_code"] == "000010"
    assert bad_request["response_message"] == "Bad Request"
    _, unauthorized = _described(Status.UNAUTHORIZE)
    assert unauthorized["response_message"] == "Unauthorized"
    _, system_error = _described(Status.SYSTEM_ERROR)
    assert system_error["response_message"] == "Contact Our Team"


def test_status_http_statuses():
    assert make_error(Status.SUCCESS, None).http_status == HTTPStatus.OK
    assert make_error(Status.BAD_REQUEST, None).http_status == HTTPStatus.BAD_REQUEST
    assert make_error(Status.DATA_NOT_EXIST, None).http_status == HTTPStatus.NOT_FOUND
    assert (
        make_error(Status.TOO_MANY_REQUEST, None).http_status
        == HTTPStatus.TOO_MANY_REQUESTS
    )
    assert (
        make_error(Status.SYSTEM_ERROR, None).http_status
        == HTTPStatus.INTERNAL_SERVER_ERROR
    )


def test_make_error_records_message():
    err = make_error(Status.BAD_REQUEST, ValueError("invalid query input"))
    assert err.errors == ["invalid query input"]
    assert str(err) == "invalid query input"
    _, resp = body(None, err)
    assert resp.to_dict()["response_code"] == "000010"
    assert err.http_status == HTTPStatus.BAD_REQUEST


def test_make_error_ignores_none():
    err = make_error(Status.RUNTIME_ERROR, None)
    assert err.errors == []
    assert str(err) == ""


def test_append_error_joins_with_newline():
    err = make_error(Status.SYSTEM_ERROR, ValueError("first"))
    err.append_error(ValueError("second"))
    assert str(err) == "first\nsecond"


def test_std_error_is_an_exception():
    err = make_error(Status.UNAUTHORIZE, ValueError("denied"))
    assert err.errors == ["denied"]
    assert str(err) == "denied"
    assert err.http_status == HTTPStatus.UNAUTHORIZED
    assert isinstance(err, Exception)
    with pytest.raises(StdError, match="denied"):
        raise err


def test_body_success():
    status, resp = body({"k": "v"}, None)
    assert status == HTTPStatus.OK
    assert resp.to_dict() == {
        "response_code": "00000",
        "response_message": "Success",
        "data": {"k": "v"},
    }


def test_body_std_error():
    status, resp = body(None, make_error(Status.BAD_REQUEST, ValueError("bad")))
    assert status == HTTPStatus.BAD_REQUEST
    assert resp.to_dict() == {
        "response_code": "000010",
        "response_message": "Bad Request",
        "data": ["bad"],
    }


def test_body_plain_exception_is_system_error():
    status, resp = body({"ignored": True}, RuntimeError("boom"))
    assert status == HTTPStatus.INTERNAL_SERVER_ERROR
    assert resp.to_dict()["response_code"] == "00001"
    assert resp.data == ["boom"]


def test_body_rejects_non_error():
    with pytest.raises(TypeError):
        body(None, "not an error")