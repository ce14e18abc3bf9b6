"""Standard response statuses, errors and HTTP response bodies."""

from dataclasses import dataclass
from enum import IntEnum
from http import HTTPStatus
from typing import Any


class Status(IntEnum):
    """Application response status with its code, message and HTTP status."""

    SUCCESS = 0
    SYSTEM_ERROR = 1
    DUPLICATE_DATA = 2
    DATA_NOT_EXIST = 3
    BIND_ERROR = 4
    RUNTIME_ERROR = 5
    DATE_NOT_VALID = 6
    VENDOR_SHUTDOWN = 7
    METHOD_ARGUMENTS_NOT_VALID = 8
    TOO_MANY_REQUEST = 9
    BAD_REQUEST = 10
    UNAUTHORIZE = 11

    @property
    def code(self):
        return _CODES[self]

    @property
    def message(self):
        return _MESSAGES[self]

    @property
    def http_status(self):
        return _HTTP_STATUSES[self]


_CODES = {
    Status.SUCCESS: "00000",
    Status.SYSTEM_ERROR: "00001",
    Status.DUPLICATE_DATA: "00002",
    Status.DATA_NOT_EXIST: "00003",
    Status.BIND_ERROR: "00004",
    Status.RUNTIME_ERROR: "00005",
    Status.DATE_NOT_VALID: "00006",
    Status.VENDOR_SHUTDOWN: "00007",
    Status.METHOD_ARGUMENTS_NOT_VALID: "00008",
    Status.TOO_MANY_REQUEST: "00009",
    Status.BAD_REQUEST: "000010",
    Status.UNAUTHORIZE: "000011",
}

_CONTACT = "Contact Our Team"
_MESSAGES = {
    Status.SUCCESS: "Success",
    Status.SYSTEM_ERROR: _CONTACT,
    Status.DUPLICATE_DATA: _CONTACT,
    Status.DATA_NOT_EXIST: _CONTACT,
    Status.BIND_ERROR: _CONTACT,
    Status.RUNTIME_ERROR: _CONTACT,
    Status.DATE_NOT_VALID: _CONTACT,
    Status.VENDOR_SHUTDOWN: _CONTACT,
    Status.METHOD_ARGUMENTS_NOT_VALID: _CONTACT,
    Status.TOO_MANY_REQUEST: _CONTACT,
    Status.BAD_REQUEST: "Bad Request",
    Status.UNAUTHORIZE: "Unauthorized",
}

_HTTP_STATUSES = {
    Status.SUCCESS: HTTPStatus.OK,
    Status.SYSTEM_ERROR: HTTPStatus.INTERNAL_SERVER_ERROR,
    Status.DUPLICATE_DATA: HTTPStatus.INTERNAL_SERVER_ERROR,
    Status.DATA_NOT_EXIST: HTTPStatus.NOT_FOUND,
    Status.BIND_ERROR: HTTPStatus.BAD_REQUEST,
    Status.RUNTIME_ERROR: HTTPStatus.INTERNAL_SERVER_ERROR,
    Status.DATE_NOT_VALID: HTTPStatus.INTERNAL_SERVER_ERROR,
    Status.VENDOR_SHUTDOWN: HTTPStatus.INTERNAL_SERVER_ERROR,
    Status.METHOD_ARGUMENTS_NOT_VALID: HTTPStatus.INTERNAL_SERVER_ERROR,
    Status.TOO_MANY_REQUEST: HTTPStatus.TOO_MANY_REQUESTS,
    Status.BAD_REQUEST: HTTPStatus.BAD_REQUEST,
    Status.UNAUTHORIZE: HTTPStatus.UNAUTHORIZED,
}


class StdError(Exception):
    """An error carrying a response status and a list of error messages."""

    def __init__(self, stat, errors=None):
        self.stat = Status(stat)
        self.errors = list(errors or [])
        super().__init__(self.stat)

    @property
    def code(self):
        return self.stat.code

    @property
    def message(self):
        return self.stat.message

    @property
    def http_status(self):
        return self.stat.http_status

    def append_error(self, err):
        """Record the message of err; None is ignored."""
        if err is not None:
            self.errors.append(str(err))

    def __str__(self):
        return "\n".join(self.errors)


@dataclass
class HttpRespBody:
    """JSON body of every HTTP response."""

    code: str
    message: str
    data: Any = None

    def to_dict(self):
        return {
            "response_code": self.code,
            "response_message": self.message,
            "data": self.data,
        }


def make_error(stat, err):
    """Build a StdError for stat holding the message of err, if any."""
    std_err = StdError(stat)
    std_err.append_error(err)
    return std_err


def body(data, err):
    """Return the HTTP status code and response body for data or err."""
    if err is None:
        stat = Status.SUCCESS
        return int(stat.http_status), HttpRespBody(stat.code, stat.message, data)
    if isinstance(err, StdError):
        resp = err
    elif isinstance(err, BaseException):
        resp = make_error(Status.SYSTEM_ERROR, err)
    else:
        raise TypeError(f"unsupported error value: {err!r}")
    return int(resp.http_status), HttpRespBody(
        resp.code, resp.message, list(resp.errors) or None
    )