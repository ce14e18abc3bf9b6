import io

import pytest

from bmovie.utils import (
    ERROR_TMPL,
    PERFORM_SEARCH_MOVIE,
    REQUEST_TMPL,
    X_REQUEST_ID,
    fetch_request_id,
    read_json,
    unhandled_http_status,
    unhandled_resp_status,
)


def test_fetch_request_id_case_insensitive():
    assert fetch_request_id({"X-Request-Id": "req-1"}) == "req-1"
    assert fetch_request_id({X_REQUEST_ID: "req-2"}) == "req-2"


def test_fetch_request_id_missing():
    assert fetch_request_id({"Content-Type": "application/json"}) == ""


def test_fetch_request_id_multi_value():
    assert fetch_request_id({"X-REQUEST-ID": ["first", "second"]}) == "first"
    assert fetch_request_id({"X-REQUEST-ID": []}) == ""


def test_read_json_text_and_bytes():
    payload = '{"Search": [{"Title": "Batman"}], "Response": "True"}'
    from_text = read_json(io.StringIO(payload))
    from_bytes = read_json(io.BytesIO(payload.encode()))
    assert from_text == from_bytes
    assert from_text["Search"][0]["Title"] == "Batman"


def test_read_json_invalid():
    with pytest.raises(ValueError):
        read_json(io.StringIO("{broken"))


def test_unhandled_http_status_message():
    err = unhandled_http_status(500)
    assert isinstance(err, Exception)
    assert str(err) == "Unhandled http status code: 500"


def test_unhandled_resp_status_contains_parts():
    err = unhandled_resp_status("False", "Movie not found!")
    assert str(err).startswith("Unhandled response status: False")
    assert str(err).endswith("message: Movie not found!")


def test_log_templates_format_package_errors():
    request_line = REQUEST_TMPL % PERFORM_SEARCH_MOVIE
    error_line = ERROR_TMPL % (PERFORM_SEARCH_MOVIE, unhandled_http_status(502))
    assert request_line == "receive request to search movie."
    assert error_line == (
        "an error occurred when try to search movie. "
        "ERROR:Unhandled http status code: 502"
    )