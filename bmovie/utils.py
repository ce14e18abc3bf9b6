"""Request helpers, JSON reading, shared error builders and log tags."""

import json

X_REQUEST_ID = "x-request-id"

PERFORM_SEARCH_MOVIE = "search movie"

REQUEST_TMPL = "receive request to %s."
ERROR_TMPL = "an error occurred when try to %s. ERROR:%s"

ERR_BUILD_HTTP_REQUEST = "build http request"
ERR_DO_HTTP_CALL = "do http call"
ERR_READ_RESPONSE_BODY = "read response body"
ERR_UNHANDLED_HTTP_STATUS = "handle http status"
ERR_REPOSITORY_STORE = "store record(s)"


def fetch_request_id(headers):
    """Return the x-request-id header value, or "" when absent.

    Header names are matched case-insensitively; for multi-valued
    headers the first value is returned.
    """
    wanted = X_REQUEST_ID.lower()
    for name, value in headers.items():
        if name.lower() == wanted:
            if isinstance(value, (list, tuple)):
                return str(value[0]) if value else ""
            return str(value)
    return ""


def read_json(stream):
    """Read a whole stream and decode it as JSON."""
    data = stream.read()
    if isinstance(data, (bytes, bytearray)):
        data = data.decode("utf-8")
    return json.loads(data)


def unhandled_resp_status(status, message):
    """Build the error for a response status that is not handled."""
    return RuntimeError(f"Unhandled response status: {status}, message: {message}")


def unhandled_http_status(status):
    """Build the error for an HTTP status code that is not handled."""
    return RuntimeError(f"Unhandled http status code: {status}")