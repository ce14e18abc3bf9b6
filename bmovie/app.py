"""WSGI application serving the movie search HTTP API."""

import json
import logging
import sys
import time
from dataclasses import dataclass, field, fields, is_dataclass
from datetime import date, datetime
from http import HTTPStatus
from typing import Any, Callable
from urllib.parse import parse_qs, quote

from bmovie.controller import Controller, Request
from bmovie.utils import X_REQUEST_ID

HEALTH_CHECK_PATH = "/bmovie/health-check"
SEARCH_PATH = "/bmovie/v1/"

_CORS_METHODS = "GET,HEAD,PUT,PATCH,POST,DELETE"
_JSON_CONTENT_TYPE = "application/json; charset=UTF-8"


def _environ_header(environ, name):
    key = "HTTP_" + name.upper().replace("-", "_")
    return environ.get(key, "")


def _go_fraction(value, scale):
    whole, frac = divmod(value, scale)
    if not frac:
        return str(whole)
    digits = len(str(scale)) - 1
    return f"{whole}.{frac:0{digits}d}".rstrip("0")


def _human_duration(nanoseconds):
    if nanoseconds == 0:
        return "0s"
    sign = "-" if nanoseconds < 0 else ""
    ns = abs(nanoseconds)
    if ns < 1_000:
        return f"{sign}{ns}ns"
    if ns < 1_000_000:
        return f"{sign}{_go_fraction(ns, 1_000)}µs"
    if ns < 1_000_000_000:
        return f"{sign}{_go_fraction(ns, 1_000_000)}ms"
    hours, rest = divmod(ns, 3600 * 10**9)
    minutes, rest = divmod(rest, 60 * 10**9)
    seconds = _go_fraction(rest, 10**9) + "s"
    if hours:
        return f"{sign}{hours}h{minutes}m{seconds}"
    if minutes:
        return f"{sign}{minutes}m{seconds}"
    return sign + seconds


def _real_ip(environ):
    forwarded = _environ_header(environ, "X-Forwarded-For")
    if forwarded:
        first = forwarded.split(",", 1)[0].strip()
        return first or forwarded
    real = _environ_header(environ, "X-Real-IP")
    if real:
        return real
    return environ.get("REMOTE_ADDR", "")


def _request_uri(environ):
    raw = environ.get("REQUEST_URI") or environ.get("RAW_URI")
    if raw:
        return raw
    path = quote(environ.get("SCRIPT_NAME", "") + environ.get("PATH_INFO", ""), safe="/:@!$&'()*+,;=-._~")
    query = environ.get("QUERY_STRING", "")
    return f"{path}?{query}" if query else path


def format_access_log(environ, status, latency, bytes_in, bytes_out):
    """Format one access log line; latency is given in seconds."""
    moment = datetime.now().astimezone().isoformat(timespec="seconds")
    values = [
        ("time", moment),
        ("level", "echo"),
        (X_REQUEST_ID, _environ_header(environ, X_REQUEST_ID)),
        ("remote_ip", _real_ip(environ)),
        ("host", environ.get("HTTP_HOST", "")),
        ("method", environ.get("REQUEST_METHOD", "")),
        ("uri", _request_uri(environ)),
        ("user_agent", _environ_header(environ, "User-Agent")),
        ("status", int(status)),
        ("latency_human", _human_duration(round(latency * 1e9))),
        ("bytes_in", bytes_in),
        ("bytes_out", bytes_out),
    ]
    return " ".join(f'{key}="{value}"' for key, value in values) + "\n"


def _json_default(obj):
    if is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in fields(obj)}
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    return str(obj)


def _encode(payload):
    return (json.dumps(payload, default=_json_default, ensure_ascii=False) + "\n").encode("utf-8")


def _request_from_environ(environ):
    parsed = parse_qs(environ.get("QUERY_STRING", ""), keep_blank_values=True)
    query = {name: values[0] for name, values in parsed.items()}
    headers = {
        key[5:].replace("_", "-").lower(): value
        for key, value in environ.items()
        if key.startswith("HTTP_")
    }
    if "CONTENT_TYPE" in environ:
        headers["content-type"] = environ["CONTENT_TYPE"]
    return Request(query=query, headers=headers)


def _message(status):
    return _encode({"message": HTTPStatus(status).phrase})


def make_wsgi_app(controller, logger):
    """Build the WSGI callable routing requests to controller.

    Every request is written to stdout as an access log line; errors
    raised by handlers are logged to logger and answered with 500.
    """
    routes = {
        HEALTH_CHECK_PATH: controller.health_check,
        SEARCH_PATH: controller.search_movie,
    }

    def dispatch(environ):
        method = environ.get("REQUEST_METHOD", "GET").upper()
        origin = _environ_header(environ, "Origin")
        headers = [("Vary", "Origin")]

        if method == "OPTIONS":
            if origin:
                headers += [
                    ("Vary", "Access-Control-Request-Method"),
                    ("Vary", "Access-Control-Request-Headers"),
                    ("Access-Control-Allow-Origin", "*"),
                    ("Access-Control-Allow-Methods", _CORS_METHODS),
                ]
                requested = _environ_header(environ, "Access-Control-Request-Headers")
                if requested:
                    headers.append(("Access-Control-Allow-Headers", requested))
            return HTTPStatus.NO_CONTENT, headers, b""

        if origin:
            headers.append(("Access-Control-Allow-Origin", "*"))
        headers.append(("Content-Type", _JSON_CONTENT_TYPE))

        handler = routes.get(environ.get("PATH_INFO", ""))
        if handler is None:
            return HTTPStatus.NOT_FOUND, headers, _message(HTTPStatus.NOT_FOUND)
        if method != "GET":
            return HTTPStatus.METHOD_NOT_ALLOWED, headers, _message(HTTPStatus.METHOD_NOT_ALLOWED)
        try:
            status, resp = handler(_request_from_environ(environ))
        except Exception:
            logger.exception("[PANIC RECOVER]")
            return (
                HTTPStatus.INTERNAL_SERVER_ERROR,
                headers,
                _message(HTTPStatus.INTERNAL_SERVER_ERROR),
            )
        return HTTPStatus(status), headers, _encode(resp.to_dict())

    def application(environ, start_response):
        started = time.perf_counter()
        status, headers, payload = dispatch(environ)
        latency = time.perf_counter() - started
        bytes_in = environ.get("CONTENT_LENGTH") or "0"
        headers.append(("Content-Length", str(len(payload))))
        sys.stdout.write(format_access_log(environ, status, latency, bytes_in, len(payload)))
        start_response(f"{int(status)} {status.phrase}", headers)
        return [payload]

    return application


@dataclass
class SearchApp:
    """The configured service: its configuration, logger and HTTP handlers."""

    config: Any
    logger: logging.Logger
    controller: Controller
    wsgi: Callable = field(init=False, repr=False)

    def __post_init__(self):
        self.wsgi = make_wsgi_app(self.controller, self.logger)

    def close(self):
        """Release the resources held by the service."""
        self.logger.info("closing resource")
        for handler in list(self.logger.handlers):
            handler.close()