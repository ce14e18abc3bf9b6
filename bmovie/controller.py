"""HTTP handlers for health checks and movie searches."""

import logging
import re
from dataclasses import dataclass, field
from typing import Any

from bmovie.response import Status, body, make_error
from bmovie.utils import ERROR_TMPL, PERFORM_SEARCH_MOVIE, REQUEST_TMPL, fetch_request_id

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_DEFAULT_PAGE = 1


@dataclass
class Request:
    """An incoming HTTP request: its query parameters and headers."""

    query: dict = field(default_factory=dict)
    headers: dict = field(default_factory=dict)


def _parse_page(text):
    if not _INT_RE.fullmatch(text):
        return _DEFAULT_PAGE
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return _DEFAULT_PAGE
    return value


@dataclass
class Controller:
    """Handles HTTP requests; each handler returns (status code, HttpRespBody)."""

    interfaces: Any
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger(__name__))

    def health_check(self, request):
        """Report that the service is up."""
        return body(None, None)

    def search_movie(self, request):
        """Search by title (s, p) or look up details by IMDb id (i)."""
        req_id = fetch_request_id(request.headers)
        search = request.query.get("s", "")
        page = request.query.get("p", "")
        imdb_id = request.query.get("i", "")

        self.logger.info(REQUEST_TMPL, PERFORM_SEARCH_MOVIE)

        try:
            if search:
                resp = self.interfaces.search_movie(req_id, search, _parse_page(page))
            elif imdb_id:
                resp = self.interfaces.detail_movie(req_id, imdb_id)
            else:
                err = make_error(Status.BAD_REQUEST, ValueError("invalid query input"))
                return body(None, err)
        except Exception as exc:
            self.logger.error(ERROR_TMPL, PERFORM_SEARCH_MOVIE, exc)
            return body(None, exc)

        return body(resp, None)