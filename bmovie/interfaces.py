"""Entry points shared by the HTTP and RPC front ends."""

from dataclasses import dataclass
from typing import Any


@dataclass
class SearchInterfaces:
    """Forwards search requests to the application layer."""

    application: Any

    def search_movie(self, req_id, search_key, page):
        """Search movies by title."""
        return self.application.list_movie_by_title(req_id, search_key, page)

    def detail_movie(self, req_id, search_key):
        """Look up a movie's details by IMDb id."""
        return self.application.movie_detail_by_imdb_id(req_id, search_key)