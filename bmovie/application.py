"""Movie search use cases."""

from dataclasses import dataclass
from typing import Any

from bmovie.model import SearchHistory


@dataclass
class Application:
    """Queries the movie database client and records every result.

    The client provides search_movie(req_id, search_key, page) and
    search_movie_by_imdb_id(req_id, search_key); the repository provides
    store(req_id, obj).
    """

    repository: Any
    omdb_client: Any

    def list_movie_by_title(self, req_id, search_key, page):
        """Search movies by title and store the result."""
        resp = self.omdb_client.search_movie(req_id, search_key, page)
        record = SearchHistory(
            request_id=req_id, search_key=search_key, page=page, result=resp
        )
        self.repository.store(req_id, record)
        return record

    def movie_detail_by_imdb_id(self, req_id, search_key):
        """Fetch a movie's details by IMDb id and store the result."""
        resp = self.omdb_client.search_movie_by_imdb_id(req_id, search_key)
        record = SearchHistory(request_id=req_id, search_key=search_key, result=resp)
        self.repository.store(req_id, record)
        return record