"""Persistent record of a movie search or detail lookup."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

TABLE_NAME = "search_history"


@dataclass
class SearchHistory:
    """One search request together with the result it produced."""

    id: int = 0
    request_id: str = ""
    search_key: str = ""
    page: int = 0
    result: Any = None
    created_at: Optional[datetime] = None

    def table_name(self):
        """Return the name of the table records are stored in."""
        return TABLE_NAME