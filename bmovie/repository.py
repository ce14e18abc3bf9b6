"""Storage of search history records."""

import logging
from dataclasses import dataclass, field

from bmovie.utils import X_REQUEST_ID


@dataclass
class Repository:
    """Stores search history records."""

    logger: logging.Logger = field(default_factory=lambda: logging.getLogger(__name__))

    def store(self, req_id, obj):
        """Store obj for the request req_id.

        Records are not persisted; the call only logs them at debug level.
        """
        log = logging.LoggerAdapter(self.logger, {"fields": {X_REQUEST_ID: req_id}})
        log.debug("store record %r", obj)