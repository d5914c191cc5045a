# utils/request_log.py
import logging

from models import PrayerRequest
from .dispenser import utcnow

logger = logging.getLogger(__name__)


class RequestLogger:
    def __init__(self, request_store, clock=None):
        self.request_store = request_store
        self.clock = clock or utcnow

    def log_request(self, name, phone, prayer):
        """Append a prayer request and return its submission timestamp.

        Raises:
            StoreWriteError: The request file could not be rewritten.
            ParseError: The existing request file is malformed.
        """
        submitted_at = self.clock().isoformat()
        entry = PrayerRequest(
            name=(name or '').strip(),
            phone=(phone or '').strip(),
            prayer=(prayer or '').strip(),
            submitted_at=submitted_at
        )
        records = self.request_store.append(entry.to_json())
        logger.info(f"Recorded prayer request #{len(records)} from {entry.name or 'anonymous'}")
        return submitted_at
