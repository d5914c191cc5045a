# utils/session_markers.py
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)

LAST_VERSE_KEY = 'lastVerseTime'


class SessionMarkers:
    """Read and write the dispense marker kept in a per-client session.

    *session* is any mutable mapping: Flask's ``session`` in requests, a plain
    dict in tests.
    """

    def __init__(self, session):
        self._session = session

    def get(self):
        """Return the last dispense time as an aware datetime, or None."""
        value = self._session.get(LAST_VERSE_KEY)
        if not value:
            return None
        try:
            when = datetime.fromisoformat(value)
        except (TypeError, ValueError):
            logger.warning(f"Ignoring unparseable {LAST_VERSE_KEY} marker: {value!r}")
            return None
        if when.tzinfo is None:
            when = when.replace(tzinfo=timezone.utc)
        return when

    def set(self, when):
        self._session[LAST_VERSE_KEY] = when.isoformat()
        # Flask sessions expire with PERMANENT_SESSION_LIFETIME only when permanent
        if hasattr(self._session, 'permanent'):
            self._session.permanent = True
