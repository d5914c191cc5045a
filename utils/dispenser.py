# utils/dispenser.py
from datetime import datetime, timezone
from enum import Enum
import logging
import random

from config import VERSE_WINDOW
from errors import EmptyCollectionError
from models import Dispensed, Denied

logger = logging.getLogger(__name__)

DEFAULT_NAME = "Invité"
LIMIT_MESSAGE = "Vous avez déjà reçu un verset dans les dernières 24 heures. Veuillez réessayer plus tard."


class DispenserState(str, Enum):
    NEVER_DISPENSED = "never_dispensed"
    COOLDOWN = "cooldown"
    ELIGIBLE = "eligible"


def utcnow():
    return datetime.now(timezone.utc)


class VerseDispenser:
    """Serves one random verse per session per window.

    Eligibility is never stored: it is recomputed on every call from the
    session's last dispense time.
    """

    def __init__(self, verse_store, rng=None, clock=None, window=VERSE_WINDOW):
        self.verse_store = verse_store
        self.rng = rng or random
        self.clock = clock or utcnow
        self.window = window

    def next_eligible_at(self, markers):
        last = markers.get()
        if last is None:
            return None
        return last + self.window

    def state(self, markers):
        next_at = self.next_eligible_at(markers)
        if next_at is None:
            return DispenserState.NEVER_DISPENSED
        if self.clock() < next_at:
            return DispenserState.COOLDOWN
        return DispenserState.ELIGIBLE

    def dispense(self, markers, name=None, phone=None):
        """Pick a verse for the session, or deny if it is still in cooldown.

        Args:
            markers: SessionMarkers for the requesting client.
            name: Display name; blank or missing becomes "Invité".
            phone: Passed through as given.

        Returns:
            Dispensed on success, Denied while in cooldown.

        Raises:
            EmptyCollectionError: The verse collection has no entries.
            ParseError: The verse file is malformed.
        """
        if self.state(markers) == DispenserState.COOLDOWN:
            retry_at = self.next_eligible_at(markers)
            logger.info(f"Verse denied, session eligible again at {retry_at.isoformat()}")
            return Denied(message=LIMIT_MESSAGE, retry_at=retry_at)

        user_name = (name or '').strip() or DEFAULT_NAME

        verses = self.verse_store.read_all()
        if not verses:
            logger.error(f"No verses available in {self.verse_store.path}")
            raise EmptyCollectionError("The verse collection is empty")
        verse = self.rng.choice(verses)

        markers.set(self.clock())
        logger.info(f"Dispensed a verse to {user_name}")
        return Dispensed(name=user_name, phone=phone, verse=verse)
