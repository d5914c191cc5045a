from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional


@dataclass(frozen=True)
class Dispensed:
    """A verse was served; the session is now in cooldown."""
    name: str
    phone: Optional[str]
    verse: Any  # passed through to the template unchanged


@dataclass(frozen=True)
class Denied:
    """The session already received a verse inside the window."""
    message: str
    retry_at: Optional[datetime] = None
