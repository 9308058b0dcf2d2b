"""Ranked queue type enumeration."""
from enum import Enum
from typing import Optional


class QueueType(Enum):
    """The two ranked queues a profile surfaces.

    Values are the strings the league endpoint uses in ``queueType``.
    """

    RANKED_SOLO_5x5 = "RANKED_SOLO_5x5"  # Solo/Duo Queue
    RANKED_FLEX_SR = "RANKED_FLEX_SR"    # Flex 5v5 Queue

    @property
    def queue_id(self) -> int:
        """Numeric queue id as it appears in match details."""
        return 420 if self == QueueType.RANKED_SOLO_5x5 else 440

    @property
    def queue_name(self) -> str:
        """Human-readable queue name."""
        return "Ranked Solo/Duo" if self == QueueType.RANKED_SOLO_5x5 else "Ranked Flex"

    @classmethod
    def from_api_name(cls, name: Optional[str]) -> Optional['QueueType']:
        """Map a league-entry ``queueType``; anything else (TFT, Arena...) is None."""
        if not name:
            return None
        try:
            return cls(name)
        except ValueError:
            return None

    @classmethod
    def ranked_queues(cls) -> list['QueueType']:
        return [cls.RANKED_SOLO_5x5, cls.RANKED_FLEX_SR]
