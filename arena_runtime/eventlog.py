from typing import List, Optional, Tuple
from arena.model import Event


class EventLog:
    """Ordered record of every destruction in one battle, read back by offset."""

    def __init__(self):
        self._events: List[Event] = []

    def __len__(self) -> int:
        return len(self._events)

    def record(self, evts: List[Event]) -> range:
        """Store events in arrival order. Returns the offsets they were given."""
        first = len(self._events)
        self._events.extend(evts)
        return range(first, len(self._events))

    def since(self, offset: int, limit: Optional[int] = None) -> Tuple[List[Event], int]:
        """Events from offset onwards (at most limit of them) and the offset to resume from."""
        offset = max(0, offset)
        end = len(self._events) if limit is None else offset + limit
        chunk = self._events[offset:end]
        return chunk, offset + len(chunk)
