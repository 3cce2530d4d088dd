import logging
from typing import Callable, Iterable, List, Optional
from arena.engine import BattleRegistry
from arena.model import Event
from .eventlog import EventLog
from .schemas import CommandIn

logger = logging.getLogger(__name__)


def format_event(evt: Event) -> str:
    """Render a destruction event as an output line."""
    return f"D {evt.data['team_id']} {evt.data['robot_id']}"


class CommandRunner:
    """Synchronous driver that feeds input records to the registry one at a time.

    Every event goes into `events` first; output lines are then written
    from the log, starting at the first offset not yet emitted.
    """

    def __init__(self, registry: BattleRegistry, emit: Optional[Callable[[str], None]] = None):
        self.registry = registry
        self.emit = emit
        self.events = EventLog()
        self.processed = 0
        self._emitted = 0

    @property
    def skipped(self) -> int:
        return self.registry.rejected

    def step(self, record: CommandIn) -> List[Event]:
        """Run one record through the registry and publish its events."""
        evts = self.registry.apply(record.to_command())
        self.processed += 1
        if evts:
            offsets = self.events.record(evts)
            logger.debug("Record %d produced events %d..%d",
                         self.processed, offsets.start, offsets.stop - 1)
        self._flush()
        return evts

    def run(self, records: Iterable[CommandIn]) -> int:
        """Process every record in order. Returns the number of events produced."""
        logger.info("Starting battle")
        start = len(self.events)
        for record in records:
            self.step(record)
        produced = len(self.events) - start
        logger.info("Battle finished: %d records, %d skipped, %d destroyed",
                    self.processed, self.skipped, produced)
        return produced

    def _flush(self) -> None:
        if self.emit is None:
            return
        pending, self._emitted = self.events.since(self._emitted)
        for e in pending:
            self.emit(format_event(e))
