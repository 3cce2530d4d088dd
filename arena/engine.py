import copy
import logging
from typing import Dict, List, Optional
from .errors import UnknownCommand, UnknownRobotKind
from .model import Command, Event, Identity, Robot, RobotKind, Snapshot

logger = logging.getLogger(__name__)


class BattleRegistry:
    """Owns every robot and moves it between the alive and destroyed pools."""

    def __init__(self):
        self.alive: Dict[Identity, Robot] = {}
        self.destroyed: List[Robot] = []
        self.last_time = 0
        self.rejected = 0

    def find_alive(self, team_id: int, robot_id: int) -> Optional[Robot]:
        """Look up an alive robot by identity only."""
        return self.alive.get((team_id, robot_id))

    def find_destroyed(self, team_id: int, robot_id: int, kind: RobotKind) -> Optional[Robot]:
        """Look up a destroyed robot matching both identity and kind."""
        for r in self.destroyed:
            if r.identity == (team_id, robot_id) and r.kind == kind:
                return r
        return None

    def _destroy(self, robot: Robot, cause: str) -> Event:
        """Relocate a dead robot to the destroyed pool."""
        del self.alive[robot.identity]
        self.destroyed.append(robot)
        logger.debug("Robot %s destroyed (%s) at t=%d", robot.identity, cause, self.last_time)
        return Event("Destroyed", self.last_time,
                     {"team_id": robot.team_id, "robot_id": robot.robot_id, "cause": cause})

    def advance_time(self, current_time: int) -> List[Event]:
        """Decay every alive robot by the elapsed time and collect overheat deaths."""
        evts: List[Event] = []
        if current_time <= self.last_time:
            return evts
        delta = current_time - self.last_time
        self.last_time = current_time

        dead: List[Robot] = []
        for r in self.alive.values():
            r.apply_time_decay(delta)
            if r.is_destroyed():
                dead.append(r)

        # Relocate after the scan so pool order at scan time decides event order
        for r in dead:
            evts.append(self._destroy(r, "overheat"))
        return evts

    def handle_add(self, team_id: int, robot_id: int, kind: RobotKind) -> bool:
        """Spawn a new robot or revive a destroyed one. Returns False if already alive."""
        if self.find_alive(team_id, robot_id) is not None:
            return False

        robot = self.find_destroyed(team_id, robot_id, kind)
        if robot is not None:
            robot.rebuild()
            # Purge every destroyed entry under this identity, whatever its kind
            self.destroyed = [r for r in self.destroyed if r.identity != robot.identity]
            self.alive[robot.identity] = robot
            logger.debug("Robot %s revived as %s level %d", robot.identity, kind.name, robot.level)
            return True

        robot = Robot(team_id=team_id, robot_id=robot_id, kind=kind)
        self.alive[robot.identity] = robot
        logger.debug("Robot %s created as %s", robot.identity, kind.name)
        return True

    def handle_damage(self, team_id: int, robot_id: int, amount: int) -> List[Event]:
        """Damage an alive robot, destroying it when health runs out."""
        robot = self.find_alive(team_id, robot_id)
        if robot is None:
            logger.debug("Ignoring damage for missing robot (%d, %d)", team_id, robot_id)
            return []
        robot.apply_damage(amount)
        if robot.is_destroyed():
            return [self._destroy(robot, "damage")]
        return []

    def handle_heat(self, team_id: int, robot_id: int, amount: int) -> bool:
        robot = self.find_alive(team_id, robot_id)
        if robot is None or robot.kind is not RobotKind.INFANTRY:
            logger.debug("Ignoring heat for (%d, %d)", team_id, robot_id)
            return False
        robot.add_heat(amount)
        return True

    def handle_upgrade(self, team_id: int, robot_id: int, target_level: int) -> bool:
        robot = self.find_alive(team_id, robot_id)
        if robot is None or robot.kind is not RobotKind.INFANTRY:
            logger.debug("Ignoring upgrade for (%d, %d)", team_id, robot_id)
            return False
        return robot.upgrade(target_level)

    def dispatch(self, command: Command) -> List[Event]:
        """Run one command at the current simulated time, ignoring its timestamp.

        Raises UnknownRobotKind for an Add with a bad kind code and
        UnknownCommand for an op outside A/F/H/U.
        """
        if command.op == "A":
            self.handle_add(command.p1, command.p2, RobotKind.decode(command.p3))
        elif command.op == "F":
            return self.handle_damage(command.p1, command.p2, command.p3)
        elif command.op == "H":
            self.handle_heat(command.p1, command.p2, command.p3)
        elif command.op == "U":
            self.handle_upgrade(command.p1, command.p2, command.p3)
        else:
            raise UnknownCommand(command.op)
        return []

    def apply(self, command: Command) -> List[Event]:
        """Advance to the command's time, then run the command.

        Decay deaths for the new timestamp come first in the returned list,
        followed by any death the command itself causes. A command with a bad
        kind code or op is skipped and counted in `rejected`; the decay it
        triggered still stands and its events are still returned.
        """
        evts: List[Event] = []
        evts += self.advance_time(command.time)
        try:
            evts += self.dispatch(command)
        except (UnknownRobotKind, UnknownCommand) as exc:
            self.rejected += 1
            logger.warning("Skipping record at t=%d: %s", command.time, exc)
        return evts

    def snapshot(self) -> Snapshot:
        """Return a copy of both pools."""
        return Snapshot(
            last_time=self.last_time,
            alive=[copy.copy(r) for r in self.alive.values()],
            destroyed=[copy.copy(r) for r in self.destroyed],
        )
