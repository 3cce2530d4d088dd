from dataclasses import dataclass, field
from typing import Dict, List, Tuple
from enum import Enum

from .errors import CapabilityError, UnknownRobotKind

Identity = Tuple[int, int]  # (team_id, robot_id)

UINT32_MAX = 2**32 - 1


class RobotKind(Enum):
    """Robot classification, valued by its wire code"""
    INFANTRY = 0
    ENGINEER = 1

    @classmethod
    def decode(cls, code: int) -> "RobotKind":
        """Map a wire code to a kind, rejecting anything outside the closed set."""
        try:
            return cls(code)
        except ValueError:
            raise UnknownRobotKind(code) from None


@dataclass(frozen=True)
class LevelStats:
    """Attribute ceilings for one (kind, level) pair"""
    max_health: int
    max_heat: int


@dataclass(frozen=True)
class KindProfile:
    """Template defining what a robot kind can do"""
    name: str
    can_heat: bool
    can_upgrade: bool
    max_level: int
    levels: Dict[int, LevelStats]
    default_stats: LevelStats

    def stats_for(self, level: int) -> LevelStats:
        return self.levels.get(level, self.default_stats)


ROBOT_KINDS = {
    RobotKind.INFANTRY: KindProfile(
        name="Infantry",
        can_heat=True,
        can_upgrade=True,
        max_level=3,
        levels={
            1: LevelStats(max_health=100, max_heat=100),
            2: LevelStats(max_health=150, max_heat=200),
            3: LevelStats(max_health=250, max_heat=300),
        },
        default_stats=LevelStats(max_health=100, max_heat=100),
    ),
    RobotKind.ENGINEER: KindProfile(
        name="Engineer",
        can_heat=False,
        can_upgrade=False,
        max_level=1,
        levels={},  # Level does not matter for engineers
        default_stats=LevelStats(max_health=300, max_heat=0),
    ),
}


@dataclass
class Robot:
    team_id: int
    robot_id: int
    kind: RobotKind
    level: int = 1
    health: int = 0
    max_health: int = 0
    heat: int = 0
    max_heat: int = 0

    def __post_init__(self):
        self.rebuild()

    @property
    def identity(self) -> Identity:
        return (self.team_id, self.robot_id)

    def get_profile(self) -> KindProfile:
        """Get the KindProfile definition for this robot"""
        return ROBOT_KINDS[self.kind]

    def rebuild(self) -> None:
        """Reset ceilings from (kind, level), then refill health and vent heat."""
        stats = self.get_profile().stats_for(self.level)
        self.max_health = stats.max_health
        self.max_heat = stats.max_heat
        self.health = self.max_health
        self.heat = 0

    def is_destroyed(self) -> bool:
        return self.health == 0

    def apply_time_decay(self, delta: int) -> None:
        """Cool down by delta, then burn health by delta while still overheated."""
        self.heat = max(0, self.heat - delta)
        if self.heat > self.max_heat:
            self.health = max(0, self.health - delta)

    def apply_damage(self, amount: int) -> None:
        self.health = max(0, self.health - amount)

    def add_heat(self, amount: int) -> None:
        profile = self.get_profile()
        if not profile.can_heat:
            raise CapabilityError(profile.name, "add_heat")
        # No cap here; overheat is punished on the next time advance
        self.heat += amount

    def upgrade(self, target_level: int) -> bool:
        """Raise the level and rebuild. Returns False for a non-increasing or out-of-range target."""
        profile = self.get_profile()
        if not profile.can_upgrade:
            raise CapabilityError(profile.name, "upgrade")
        if self.level < target_level <= profile.max_level:
            self.level = target_level
            self.rebuild()
            return True
        return False


@dataclass
class Command:
    time: int
    op: str  # A, F, H or U when well formed
    p1: int
    p2: int
    p3: int


@dataclass
class Event:
    kind: str
    ts: int
    data: Dict


@dataclass
class Snapshot:
    last_time: int
    alive: List[Robot] = field(default_factory=list)
    destroyed: List[Robot] = field(default_factory=list)
