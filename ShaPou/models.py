from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional

from constants import DECAY_PER_SECOND, SAD_THRESHOLD, STAT_NAMES, STAT_START


class Room(Enum):
    MAIN = 0
    KITCHEN = 1
    BATHROOM = 2


class Mood(Enum):
    NORMAL = auto()
    SAD = auto()
    ANGRY = auto()


class ModeKind(Enum):
    BROWSING = auto()
    FEEDING = auto()
    WASHING = auto()
    DIALOG_NOT_HUNGRY = auto()
    DIALOG_ALREADY_CLEAN = auto()


@dataclass(frozen=True)
class Mode:
    """
    The single active screen. Only BROWSING carries a room/outside payload,
    so two mini-games can never be open at once.
    """
    kind: ModeKind
    room: Optional[Room] = None
    is_outside: bool = False

    @classmethod
    def browsing(cls, room: Room, is_outside: bool = False):
        return cls(ModeKind.BROWSING, room, is_outside)

    @classmethod
    def feeding(cls):
        return cls(ModeKind.FEEDING)

    @classmethod
    def washing(cls):
        return cls(ModeKind.WASHING)

    @classmethod
    def not_hungry(cls):
        return cls(ModeKind.DIALOG_NOT_HUNGRY)

    @classmethod
    def already_clean(cls):
        return cls(ModeKind.DIALOG_ALREADY_CLEAN)

    @property
    def is_dialog(self):
        return self.kind in (ModeKind.DIALOG_NOT_HUNGRY, ModeKind.DIALOG_ALREADY_CLEAN)

    @property
    def is_minigame(self):
        return self.kind in (ModeKind.FEEDING, ModeKind.WASHING)


@dataclass
class FallingItem:
    id: int
    x: float
    y: float
    is_beneficial: bool
    kind: str


@dataclass
class Bubble:
    id: int
    x: float
    y: float
    size: float
    age: float = 0.0


def clamp(value):
    return max(0.0, min(1.0, value))


@dataclass
class StatEngine:
    """Uses a linear decay model: Vt = V0 - (r * dt), clamped to [0, 1]."""
    emotion: float = STAT_START
    hunger: float = STAT_START  # 1 = Full, 0 = Starving
    cleanliness: float = STAT_START
    decay_rate: float = DECAY_PER_SECOND

    def __post_init__(self):
        for name in STAT_NAMES:
            setattr(self, name, clamp(getattr(self, name)))

    def _check(self, name):
        if name not in STAT_NAMES:
            raise KeyError(f"Unknown stat '{name}'")

    def increase(self, name: str, amount: float):
        self._check(name)
        setattr(self, name, clamp(getattr(self, name) + amount))
        return getattr(self, name)

    def decrease(self, name: str, amount: float):
        self._check(name)
        setattr(self, name, clamp(getattr(self, name) - amount))
        return getattr(self, name)

    def adjust(self, name: str, delta: float):
        """Apply a signed change; the result always stays inside [0, 1]."""
        if delta >= 0:
            return self.increase(name, delta)
        return self.decrease(name, -delta)

    def tick(self, dt: float):
        """Passive decay for dt seconds of real time."""
        if dt < 0:
            raise ValueError("dt must be non-negative")
        loss = self.decay_rate * dt
        for name in STAT_NAMES:
            self.decrease(name, loss)

    def values(self):
        return {name: getattr(self, name) for name in STAT_NAMES}

    def mood(self) -> Mood:
        values = self.values().values()
        if any(v == 0.0 for v in values):
            return Mood.ANGRY
        if min(values) <= SAD_THRESHOLD:
            return Mood.SAD
        return Mood.NORMAL
