import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from constants import (
    AMBIENT_TICK_SECONDS, MINIGAME_TICK_SECONDS, NOT_HUNGRY_THRESHOLD,
    ALREADY_CLEAN_THRESHOLD, DIALOG_TIMEOUT_SECONDS, FOOD_SPEED_MULTIPLIER,
)
from models import Mode, ModeKind, Mood, Room, StatEngine, FallingItem, Bubble
from rooms import RoomNavigator
from ticker import Ticker
from minigames import FeedingMiniGame
from washing import WashingMiniGame

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the engine handed to the presentation layer each tick."""
    stats: dict
    mood: Mood
    mode: Mode
    room: Room
    is_outside: bool
    action: Optional[str] = None
    player_x: Optional[float] = None
    items: Tuple[FallingItem, ...] = ()
    bubbles: Tuple[Bubble, ...] = ()


class GameModeController:
    """
    Top-level state machine for one play session.

    Browsing -> Feeding/Washing or one of the two "no thanks" dialogs, and back.
    All input events are total: calling one that does not apply to the current
    mode does nothing.
    """

    def __init__(self, stats=None, rng=None, food_speed=FOOD_SPEED_MULTIPLIER,
                 dialog_timeout=DIALOG_TIMEOUT_SECONDS):
        self.stats = stats or StatEngine()
        self.rooms = RoomNavigator(self.stats)
        self.ticker = Ticker()
        self.rng = rng
        self.food_speed = food_speed
        self.dialog_timeout = dialog_timeout

        self.mode = Mode.browsing(self.rooms.room, self.rooms.is_outside)
        self.minigame = None
        self.session_open = False
        self._ambient_timer = None
        self._minigame_timer = None
        self._dialog_elapsed = 0.0

    # ===== Session =====

    def start_session(self):
        if self.session_open:
            return
        self.session_open = True
        if self.minigame is None:
            self._resume_decay()
        elif self._minigame_timer is None:
            self._minigame_timer = self.ticker.schedule(self.mode.kind.name.lower(), MINIGAME_TICK_SECONDS,
                                                        self.minigame.update)
        logger.info("Session started")

    def end_session(self):
        """Leave the game screen. The next session starts from a fresh pet in the main room."""
        if not self.session_open:
            return
        self._stop_minigame()
        self.ticker.cancel_all()
        self._ambient_timer = None
        self.session_open = False
        self.stats = StatEngine(decay_rate=self.stats.decay_rate)
        self.rooms = RoomNavigator(self.stats)
        self._set_mode(Mode.browsing(self.rooms.room, self.rooms.is_outside))
        logger.info("Session ended")

    # ===== Ambient decay =====

    def _resume_decay(self):
        if self.session_open and self._ambient_timer is None:
            self._ambient_timer = self.ticker.schedule("ambient-decay", AMBIENT_TICK_SECONDS, self.stats.tick)

    def _pause_decay(self):
        # Mini-games replace the room view, and decay only runs behind the room view
        if self._ambient_timer is not None:
            self._ambient_timer.cancel()
            self._ambient_timer = None

    # ===== Mode plumbing =====

    def _set_mode(self, mode):
        if mode != self.mode:
            logger.info("Mode %s -> %s", self.mode.kind.name, mode.kind.name)
        self.mode = mode
        self._dialog_elapsed = 0.0

    def _browse(self):
        self._set_mode(Mode.browsing(self.rooms.room, self.rooms.is_outside))

    def _start_minigame(self, game, mode):
        self.minigame = game
        self._pause_decay()
        if self.session_open:
            self._minigame_timer = self.ticker.schedule(mode.kind.name.lower(), MINIGAME_TICK_SECONDS, game.update)
        self._set_mode(mode)

    def _stop_minigame(self):
        if self._minigame_timer is not None:
            self._minigame_timer.cancel()
            self._minigame_timer = None
        if self.minigame is not None:
            self.minigame.stop()
            self.minigame = None

    # ===== Input events =====

    def room_next(self):
        if self.mode.kind == ModeKind.BROWSING:
            self.rooms.next()
            self._browse()

    def room_previous(self):
        if self.mode.kind == ModeKind.BROWSING:
            self.rooms.previous()
            self._browse()

    def go_outside(self):
        if self.mode.kind == ModeKind.BROWSING and self.rooms.go_outside():
            self._browse()

    def return_inside(self):
        if self.mode.kind == ModeKind.BROWSING and self.rooms.return_inside():
            self._browse()

    def perform_room_action(self):
        if self.mode.kind != ModeKind.BROWSING:
            return
        if self.rooms.is_outside:
            self.return_inside()
        elif self.rooms.room == Room.MAIN:
            self.go_outside()
        elif self.rooms.room == Room.KITCHEN:
            if self.stats.hunger > NOT_HUNGRY_THRESHOLD:
                self._set_mode(Mode.not_hungry())
            else:
                self._start_minigame(FeedingMiniGame(self.stats, self.food_speed, self.rng), Mode.feeding())
        elif self.rooms.room == Room.BATHROOM:
            if self.stats.cleanliness > ALREADY_CLEAN_THRESHOLD:
                self._set_mode(Mode.already_clean())
            else:
                self._start_minigame(WashingMiniGame(self.stats, self.rng), Mode.washing())

    def close_mini_game(self):
        if not self.mode.is_minigame:
            return
        self._stop_minigame()
        self._resume_decay()
        self._browse()

    def dismiss_dialog(self):
        if self.mode.is_dialog:
            self._browse()

    def move_left(self, active: bool):
        if self.mode.kind == ModeKind.FEEDING:
            self.minigame.move_left(active)

    def move_right(self, active: bool):
        if self.mode.kind == ModeKind.FEEDING:
            self.minigame.move_right(active)

    def pop_bubble(self, bubble_id) -> bool:
        if self.mode.kind != ModeKind.WASHING:
            return False
        return self.minigame.pop(bubble_id)

    def bubble_at(self, x, y, aspect=1.0):
        if self.mode.kind != ModeKind.WASHING:
            return None
        return self.minigame.bubble_at(x, y, aspect)

    # ===== Loop =====

    def tick(self, dt: float) -> Snapshot:
        """Advance the session by dt seconds and return the resulting snapshot."""
        if not self.session_open:
            return self.snapshot()
        self.ticker.advance(dt)
        if self.mode.is_dialog:
            self._dialog_elapsed += dt
            if self._dialog_elapsed >= self.dialog_timeout:
                self._browse()
        return self.snapshot()

    def snapshot(self) -> Snapshot:
        snap = Snapshot(
            stats=self.stats.values(),
            mood=self.stats.mood(),
            mode=self.mode,
            room=self.rooms.room,
            is_outside=self.rooms.is_outside,
        )
        if self.mode.kind == ModeKind.BROWSING:
            return replace(snap, action=self.rooms.available_action())
        if self.mode.kind == ModeKind.FEEDING:
            return replace(snap, player_x=self.minigame.player_x,
                           items=tuple(replace(i) for i in self.minigame.items))
        if self.mode.kind == ModeKind.WASHING:
            return replace(snap, bubbles=tuple(replace(b) for b in self.minigame.bubbles))
        return snap
