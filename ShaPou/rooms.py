import logging

from constants import OUTSIDE_EMOTION_BONUS
from models import Room

logger = logging.getLogger(__name__)

ROOMS = list(Room)


class RoomNavigator:
    """Cyclic cursor over the rooms plus the 'outside' flag.

    While outside, room switching is suppressed; the only way back is
    return_inside(), which always lands in the main room.
    """

    def __init__(self, stats):
        self.stats = stats
        self.index = 0
        self.is_outside = False

    @property
    def room(self) -> Room:
        return ROOMS[self.index]

    def next(self):
        if self.is_outside:
            return self.room
        self.index = (self.index + 1) % len(ROOMS)
        logger.debug("Room -> %s", self.room.name)
        return self.room

    def previous(self):
        if self.is_outside:
            return self.room
        self.index = (self.index - 1) % len(ROOMS)
        logger.debug("Room -> %s", self.room.name)
        return self.room

    def go_outside(self) -> bool:
        if self.is_outside or self.room != Room.MAIN:
            return False
        self.is_outside = True
        self.stats.increase("emotion", OUTSIDE_EMOTION_BONUS)
        logger.info("Going outside (emotion %.2f)", self.stats.emotion)
        return True

    def return_inside(self) -> bool:
        if not self.is_outside:
            return False
        self.is_outside = False
        self.index = 0
        logger.info("Back inside")
        return True

    def available_action(self):
        """Name of the single action button the current location offers."""
        if self.is_outside:
            return "back"
        return {Room.MAIN: "walk", Room.KITCHEN: "feed", Room.BATHROOM: "wash"}[self.room]
