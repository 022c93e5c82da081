import math
import random
import logging

from constants import (
    CHARACTER_POS, MAX_BUBBLES, BUBBLE_SPAWN_CHANCE, BUBBLE_MIN_DISTANCE, BUBBLE_MAX_DISTANCE,
    BUBBLE_BOUNDS_X, BUBBLE_BOUNDS_Y, BUBBLE_MIN_SIZE, BUBBLE_MAX_START_SIZE, BUBBLE_RISE_STEP,
    BUBBLE_GROW_STEP, BUBBLE_TOP_LIMIT, BUBBLE_SIZE_LIMIT, BUBBLE_MAX_AGE, BUBBLE_SOIL_PER_TICK,
    BUBBLE_POP_GAIN, MINIGAME_TICK_SECONDS,
)
from models import Bubble

logger = logging.getLogger(__name__)

# Bubble size is in abstract units; this maps it to a hit radius in normalized space
SIZE_TO_RADIUS = 1 / 800.0


class WashingMiniGame:
    def __init__(self, stats, rng=None):
        self.stats = stats
        self.rng = rng or random.Random()
        self.character_pos = CHARACTER_POS
        self.bubbles = []
        self._next_id = 1
        self.popped = 0
        self.expired = 0
        self.is_over = False

    def update(self, dt=MINIGAME_TICK_SECONDS):
        if self.is_over:
            return

        for bubble in self.bubbles:
            bubble.y -= BUBBLE_RISE_STEP
            bubble.size += BUBBLE_GROW_STEP
            bubble.age += dt

        # Unpopped bubbles re-soil Shapou
        if self.bubbles:
            self.stats.decrease("cleanliness", BUBBLE_SOIL_PER_TICK * len(self.bubbles))

        before = len(self.bubbles)
        self.bubbles = [b for b in self.bubbles if not self._expired(b)]
        self.expired += before - len(self.bubbles)

        if len(self.bubbles) < MAX_BUBBLES and self.rng.random() < BUBBLE_SPAWN_CHANCE:
            self.spawn_bubble()

    @staticmethod
    def _expired(bubble):
        return (bubble.y < BUBBLE_TOP_LIMIT
                or bubble.size > BUBBLE_SIZE_LIMIT
                or bubble.age > BUBBLE_MAX_AGE)

    def spawn_bubble(self):
        """Try to place a bubble around the character. Returns None when it lands off-screen."""
        angle = self.rng.uniform(0, 2 * math.pi)
        distance = self.rng.uniform(BUBBLE_MIN_DISTANCE, BUBBLE_MAX_DISTANCE)
        cx, cy = self.character_pos
        x = cx + math.cos(angle) * distance
        y = cy + math.sin(angle) * distance
        if not (BUBBLE_BOUNDS_X[0] < x < BUBBLE_BOUNDS_X[1] and BUBBLE_BOUNDS_Y[0] < y < BUBBLE_BOUNDS_Y[1]):
            return None

        bubble = Bubble(
            id=self._next_id,
            x=x,
            y=y,
            size=self.rng.uniform(BUBBLE_MIN_SIZE, BUBBLE_MAX_START_SIZE),
        )
        self._next_id += 1
        self.bubbles.append(bubble)
        return bubble

    def pop(self, bubble_id) -> bool:
        for i, bubble in enumerate(self.bubbles):
            if bubble.id == bubble_id:
                del self.bubbles[i]
                self.popped += 1
                self.stats.increase("cleanliness", BUBBLE_POP_GAIN)
                logger.debug("Popped bubble #%d (cleanliness %.2f)", bubble_id, self.stats.cleanliness)
                return True
        return False

    def bubble_at(self, x, y, aspect=1.0):
        """
        Topmost bubble under a normalized point, or None.

        Radii are measured in widths, so `aspect` (height / width of the play
        area) stretches the vertical distance to keep the hit area circular.
        """
        for bubble in reversed(self.bubbles):
            if math.hypot(bubble.x - x, (bubble.y - y) * aspect) <= bubble.size * SIZE_TO_RADIUS:
                return bubble
        return None

    def stop(self):
        self.is_over = True
        self.bubbles.clear()
        logger.info("Washing over: popped=%d expired=%d", self.popped, self.expired)
