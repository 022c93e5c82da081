import math
import random
import logging

from constants import (
    PADDLE_START, PADDLE_MIN, PADDLE_MAX, PADDLE_SPEED, PLAYER_Y, COLLISION_RADIUS,
    FOOD_FALL_STEP, FOOD_SPEED_MULTIPLIER, FOOD_SPAWN_CHANCE, FOOD_GOOD_CHANCE,
    FOOD_SPAWN_MIN_X, FOOD_SPAWN_MAX_X, FOOD_HUNGER_GAIN, HAZARD_EMOTION_LOSS,
    HAZARD_KIND, GOOD_FOODS,
)
from models import FallingItem

logger = logging.getLogger(__name__)


class FeedingMiniGame:
    """
    A mini-game where the player moves Shapou left and right to catch falling food.
    Good food refills hunger, bombs hurt emotion. Coordinates are normalized:
    x in [0, 1] left to right, y in [0, 1] top to bottom.
    """
    def __init__(self, stats, speed_multiplier=FOOD_SPEED_MULTIPLIER, rng=None):
        self.stats = stats
        self.speed_multiplier = speed_multiplier
        self.rng = rng or random.Random()

        self.player_x = PADDLE_START
        self.moving_left = False
        self.moving_right = False

        self.items = []
        self._next_id = 1

        self.caught = 0
        self.hazards_hit = 0
        self.missed = 0
        self.is_over = False

    def move_left(self, active: bool):
        self.moving_left = active

    def move_right(self, active: bool):
        self.moving_right = active

    def update(self, dt=None):
        """One fixed step of the game loop."""
        if self.is_over:
            return

        # Player movement
        if self.moving_left:
            self.player_x = max(PADDLE_MIN, self.player_x - PADDLE_SPEED)
        if self.moving_right:
            self.player_x = min(PADDLE_MAX, self.player_x + PADDLE_SPEED)

        # Falling food
        step = FOOD_FALL_STEP * self.speed_multiplier
        for item in self.items:
            item.y += step

        before = len(self.items)
        self.items = [item for item in self.items if item.y <= 1.0]
        self.missed += before - len(self.items)

        self.check_collisions()

        if self.rng.random() < FOOD_SPAWN_CHANCE:
            self.spawn_food()

    def check_collisions(self):
        remaining = []
        for item in self.items:
            distance = math.hypot(item.x - self.player_x, item.y - PLAYER_Y)
            if distance >= COLLISION_RADIUS:
                remaining.append(item)
                continue
            if item.is_beneficial:
                self.caught += 1
                self.stats.increase("hunger", FOOD_HUNGER_GAIN)
            else:
                self.hazards_hit += 1
                self.stats.decrease("emotion", HAZARD_EMOTION_LOSS)
            logger.debug("Caught %s #%d at x=%.2f", item.kind, item.id, item.x)
        self.items = remaining

    def spawn_food(self):
        is_good = self.rng.random() < FOOD_GOOD_CHANCE
        kind = self.rng.choice(GOOD_FOODS) if is_good else HAZARD_KIND
        item = FallingItem(
            id=self._next_id,
            x=self.rng.uniform(FOOD_SPAWN_MIN_X, FOOD_SPAWN_MAX_X),
            y=0.0,
            is_beneficial=is_good,
            kind=kind,
        )
        self._next_id += 1
        self.items.append(item)
        return item

    def stop(self):
        self.is_over = True
        self.items.clear()
        self.moving_left = self.moving_right = False
        logger.info("Feeding over: caught=%d hazards=%d missed=%d", self.caught, self.hazards_hit, self.missed)
