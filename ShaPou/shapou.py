"""
Pygame front-end for ShaPou.
The engine in game_state.py does all the simulation; this module only maps
input onto controller events and draws the snapshot it returns.
"""

import logging
import time
from enum import Enum, auto

import pygame

from constants import *
from assets import AssetLibrary
from game_state import GameModeController
from models import Mood, ModeKind
from sound import SoundManager
from thought_bubble import DialogBubble
from ui_components import ModernRetroButton, StatBar
from washing import SIZE_TO_RADIUS

logger = logging.getLogger(__name__)

MOOD_IMAGES = {
    Mood.NORMAL: "normal-shapou",
    Mood.SAD: "sad-shapou",
    Mood.ANGRY: "angry-shapou",
}
MOOD_TINT = {
    Mood.NORMAL: COLOR_PET_BODY,
    Mood.SAD: (140, 160, 200),
    Mood.ANGRY: (235, 120, 110),
}
ACTION_IMAGES = {
    "walk": "walk-button",
    "feed": "kitchen-button",
    "wash": "wash-button",
    "back": "back-button",
}
DIALOG_KEYS = {
    ModeKind.DIALOG_NOT_HUNGRY: "not_hungry",
    ModeKind.DIALOG_ALREADY_CLEAN: "already_clean",
}


class Screen(Enum):
    MAIN_MENU = auto()
    GAME = auto()


class GameEngine:
    """Window, event loop and drawing. One step() is one frame."""

    def __init__(self, controller=None, sounds=None, assets=None):
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("ShaPou")
        self.clock = pygame.time.Clock()

        self.font_large = pygame.font.Font(None, 48)
        self.font_medium = pygame.font.Font(None, 36)
        self.font_small = pygame.font.Font(None, 24)

        self.assets = assets or AssetLibrary()
        self.sounds = sounds or SoundManager()
        self.controller = controller or GameModeController()
        self.dialog = DialogBubble(self.screen, self.font_medium, self.assets)

        self.screen_state = Screen.MAIN_MENU
        self.running = True
        self.snapshot = self.controller.snapshot()
        self._last_step_time = time.time()

        # Play area for mini-games, between the HUD and the controls
        self.play_rect = pygame.Rect(0, 110, SCREEN_WIDTH, SCREEN_HEIGHT - 110 - 160)

        center_x = SCREEN_WIDTH // 2
        self.menu_buttons = [
            ModernRetroButton(center_x - 150, 420, 300, 80, "Play", RETRO_ORANGE,
                              self._button_image("button", (300, 80)), self.start_game, label_on_image=True),
            ModernRetroButton(center_x - 150, 530, 300, 80, "Exit", RETRO_ORANGE,
                              self._button_image("button", (300, 80)), self.quit, label_on_image=True),
        ]

        self.left_button = ModernRetroButton(40, BUTTON_Y, 60, 60, "<", RETRO_ORANGE,
                                             self._button_image("left-button", (60, 60)))
        self.right_button = ModernRetroButton(SCREEN_WIDTH - 100, BUTTON_Y, 60, 60, ">", RETRO_ORANGE,
                                              self._button_image("right-button", (60, 60)))
        self.action_buttons = {
            action: ModernRetroButton(center_x - BUTTON_WIDTH // 2, BUTTON_Y, BUTTON_WIDTH, BUTTON_HEIGHT,
                                      action.upper(), RETRO_ORANGE,
                                      self._button_image(image, (BUTTON_WIDTH, BUTTON_HEIGHT)),
                                      self.controller.perform_room_action)
            for action, image in ACTION_IMAGES.items()
        }
        self.close_button = ModernRetroButton(SCREEN_WIDTH - 80, 20, 60, 60, "X", RETRO_PINK,
                                              self._button_image("close-button", (60, 60)),
                                              self.controller.close_mini_game)

        icon_size = (40, 40)
        spacing = SCREEN_WIDTH // 3
        self.stat_bars = {
            "emotion": StatBar(spacing // 2 - STAT_BAR_WIDTH // 2, 80, STAT_BAR_WIDTH, STAT_BAR_HEIGHT,
                               self.assets.image("icon-emotion", icon_size, COLOR_EMOTION), COLOR_EMOTION),
            "hunger": StatBar(spacing + spacing // 2 - STAT_BAR_WIDTH // 2, 80, STAT_BAR_WIDTH, STAT_BAR_HEIGHT,
                              self.assets.image("icon-hunger", icon_size, COLOR_HUNGER), COLOR_HUNGER),
            "cleanliness": StatBar(2 * spacing + spacing // 2 - STAT_BAR_WIDTH // 2, 80, STAT_BAR_WIDTH,
                                   STAT_BAR_HEIGHT,
                                   self.assets.image("icon-washing", icon_size, COLOR_CLEANLINESS),
                                   COLOR_CLEANLINESS),
        }

        self.sounds.play(MUSIC_TRACK, looped=True)

    def _button_image(self, name, size):
        return self.assets.image(name, size) if self.assets.has(name) else None

    # ===== Screens =====

    def start_game(self):
        self.screen_state = Screen.GAME
        self.controller.start_session()
        # Music keeps going if the menu already started it
        self.sounds.play(MUSIC_TRACK, looped=True)

    def leave_game(self):
        self.controller.end_session()
        self.screen_state = Screen.MAIN_MENU

    def quit(self):
        logger.info("Exit requested")
        self.running = False

    # ===== Input =====

    def to_normalized(self, pos):
        x = (pos[0] - self.play_rect.x) / self.play_rect.width
        y = (pos[1] - self.play_rect.y) / self.play_rect.height
        return x, y

    def to_screen(self, x, y):
        return (int(self.play_rect.x + x * self.play_rect.width),
                int(self.play_rect.y + y * self.play_rect.height))

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            self.quit()
            return

        if self.screen_state == Screen.MAIN_MENU:
            if event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
                for button in self.menu_buttons:
                    button.handle_event(event.pos, event.type)
            elif event.type == pygame.KEYDOWN and event.key in (pygame.K_RETURN, pygame.K_SPACE):
                self.start_game()
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.quit()
            return

        kind = self.controller.mode.kind
        if self.controller.mode.is_dialog:
            if event.type in (pygame.MOUSEBUTTONUP, pygame.KEYDOWN):
                self.controller.dismiss_dialog()
        elif kind == ModeKind.FEEDING:
            self._handle_feeding_event(event)
        elif kind == ModeKind.WASHING:
            self._handle_washing_event(event)
        else:
            self._handle_browsing_event(event)

    def _handle_browsing_event(self, event):
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_LEFT:
                self.controller.room_previous()
            elif event.key == pygame.K_RIGHT:
                self.controller.room_next()
            elif event.key in (pygame.K_SPACE, pygame.K_RETURN):
                self.controller.perform_room_action()
            elif event.key == pygame.K_ESCAPE:
                self.leave_game()
        elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            if not self.controller.rooms.is_outside:
                if self.left_button.handle_event(event.pos, event.type):
                    self.controller.room_previous()
                if self.right_button.handle_event(event.pos, event.type):
                    self.controller.room_next()
            self.action_buttons[self.controller.rooms.available_action()].handle_event(event.pos, event.type)

    def _handle_feeding_event(self, event):
        if event.type in (pygame.KEYDOWN, pygame.KEYUP):
            held = event.type == pygame.KEYDOWN
            if event.key == pygame.K_LEFT:
                self.controller.move_left(held)
            elif event.key == pygame.K_RIGHT:
                self.controller.move_right(held)
            elif event.key == pygame.K_ESCAPE and held:
                self.controller.close_mini_game()
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if self.left_button.rect.collidepoint(event.pos):
                self.controller.move_left(True)
            elif self.right_button.rect.collidepoint(event.pos):
                self.controller.move_right(True)
            self.close_button.handle_event(event.pos, event.type)
        elif event.type == pygame.MOUSEBUTTONUP:
            # Releasing anywhere ends a hold
            self.controller.move_left(False)
            self.controller.move_right(False)
            self.close_button.handle_event(event.pos, event.type)

    def _handle_washing_event(self, event):
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.controller.close_mini_game()
        elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            if self.action_buttons["back"].rect.collidepoint(event.pos):
                if event.type == pygame.MOUSEBUTTONUP:
                    self.controller.close_mini_game()
                return
            if event.type == pygame.MOUSEBUTTONDOWN:
                aspect = self.play_rect.height / self.play_rect.width
                bubble = self.controller.bubble_at(*self.to_normalized(event.pos), aspect)
                if bubble is not None:
                    self.controller.pop_bubble(bubble.id)

    # ===== Drawing =====

    def draw_background(self, name, fallback):
        self.screen.blit(self.assets.image(name, (SCREEN_WIDTH, SCREEN_HEIGHT), fallback), (0, 0))

    def draw_character(self, center, mood, size=200):
        name = MOOD_IMAGES[mood]
        if self.assets.has(name):
            image = self.assets.image(name, (size, size))
            self.screen.blit(image, image.get_rect(center=center))
            return
        # Egg-shaped fallback with simple eyes
        body = pygame.Rect(0, 0, int(size * 0.7), size)
        body.center = center
        pygame.draw.ellipse(self.screen, MOOD_TINT[mood], body)
        eye_y = center[1] - size // 8
        for dx in (-size // 8, size // 8):
            pygame.draw.circle(self.screen, COLOR_PET_EYES, (center[0] + dx, eye_y), max(3, size // 20))

    def draw_stats(self, names=STAT_NAMES):
        for name in names:
            self.stat_bars[name].draw(self.screen)

    def draw_menu(self):
        self.draw_background("main-game", COLOR_BG)
        title = self.font_large.render("ShaPou", True, RETRO_LIGHT)
        self.screen.blit(title, title.get_rect(center=(SCREEN_WIDTH // 2, 200)))
        for button in self.menu_buttons:
            button.draw(self.screen, self.font_medium)

    def draw_browsing(self, snap):
        if snap.is_outside:
            self.draw_background(OUTSIDE_BACKGROUND, COLOR_OUTSIDE_FALLBACK)
        else:
            self.draw_background(ROOM_BACKGROUNDS[snap.room.name], COLOR_ROOM_FALLBACK)
        self.draw_stats()
        self.draw_character((SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2 + 60), snap.mood, size=300)

        if not snap.is_outside:
            self.left_button.draw(self.screen, self.font_medium)
            self.right_button.draw(self.screen, self.font_medium)
        self.action_buttons[snap.action or self.controller.rooms.available_action()].draw(self.screen, self.font_small)

    def draw_feeding(self, snap):
        self.draw_background("game-kitchen", COLOR_BG)
        self.draw_stats(("hunger",))
        for item in snap.items:
            color = GREEN if item.is_beneficial else RED
            pygame.draw.circle(self.screen, color, self.to_screen(item.x, item.y), 14)
        self.draw_character(self.to_screen(snap.player_x, PLAYER_Y), Mood.NORMAL, size=100)
        self.left_button.draw(self.screen, self.font_medium)
        self.right_button.draw(self.screen, self.font_medium)
        self.close_button.draw(self.screen, self.font_medium)

    def draw_washing(self, snap):
        self.draw_background("game-wash", COLOR_BG)
        self.draw_stats(("cleanliness",))
        self.draw_character(self.to_screen(*CHARACTER_POS), Mood.NORMAL, size=260)
        for bubble in snap.bubbles:
            radius = max(4, int(bubble.size * SIZE_TO_RADIUS * self.play_rect.width))
            center = self.to_screen(bubble.x, bubble.y)
            pygame.draw.circle(self.screen, (200, 230, 255), center, radius)
            pygame.draw.circle(self.screen, WHITE, center, radius, 2)
        self.action_buttons["back"].draw(self.screen, self.font_small)

    def draw(self):
        if self.screen_state == Screen.MAIN_MENU:
            self.draw_menu()
            return
        snap = self.snapshot
        kind = snap.mode.kind
        if kind == ModeKind.FEEDING:
            self.draw_feeding(snap)
        elif kind == ModeKind.WASHING:
            self.draw_washing(snap)
        else:
            # Dialogs sit on top of the room they were opened from
            self.draw_browsing(snap)
            if snap.mode.is_dialog:
                self.dialog.draw(DIALOG_KEYS[kind])

    # ===== Main Loop =====

    def step(self, dt=None):
        """Process one frame: input, engine tick, draw."""
        now = time.time()
        if dt is None:
            dt = min(now - self._last_step_time, 0.1)  # Cap dt to avoid large jumps
        self._last_step_time = now

        for event in pygame.event.get():
            self.handle_event(event)

        if self.screen_state == Screen.GAME:
            self.snapshot = self.controller.tick(dt * TIME_SCALE_FACTOR)
            for name, value in self.snapshot.stats.items():
                self.stat_bars[name].set_value(value)
                self.stat_bars[name].update(dt)

        self.draw()
        pygame.display.flip()
        return self.snapshot

    def run(self):
        """Main game loop"""
        while self.running:
            self.step()
            self.clock.tick(FPS)
        self.controller.end_session()
        self.sounds.stop()
        pygame.quit()


def main():
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    GameEngine().run()


if __name__ == "__main__":
    main()
