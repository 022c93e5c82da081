import pygame
from typing import Tuple, Optional, Callable
from constants import (
    RETRO_SHADOW, RETRO_DARK, RETRO_LIGHT, BUTTON_SHADOW_OFFSET, BUTTON_BORDER_RADIUS,
    BUTTON_GLASS_ALPHA, BUTTON_BORDER_WIDTH, STAT_BAR_BORDER_RADIUS,
)


class ModernRetroButton:
    """Touch-friendly button; uses its image when the asset exists, otherwise a drawn block"""

    def __init__(self, x: int, y: int, width: int, height: int,
                 text: str, color: Tuple[int, int, int],
                 image: Optional[pygame.Surface] = None,
                 on_click: Optional[Callable] = None,
                 label_on_image: bool = False):
        self.rect = pygame.Rect(x, y, width, height)
        self.text = text
        self.color = color
        self.image = image
        self.on_click = on_click
        self.label_on_image = label_on_image
        self.pressed = False

    def draw(self, surface: pygame.Surface, font: pygame.font.Font):
        # Button press offset
        offset = 3 if self.pressed else 0
        draw_rect = self.rect.move(offset, offset)

        if self.image is not None:
            surface.blit(self.image, draw_rect)
            if self.label_on_image:
                text_surface = font.render(self.text, True, RETRO_DARK)
                surface.blit(text_surface, text_surface.get_rect(center=draw_rect.center))
            return

        # Shadow
        shadow_rect = self.rect.move(BUTTON_SHADOW_OFFSET, BUTTON_SHADOW_OFFSET)
        pygame.draw.rect(surface, RETRO_SHADOW, shadow_rect, border_radius=BUTTON_BORDER_RADIUS)

        # Dark base with a light top half
        dark_colour = tuple(max(0, c - 30) for c in self.color)
        pygame.draw.rect(surface, dark_colour, draw_rect, border_radius=BUTTON_BORDER_RADIUS)
        gradient_rect = draw_rect.copy()
        gradient_rect.height //= 2
        light_colour = tuple(min(255, c + 20) for c in self.color)
        pygame.draw.rect(surface, light_colour, gradient_rect, border_radius=BUTTON_BORDER_RADIUS)

        # Glass overlay
        glass_surface = pygame.Surface((draw_rect.width - 8, draw_rect.height // 3), pygame.SRCALPHA)
        glass_surface.fill((255, 255, 255, BUTTON_GLASS_ALPHA))
        surface.blit(glass_surface, (draw_rect.x + 4, draw_rect.y + 4))

        pygame.draw.rect(surface, RETRO_DARK, draw_rect, BUTTON_BORDER_WIDTH, border_radius=BUTTON_BORDER_RADIUS)

        text_surface = font.render(self.text, True, RETRO_DARK)
        surface.blit(text_surface, text_surface.get_rect(center=draw_rect.center))

    def handle_event(self, pos: Tuple[int, int], event_type: int) -> bool:
        """Fires on release inside the button, like a real tap"""
        if event_type == pygame.MOUSEBUTTONDOWN:
            if self.rect.collidepoint(pos):
                self.pressed = True
        elif event_type == pygame.MOUSEBUTTONUP:
            if self.pressed and self.rect.collidepoint(pos):
                self.pressed = False
                if self.on_click:
                    self.on_click()
                return True
            self.pressed = False
        return False


class StatBar:
    """Icon plus a 0..1 progress bar that eases toward its target value"""

    def __init__(self, x: int, y: int, width: int, height: int,
                 icon: pygame.Surface, color: Tuple[int, int, int]):
        self.rect = pygame.Rect(x, y, width, height)
        self.icon = icon
        self.color = color
        self.target_value = 1.0
        self.current_value = 1.0

    def set_value(self, value: float):
        self.target_value = max(0.0, min(1.0, value))

    def update(self, dt: float):
        if abs(self.current_value - self.target_value) > 0.001:
            self.current_value += (self.target_value - self.current_value) * min(1.0, 8 * dt)
        else:
            self.current_value = self.target_value

    def draw(self, surface: pygame.Surface):
        surface.blit(self.icon, (self.rect.centerx - self.icon.get_width() // 2,
                                 self.rect.y - self.icon.get_height() - 8))

        pygame.draw.rect(surface, RETRO_SHADOW, self.rect, border_radius=STAT_BAR_BORDER_RADIUS)
        fill_width = int(self.current_value * (self.rect.width - 4))
        if fill_width > 0:
            fill_rect = pygame.Rect(self.rect.x + 2, self.rect.y + 2, fill_width, self.rect.height - 4)
            pygame.draw.rect(surface, self.color, fill_rect, border_radius=STAT_BAR_BORDER_RADIUS - 2)
        pygame.draw.rect(surface, RETRO_LIGHT, self.rect, 1, border_radius=STAT_BAR_BORDER_RADIUS)
