import pygame

from constants import COLOR_DIALOG, COLOR_DIALOG_BORDER, COLOR_MESSAGE_BOX_BG, RETRO_DARK

DIALOG_TEXT = {
    "not_hungry": "Thanks, I'm not hungry",
    "already_clean": "I'M CLEAN!",
}
DIALOG_IMAGES = {
    "not_hungry": "nothungry-dialog",
    "already_clean": "wash-dialog",
}


class DialogBubble:
    """Modal speech bubble drawn over a dimmed screen. Any tap dismisses it."""

    def __init__(self, screen, font, assets):
        self.screen = screen
        self.font = font
        self.assets = assets
        self.padding = 20
        self.border_radius = 20

    def draw(self, key):
        width, height = self.screen.get_size()

        dim = pygame.Surface((width, height), pygame.SRCALPHA)
        dim.fill(COLOR_MESSAGE_BOX_BG)
        self.screen.blit(dim, (0, 0))

        if self.assets.has(DIALOG_IMAGES[key]):
            image = self.assets.image(DIALOG_IMAGES[key], (width * 3 // 4, height // 3))
            self.screen.blit(image, image.get_rect(center=(width // 2, height // 2)))
            return

        text_surf = self.font.render(DIALOG_TEXT[key], True, RETRO_DARK)
        bubble_rect = text_surf.get_rect(center=(width // 2, height // 2)).inflate(2 * self.padding, 2 * self.padding)
        pygame.draw.rect(self.screen, COLOR_DIALOG, bubble_rect, border_radius=self.border_radius)
        pygame.draw.rect(self.screen, COLOR_DIALOG_BORDER, bubble_rect, 3, border_radius=self.border_radius)
        self.screen.blit(text_surf, text_surf.get_rect(center=bubble_rect.center))
