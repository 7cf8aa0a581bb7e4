# render.py
from typing import Optional, Tuple
import pygame  # type: ignore

from .config import (
    CFG, Config,
    BG, RED, HEAD_GREEN, BODY_GREEN,
    FONT_NAME, SCORE_FONT_SIZE, TITLE_FONT_SIZE, BUTTON_FONT_SIZE,
    BUTTON_W, BUTTON_H,
)
from .game import Snapshot


class Renderer:
    """
    Draws a Snapshot onto a pygame surface.

    Reads game state only. The "New Game" button is a fixed rect computed
    here once; clicks on it are handled by the host loop via button_hit().
    """

    def __init__(self, surface: pygame.Surface, config: Optional[Config] = None):
        self.surface = surface
        self.config = config if config is not None else CFG

        if not pygame.font.get_init():
            pygame.font.init()
        # SysFont falls back to the default font when Ink Free is missing
        self.score_font = pygame.font.SysFont(FONT_NAME, SCORE_FONT_SIZE, bold=True)
        self.title_font = pygame.font.SysFont(FONT_NAME, TITLE_FONT_SIZE, bold=True)
        self.button_font = pygame.font.SysFont(FONT_NAME, BUTTON_FONT_SIZE, bold=True)

        w, h = self.config.screen_width, self.config.screen_height
        self.button_rect = pygame.Rect(w // 2 - BUTTON_W // 2, h // 2 + 25, BUTTON_W, BUTTON_H)

    def button_hit(self, pos: Tuple[int, int]) -> bool:
        return bool(self.button_rect.collidepoint(pos))

    def draw(self, snap: Snapshot) -> None:
        self.surface.fill(BG)
        if snap.running:
            self.draw_board(snap)
            self.draw_score(snap.score)
        else:
            self.draw_game_over(snap.score)

    def draw_board(self, snap: Snapshot) -> None:
        unit = self.config.unit_size
        # apple
        pygame.draw.ellipse(self.surface, RED, pygame.Rect(snap.apple[0], snap.apple[1], unit, unit))
        # snake, head brighter than body
        for i, (x, y) in enumerate(snap.segments):
            color = HEAD_GREEN if i == 0 else BODY_GREEN
            pygame.draw.rect(self.surface, color, pygame.Rect(x, y, unit, unit))

    def draw_score(self, score: int) -> None:
        txt = self.score_font.render(f"Score: {score}", True, RED)
        rect = txt.get_rect(midtop=(self.config.screen_width // 2, 0))
        self.surface.blit(txt, rect)

    def draw_game_over(self, score: int) -> None:
        w, h = self.config.screen_width, self.config.screen_height
        self.draw_score(score)

        title = self.title_font.render("Game Over", True, RED)
        self.surface.blit(title, title.get_rect(midbottom=(w // 2, h // 2)))

        pygame.draw.rect(self.surface, BG, self.button_rect)
        label = self.button_font.render("New Game", True, RED)
        self.surface.blit(label, label.get_rect(center=self.button_rect.center))
