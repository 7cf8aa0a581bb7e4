# config.py
from dataclasses import dataclass
from typing import Optional

# ----- Window & grid -----
SCREEN_WIDTH, SCREEN_HEIGHT = 1300, 750
UNIT_SIZE = 50
GRID_W, GRID_H = SCREEN_WIDTH // UNIT_SIZE, SCREEN_HEIGHT // UNIT_SIZE

# ----- Colors -----
BG         = (0, 0, 0)
RED        = (255, 0, 0)
HEAD_GREEN = (0, 255, 0)
BODY_GREEN = (45, 180, 0)

# ----- Fonts & button -----
FONT_NAME = "inkfree"
SCORE_FONT_SIZE = 40
TITLE_FONT_SIZE = 75
BUTTON_FONT_SIZE = 55
BUTTON_W, BUTTON_H = 300, 100

# ----- Directions (dx, dy) in grid units -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None
    tick_ms: int = 175
    initial_length: int = 6
    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT
    unit_size: int = UNIT_SIZE

    def __post_init__(self):
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if self.unit_size <= 0:
            raise ValueError(f"unit_size must be positive, got {self.unit_size}")
        if self.screen_width % self.unit_size or self.screen_height % self.unit_size:
            raise ValueError(
                f"board {self.screen_width}x{self.screen_height} is not a whole "
                f"number of {self.unit_size}px cells"
            )
        # the starting body trails left of the centred head
        if not 1 <= self.initial_length <= self.cols // 2 + 1:
            raise ValueError(
                f"initial_length must be in [1, {self.cols // 2 + 1}], got {self.initial_length}"
            )

    @property
    def cols(self) -> int:
        return self.screen_width // self.unit_size

    @property
    def rows(self) -> int:
        return self.screen_height // self.unit_size

    @property
    def game_units(self) -> int:
        return self.cols * self.rows

    @property
    def max_segments(self) -> int:
        # the far edge is inclusive, so a live body may also cover the extra column and row
        return (self.cols + 1) * (self.rows + 1)


CFG = Config()
