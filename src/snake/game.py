# game.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple, Union
import logging
import threading

import numpy as np  # type: ignore

from . import config
from .config import CFG, Config

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


# ---------- Directions / run state ----------
class Direction(Enum):
    UP = config.UP
    DOWN = config.DOWN
    LEFT = config.LEFT
    RIGHT = config.RIGHT

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return Direction((-self.dx, -self.dy))

    @classmethod
    def parse(cls, value: Union["Direction", str]) -> "Direction":
        """Accept a Direction or its name in any case ("up", "LEFT", ...)."""
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {value!r}") from None


class RunState(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


# ---------- Helpers ----------
def random_cell(rng: np.random.Generator, cfg: Config) -> Cell:
    """Uniform grid cell, each axis sampled independently, aligned to the unit size."""
    gx = int(rng.integers(cfg.cols))
    gy = int(rng.integers(cfg.rows))
    return (gx * cfg.unit_size, gy * cfg.unit_size)


def start_cell(cfg: Config) -> Cell:
    # (650, 400) on the default 1300x750 board: centred, half a unit below the middle
    return ((cfg.cols // 2) * cfg.unit_size, ((cfg.rows + 1) // 2) * cfg.unit_size)


# ---------- Read-only view ----------
@dataclass(frozen=True)
class Snapshot:
    segments: Tuple[Cell, ...]     # head at index 0
    apple: Cell
    score: int
    direction: Direction
    run_state: RunState

    @property
    def head(self) -> Cell:
        return self.segments[0]

    @property
    def running(self) -> bool:
        return self.run_state is RunState.RUNNING


# ---------- State ----------
class GameState:
    """
    Owns the snake, the apple, the score and the run state.

    The body lives in two preallocated integer columns (x and y) with room
    for every cell a live head can reach plus one, so every tick is a single slice shift.
    All public operations take the same re-entrant lock: a timer thread
    calling tick() and an input thread calling set_direction() never see
    each other half-done, and snapshot() is always consistent.
    """

    def __init__(self, config: Optional[Config] = None, rng: Optional[np.random.Generator] = None):
        self.config = config if config is not None else CFG
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self._lock = threading.RLock()

        capacity = self.config.max_segments + 1
        self._x = np.zeros(capacity, dtype=np.int64)
        self._y = np.zeros(capacity, dtype=np.int64)
        self._body_parts = 0
        self._apple: Cell = (0, 0)
        self._score = 0
        self._direction = Direction.RIGHT
        self._pending = Direction.RIGHT
        self._run_state = RunState.RUNNING

        self.reset()

    @classmethod
    def from_segments(
        cls,
        segments: Iterable[Cell],
        direction: Union[Direction, str] = Direction.RIGHT,
        apple: Optional[Cell] = None,
        config: Optional[Config] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> "GameState":
        """
        Build a running game from an explicit body (head first).
        If no apple is given one is placed off the body at random.
        """
        game = cls(config=config, rng=rng)
        cells = [(int(x), int(y)) for x, y in segments]
        unit = game.config.unit_size
        if not cells:
            raise ValueError("a snake needs at least one segment")
        if len(cells) > game.config.max_segments:
            raise ValueError(f"{len(cells)} segments exceed the {game.config.max_segments} cells a live snake can cover")
        for x, y in cells + ([apple] if apple is not None else []):
            if x % unit or y % unit:
                raise ValueError(f"cell {(x, y)} is not aligned to unit size {unit}")

        d = Direction.parse(direction)
        with game._lock:
            n = len(cells)
            game._x[:n] = [x for x, _ in cells]
            game._y[:n] = [y for _, y in cells]
            game._body_parts = n
            game._direction = d
            game._pending = d
            game._score = 0
            game._run_state = RunState.RUNNING
            if apple is None:
                game.place_apple()
            else:
                game._apple = (int(apple[0]), int(apple[1]))
        return game

    # ---------- Operations ----------
    def reset(self) -> None:
        """Start a fresh run: centred head, 6 segments heading right, score 0, new apple."""
        with self._lock:
            unit = self.config.unit_size
            hx, hy = start_cell(self.config)
            n = self.config.initial_length
            self._x[:n] = hx - unit * np.arange(n)
            self._y[:n] = hy
            self._body_parts = n
            self._direction = Direction.RIGHT
            self._pending = Direction.RIGHT
            self._score = 0
            self._run_state = RunState.RUNNING
            self.place_apple()
        logger.debug("reset: head=%s apple=%s", (hx, hy), self._apple)

    def set_direction(self, direction: Union[Direction, str]) -> bool:
        """
        Queue a turn for the next tick. Reversals and input while the game is
        over are ignored. Returns True if the turn was accepted.
        """
        d = Direction.parse(direction)
        with self._lock:
            if self._run_state is RunState.GAME_OVER:
                return False
            if d is self._direction.opposite:
                return False
            self._pending = d
            return True

    def tick(self) -> RunState:
        """Advance one step: move, eat, collide. No-op once the game is over."""
        with self._lock:
            if self._run_state is RunState.GAME_OVER:
                return self._run_state

            # Commit direction once per tick
            self._direction = self._pending
            self._move()
            self._check_apple()
            self._check_collisions()
            return self._run_state

    def place_apple(self) -> Cell:
        """Resample until the apple lands on a cell the body does not cover."""
        with self._lock:
            while True:
                cell = random_cell(self.rng, self.config)
                if not self._occupied(cell):
                    self._apple = cell
                    return cell

    def snapshot(self) -> Snapshot:
        with self._lock:
            return Snapshot(
                segments=self._segments(),
                apple=self._apple,
                score=self._score,
                direction=self._direction,
                run_state=self._run_state,
            )

    # ---------- Accessors ----------
    @property
    def segments(self) -> Tuple[Cell, ...]:
        with self._lock:
            return self._segments()

    @property
    def head(self) -> Cell:
        with self._lock:
            return (int(self._x[0]), int(self._y[0]))

    @property
    def body_parts(self) -> int:
        with self._lock:
            return self._body_parts

    @property
    def apple(self) -> Cell:
        with self._lock:
            return self._apple

    @property
    def score(self) -> int:
        with self._lock:
            return self._score

    @property
    def direction(self) -> Direction:
        with self._lock:
            return self._direction

    @property
    def pending_direction(self) -> Direction:
        with self._lock:
            return self._pending

    @property
    def run_state(self) -> RunState:
        with self._lock:
            return self._run_state

    @property
    def running(self) -> bool:
        with self._lock:
            return self._run_state is RunState.RUNNING

    # ---------- Internals (caller holds the lock) ----------
    def _segments(self) -> Tuple[Cell, ...]:
        n = self._body_parts
        return tuple(zip(self._x[:n].tolist(), self._y[:n].tolist()))

    def _occupied(self, cell: Cell) -> bool:
        n = self._body_parts
        return bool(np.any((self._x[:n] == cell[0]) & (self._y[:n] == cell[1])))

    def _move(self) -> None:
        n = self._body_parts
        # Every segment takes its predecessor's cell; slot n gets the old tail,
        # so a segment added by growth already sits where the tail was.
        self._x[1:n + 1] = self._x[:n].copy()
        self._y[1:n + 1] = self._y[:n].copy()

        unit = self.config.unit_size
        self._x[0] += self._direction.dx * unit
        self._y[0] += self._direction.dy * unit

    def _check_apple(self) -> None:
        if (int(self._x[0]), int(self._y[0])) == self._apple:
            self._body_parts += 1
            self._score += 1
            logger.info("apple eaten at %s, score=%d", self._apple, self._score)
            self.place_apple()

    def _check_collisions(self) -> None:
        hx, hy = int(self._x[0]), int(self._y[0])
        n = self._body_parts
        cfg = self.config

        reason = None
        if np.any((self._x[1:n] == hx) & (self._y[1:n] == hy)):
            reason = "self"
        # Far edge is inclusive: a head sitting exactly on x == width is still alive
        elif hx < 0 or hx > cfg.screen_width or hy < 0 or hy > cfg.screen_height:
            reason = "wall"

        if reason is not None:
            self._run_state = RunState.GAME_OVER
            logger.info("game over (%s) at %s, score=%d", reason, (hx, hy), self._score)
