from __future__ import annotations
"""Grid overworld: a 10x10 field of grass with a short path down the middle.

Walking onto grass may start a wild encounter. Movement is clamped to the
grid edges.
"""
from dataclasses import dataclass
from typing import List, Literal, Optional
import random

from monsternav.core.logging import logger

GRID_SIZE = 10
ENCOUNTER_RATE = 0.2

TileType = Literal["grass", "path"]
Direction = Literal["up", "down", "left", "right"]
DIRECTIONS = ("up", "down", "left", "right")


@dataclass(frozen=True)
class Position:
    x: int
    y: int


START = Position(5, 5)


def tile_type(x: int, y: int) -> TileType:
    if x in (4, 5) and 2 <= y <= 7:
        return "path"
    return "grass"


def build_tiles(size: int = GRID_SIZE) -> List[List[TileType]]:
    """Row-major grid: ``tiles[y][x]``."""
    return [[tile_type(x, y) for x in range(size)] for y in range(size)]


def step(pos: Position, direction: str, size: int = GRID_SIZE) -> Position:
    x, y = pos.x, pos.y
    if direction == "up":
        y = max(0, y - 1)
    elif direction == "down":
        y = min(size - 1, y + 1)
    elif direction == "left":
        x = max(0, x - 1)
    elif direction == "right":
        x = min(size - 1, x + 1)
    return Position(x, y)


class Overworld:
    def __init__(self, rng: Optional[random.Random] = None, encounter_rate: float = ENCOUNTER_RATE,
                 start: Position = START):
        self.rng = rng or random.Random()
        self.encounter_rate = encounter_rate
        self.start = start
        self.position = start
        self.tiles = build_tiles()

    def current_tile(self) -> TileType:
        return tile_type(self.position.x, self.position.y)

    def move(self, direction: str) -> bool:
        """Move one cell; returns True if the step triggered an encounter."""
        if direction not in DIRECTIONS:
            logger.debug("UnknownDirection", direction=direction)
            return False
        old = self.position
        self.position = step(old, direction)
        logger.debug("PlayerMoved", direction=direction, x=self.position.x, y=self.position.y)
        if self.current_tile() != "grass":
            return False
        # An edge-blocked step still counts as walking through the grass
        if self.rng.random() < self.encounter_rate:
            logger.info("EncounterTriggered", x=self.position.x, y=self.position.y)
            return True
        return False

    def reset(self):
        self.position = self.start


__all__ = ["GRID_SIZE", "ENCOUNTER_RATE", "START", "Position", "Overworld",
           "tile_type", "build_tiles", "step", "DIRECTIONS"]
