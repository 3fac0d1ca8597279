"""Player movement and game state."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from foxmaze.gamemap import (
    COLLECTABLE,
    ENEMY,
    EXIT,
    FLOOR,
    PLAYER,
    WALL,
    GameMap,
    Position,
)
from foxmaze.printf import printf

ESCAPE_KEYS = frozenset({53, 27})


class Direction(Enum):
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def vertical(self) -> bool:
        return self in (Direction.UP, Direction.DOWN)


class GameStatus(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"
    QUIT = "quit"


_KEYS = {
    Direction.UP: (13, 119, 87),
    Direction.DOWN: (1, 115, 83),
    Direction.LEFT: (0, 97, 65),
    Direction.RIGHT: (2, 100, 68),
}
_KEY_TO_DIRECTION = {code: direction for direction, codes in _KEYS.items() for code in codes}


def direction_for_key(keycode: int) -> Optional[Direction]:
    """Return the direction bound to ``keycode``, or None."""
    return _KEY_TO_DIRECTION.get(keycode)


class Game:
    """Tracks the player on a map, the steps taken and the collectables left."""

    def __init__(self, game_map: GameMap) -> None:
        self.game_map = game_map
        self.position: Position = game_map.find_player()
        self.collectables = sum(row.count(COLLECTABLE) for row in game_map.grid)
        self.steps = 0
        self.facing = Direction.RIGHT
        self.status = GameStatus.PLAYING

    def _tile(self, pos: Position) -> str:
        try:
            return self.game_map[pos]
        except IndexError:
            return WALL

    def move(self, direction: Direction) -> bool:
        """Try to step one tile; return True when the game state changed."""
        if self.status is not GameStatus.PLAYING:
            return False
        self.facing = direction
        start = self.position
        d_row, d_col = direction.value
        target = Position(start.row + d_row, start.col + d_col)
        tile = self._tile(target)
        if tile == WALL:
            return False
        if tile == EXIT:
            if self.collectables:
                return False
            printf("\nYou Have Won, Congrats!\n")
            self.status = GameStatus.WON
            return True
        if tile in (FLOOR, COLLECTABLE):
            if tile == COLLECTABLE:
                self.collectables -= 1
            self.game_map[target] = PLAYER
            self.position = target
            self.steps += 1
        self.game_map[start] = FLOOR
        if tile == ENEMY:
            printf("\nGame Over! You touched an enemy.\n")
            self.status = GameStatus.LOST
            return True
        label = "Left" if direction.vertical else "Remaining"
        printf("Steps Taken: %i\n", self.steps)
        printf(f"Collectables {label}: %i\n", self.collectables)
        return True

    def handle_key(self, keycode: int) -> bool:
        """React to a key press; return True when the view should be redrawn."""
        if keycode in ESCAPE_KEYS:
            self.status = GameStatus.QUIT
            return True
        direction = direction_for_key(keycode)
        if direction is None:
            return False
        return self.move(direction)