"""Map loading and validation for ``.ber`` level files."""

from __future__ import annotations

import os
from collections import Counter, deque
from dataclasses import dataclass
from typing import Iterable, NamedTuple

from foxmaze.linereader import read_lines

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTABLE = "C"
ENEMY = "B"
VALID_TILES = frozenset((WALL, FLOOR, PLAYER, EXIT, COLLECTABLE, ENEMY))

MAP_EXTENSION = ".ber"


class MapError(Exception):
    """Raised when a map file is unusable or the map breaks a rule."""


class Position(NamedTuple):
    row: int
    col: int


@dataclass
class GameMap:
    """A grid of tiles; ``width`` is taken from the first row."""

    grid: list[list[str]]
    width: int

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def rows(self) -> list[str]:
        return ["".join(row) for row in self.grid]

    def __str__(self) -> str:
        return "\n".join(self.rows)

    def __getitem__(self, pos: tuple[int, int]) -> str:
        row, col = pos
        if row < 0 or col < 0:
            raise IndexError(f"position {pos} is outside the map")
        return self.grid[row][col]

    def __setitem__(self, pos: tuple[int, int], tile: str) -> None:
        row, col = pos
        if row < 0 or col < 0:
            raise IndexError(f"position {pos} is outside the map")
        self.grid[row][col] = tile

    def check_walls(self) -> None:
        """Raise MapError unless the map is enclosed by walls."""
        if self.width == 0 or not self.grid:
            raise MapError("This map is missing the walls")
        for row in self.grid:
            if len(row) < self.width or row[0] != WALL or row[self.width - 1] != WALL:
                raise MapError("This map is missing the walls")
        for row in (self.grid[0], self.grid[-1]):
            if any(tile != WALL for tile in row[: self.width]):
                raise MapError("This map is missing the walls")

    def count_characters(self) -> Counter:
        """Count every tile, raising MapError on a character that is not a tile."""
        counts: Counter = Counter()
        for row in self.grid:
            for tile in row:
                if tile not in VALID_TILES:
                    raise MapError(f"invalid character in map: {tile!r}")
                counts[tile] += 1
        return counts

    def find_player(self) -> Position:
        """Return the first player tile in reading order."""
        for row_index, row in enumerate(self.grid):
            for col_index, tile in enumerate(row):
                if tile == PLAYER:
                    return Position(row_index, col_index)
        raise MapError("the map has no player")

    def validate(self) -> None:
        """Apply every map rule, raising MapError on the first one broken."""
        self.check_walls()
        counts = self.count_characters()
        if not (counts[PLAYER] == 1 and counts[COLLECTABLE] > 1 and counts[EXIT] == 1):
            raise MapError("either player, exit or collectable issue")
        if not can_reach_collectable(self, self.find_player()):
            raise MapError("no accessible route to the collectables")


def is_ber_file(filename) -> bool:
    """True when the name is longer than the extension and ends with ``.ber``."""
    name = os.fspath(filename)
    return len(name) > len(MAP_EXTENSION) and name.endswith(MAP_EXTENSION)


def check_file(filename) -> None:
    """Raise MapError unless ``filename`` names a ``.ber`` file."""
    if not is_ber_file(filename):
        raise MapError("the file does not have the .ber extension")


def parse_map(lines: Iterable[str]) -> GameMap:
    """Build a map from text lines; a trailing newline on each line is dropped."""
    rows = [line[:-1] if line.endswith("\n") else line for line in lines]
    if not rows:
        raise MapError("the map is empty")
    return GameMap(grid=[list(row) for row in rows], width=len(rows[0]))


def read_map(path) -> GameMap:
    """Read and parse the map file at ``path`` without validating it."""
    try:
        lines = list(read_lines(path))
    except OSError as exc:
        raise MapError(f"cannot open map file {os.fspath(path)}") from exc
    return parse_map(lines)


def can_reach_collectable(game_map: GameMap, start: tuple[int, int]) -> bool:
    """Breadth-first search from ``start`` over non-wall tiles for a collectable."""
    origin = Position(*start)
    visited = {origin}
    queue = deque([origin])
    while queue:
        current = queue.popleft()
        if game_map[current] == COLLECTABLE:
            return True
        for d_row, d_col in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nxt = Position(current.row + d_row, current.col + d_col)
            if not (0 <= nxt.row < game_map.height and 0 <= nxt.col < game_map.width):
                continue
            if nxt.col >= len(game_map.grid[nxt.row]) or nxt in visited:
                continue
            if game_map[nxt] == WALL:
                continue
            visited.add(nxt)
            queue.append(nxt)
    return False