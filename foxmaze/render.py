"""Scene layout for the game board and a pygame window that draws it."""

from __future__ import annotations

import os
from typing import Any, NamedTuple, Optional, Sequence

from foxmaze.game import Direction, Game
from foxmaze.gamemap import COLLECTABLE, ENEMY, EXIT, FLOOR, PLAYER, WALL
from foxmaze.printf import itoa

TILE_SIZE = 40
SPRITE_DIR = "sprites"
WINDOW_TITLE = "foxmaze"
TEXT_COLOR = (255, 255, 255)
COUNTER_VALUE_OFFSET = 120

_TILE_SPRITES = {
    WALL: "wall",
    COLLECTABLE: "collectable",
    ENEMY: "enemy",
    PLAYER: "player",
    EXIT: "exit",
    FLOOR: "floor",
}

_SPRITE_FILES = {
    "floor": "floor",
    "wall": "wall",
    "exit": "exit",
    "collectable": "item",
    "enemy": "enemy",
}

_FALLBACK_COLORS = {
    "floor": (60, 120, 60),
    "wall": (90, 90, 90),
    "exit": (200, 170, 40),
    "collectable": (220, 60, 160),
    "enemy": (200, 30, 30),
    "player": (240, 130, 30),
}

PLAYER_FRAMES = {
    Direction.RIGHT: ("fox", "fox_2", "fox_3", "fox_4"),
    Direction.LEFT: ("fox_5", "fox_6", "fox_7", "fox_8"),
    Direction.UP: ("fox_9", "fox_10", "fox_11", "fox_12"),
    Direction.DOWN: ("fox_13", "fox_14", "fox_15", "fox_16"),
}

GAME_OVER_SPRITE = "game_over"


class SceneItem(NamedTuple):
    sprite: str
    x: int
    y: int


class TextItem(NamedTuple):
    x: int
    y: int
    text: str


class FrameCycler:
    """Hands out the frames of an animation in turn.

    The cycle restarts when a different frame sequence is given or the
    current one has been used up.
    """

    def __init__(self) -> None:
        self._frames: Optional[Sequence[Any]] = None
        self._index = 0

    def next_frame(self, frames: Sequence[Any]) -> Any:
        if not frames:
            raise ValueError("an animation needs at least one frame")
        if frames is not self._frames or self._index >= len(frames):
            self._frames = frames
            self._index = 0
        frame = frames[self._index]
        self._index += 1
        return frame


def build_scene(game: Game) -> list[SceneItem]:
    """Return the sprite to draw at each tile, in row order, in pixel coordinates."""
    return [
        SceneItem(_TILE_SPRITES[tile], col * TILE_SIZE, row * TILE_SIZE)
        for row, tiles in enumerate(game.game_map.grid)
        for col, tile in enumerate(tiles)
        if tile in _TILE_SPRITES
    ]


def counters_text(game: Game) -> list[TextItem]:
    """Return the on-screen counter labels and values."""
    return [
        TextItem(10, 10, "Collectables: "),
        TextItem(10 + COUNTER_VALUE_OFFSET, 10, itoa(game.collectables)),
        TextItem(10, 30, "Movement: "),
        TextItem(10 + COUNTER_VALUE_OFFSET, 30, itoa(game.steps)),
    ]


class PygameView:
    """A window showing the board, the animated player and the counters."""

    def __init__(self, game: Game) -> None:
        os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
        import pygame

        self._pygame = pygame
        pygame.init()
        size = (game.game_map.width * TILE_SIZE, game.game_map.height * TILE_SIZE)
        self._screen = pygame.display.set_mode(size)
        pygame.display.set_caption(WINDOW_TITLE)
        self._font = pygame.font.Font(None, 20)
        self._sprites = {
            name: self._load(filename, _FALLBACK_COLORS[name])
            for name, filename in _SPRITE_FILES.items()
        }
        self._frames = {
            direction: [self._load(name, _FALLBACK_COLORS["player"]) for name in names]
            for direction, names in PLAYER_FRAMES.items()
        }
        self._cycler = FrameCycler()

    def _load(self, name: str, color: tuple[int, int, int]):
        pygame = self._pygame
        path = os.path.join(SPRITE_DIR, name + ".xpm")
        try:
            return pygame.image.load(path)
        except (pygame.error, OSError):
            surface = pygame.Surface((TILE_SIZE, TILE_SIZE))
            surface.fill(color)
            return surface

    def draw(self, game: Game) -> None:
        """Redraw the whole board and the counters."""
        self._screen.fill((0, 0, 0))
        frames = self._frames[game.facing]
        for item in build_scene(game):
            if item.sprite == "player":
                image = self._cycler.next_frame(frames)
            else:
                image = self._sprites[item.sprite]
            self._screen.blit(image, (item.x, item.y))
        for text in counters_text(game):
            rendered = self._font.render(text.text, True, TEXT_COLOR)
            self._screen.blit(rendered, (text.x, text.y))
        self._pygame.display.flip()

    def show_game_over(self) -> None:
        """Show the game-over picture in the top-left corner."""
        pygame = self._pygame
        path = os.path.join(SPRITE_DIR, GAME_OVER_SPRITE + ".xpm")
        try:
            image = pygame.image.load(path)
        except (pygame.error, OSError):
            image = self._font.render("GAME OVER", True, TEXT_COLOR, (0, 0, 0))
        self._screen.blit(image, (0, 0))
        pygame.display.flip()

    def close(self) -> None:
        """Close the window and shut pygame down."""
        self._pygame.quit()