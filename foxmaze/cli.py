"""Command-line entry point: load a map and play it in a window."""

from __future__ import annotations

import sys
import time
from typing import Optional, Sequence

from foxmaze.game import Game, GameStatus
from foxmaze.gamemap import MapError, is_ber_file, read_map
from foxmaze.printf import printf
from foxmaze.render import PygameView

GAME_OVER_DELAY = 5
USAGE_ERROR = "\nError: a .ber map file must be given as the only argument\n"


def _play(game: Game) -> GameStatus:
    import pygame

    view = PygameView(game)
    try:
        view.draw(game)
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                game.status = GameStatus.QUIT
                return game.status
            if event.type != pygame.KEYUP or not game.handle_key(event.key):
                continue
            if game.status is GameStatus.PLAYING:
                view.draw(game)
            elif game.status is GameStatus.LOST:
                view.show_game_over()
                time.sleep(GAME_OVER_DELAY)
                return game.status
            else:
                return game.status
    finally:
        view.close()


def run(path) -> GameStatus:
    """Load and validate the map at ``path``, then play it until the game ends."""
    game_map = read_map(path)
    game_map.validate()
    return _play(Game(game_map))


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1 or not is_ber_file(args[0]):
        printf("%s", USAGE_ERROR)
        return 0
    try:
        run(args[0])
    except MapError as exc:
        printf("\nError\n%s\n", str(exc))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())