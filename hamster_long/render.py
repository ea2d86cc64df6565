"""Drawing the board with pygame, and the command that runs a game."""

from __future__ import annotations

import os
import sys
import time
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame

from .game import QUIT_MESSAGE, Direction, Game, GameOver, Outcome
from .mapfile import COLLECTIBLE, ENEMY, EXIT, PLAYER, WALL, MapError, load_map

TILE = 50
TITLE = "Hamster Game !"
TEXTURE_DIR = Path("texture")
TEXTURE_SUFFIXES = (".xpm", ".png", ".bmp")
TEXT_COLOR = (255, 255, 255)
TEXT_POSITION = (5, 3)

BACKGROUND = "backgrnd"
BASE_TEXTURES = (
    "wall",
    "coin",
    "exit",
    "exit1",
    "player_r",
    "player_l",
    "player_up",
    "player_down",
    "player_f",
    BACKGROUND,
)
ENEMY_TEXTURES = ("enemy1", "enemy2", "enemy3")

_PLAYER_TEXTURES = {
    None: "player_f",
    Direction.DOWN: "player_down",
    Direction.UP: "player_up",
    Direction.RIGHT: "player_r",
    Direction.LEFT: "player_l",
}

# pygame keys translated to the key codes the game understands.
_KEYCODES = {
    pygame.K_UP: 126,
    pygame.K_w: 13,
    pygame.K_DOWN: 125,
    pygame.K_s: 1,
    pygame.K_RIGHT: 124,
    pygame.K_d: 2,
    pygame.K_LEFT: 123,
    pygame.K_a: 0,
    pygame.K_ESCAPE: 53,
}


def tile_for(game: Game, row: int, col: int) -> tuple[str, ...]:
    """Return the texture names drawn at a cell, bottom layer first."""
    cell = game.grid[row][col]
    if cell == WALL:
        return (BACKGROUND, "wall")
    if cell == PLAYER:
        return (BACKGROUND, _PLAYER_TEXTURES[game.face])
    if cell == EXIT:
        return (BACKGROUND, "exit1" if game.collectibles == 0 else "exit")
    if cell == ENEMY:
        return (BACKGROUND, ENEMY_TEXTURES[game.frame % len(ENEMY_TEXTURES)])
    if cell == COLLECTIBLE:
        return (BACKGROUND, "coin")
    return (BACKGROUND,)


class Renderer:
    """Draws a game's board onto a pygame surface."""

    def __init__(self, game: Game, texture_dir: str | Path = TEXTURE_DIR) -> None:
        self.game = game
        self.texture_dir = Path(texture_dir)
        self.show_moves = False
        names = list(BASE_TEXTURES)
        if any(ENEMY in row for row in game.grid):
            names.extend(ENEMY_TEXTURES)
        self.textures = {name: self._load(name) for name in names}
        self.last_moves = game.moves
        self._font: pygame.font.Font | None = None

    def _load(self, name: str) -> pygame.Surface:
        for suffix in TEXTURE_SUFFIXES:
            path = self.texture_dir / f"{name}{suffix}"
            if path.is_file():
                try:
                    return pygame.image.load(str(path))
                except pygame.error as exc:
                    raise MapError("💥Invalid images") from exc
        raise MapError("💥Invalid images")

    def _draw_moves(self, surface: pygame.Surface) -> None:
        if not pygame.font.get_init():
            return
        if self._font is None:
            self._font = pygame.font.Font(None, 20)
        text = self._font.render(str(self.game.moves), True, TEXT_COLOR)
        surface.blit(text, TEXT_POSITION)

    def draw(self, surface: pygame.Surface) -> bool:
        """Draw the whole board; return True if the move count changed."""
        surface.fill((0, 0, 0))
        for r, row in enumerate(self.game.grid):
            for c in range(len(row)):
                for name in tile_for(self.game, r, c):
                    surface.blit(self.textures[name], (c * TILE, r * TILE))
        if self.show_moves:
            self._draw_moves(surface)
        changed = self.game.moves != self.last_moves
        self.last_moves = self.game.moves
        return changed


def _report_error(exc: MapError) -> None:
    print(f"Error\n{exc}", file=sys.stderr, end="")


def _loop(game: Game, renderer: Renderer, screen: pygame.Surface, enemies: bool) -> None:
    while True:
        events = pygame.event.get() if enemies else [pygame.event.wait()]
        redraw = False
        for event in events:
            if event.type == pygame.QUIT:
                raise GameOver(Outcome.QUIT, QUIT_MESSAGE, game.moves)
            if event.type == pygame.KEYDOWN:
                code = _KEYCODES.get(event.key)
                if code is not None:
                    game.handle_key(code)
                redraw = True
        if enemies and game.tick():
            redraw = True
        if redraw:
            changed = renderer.draw(screen)
            pygame.display.flip()
            if changed and not enemies:
                print(f"Hamster moved {game.moves} times")
        if enemies:
            time.sleep(0.0005)


def run(path: str | Path, enemies: bool = False) -> int:
    """Validate the map at ``path`` and play it in a window.

    Returns the process exit status.
    """
    try:
        game_map = load_map(path, enemies)
    except MapError as exc:
        _report_error(exc)
        return 1
    game = Game(game_map)
    pygame.init()
    try:
        screen = pygame.display.set_mode((game.width * TILE, game.height * TILE))
        pygame.display.set_caption(TITLE)
        try:
            renderer = Renderer(game, TEXTURE_DIR)
        except MapError as exc:
            _report_error(exc)
            return 1
        renderer.show_moves = enemies
        renderer.draw(screen)
        pygame.display.flip()
        try:
            _loop(game, renderer, screen, enemies)
        except GameOver as over:
            if over.outcome is Outcome.QUIT:
                print(over.message)
                return 0
            if over.outcome is Outcome.WON and not enemies:
                print(f"Hamster moved {over.moves} times")
            print(over.message, file=sys.stderr)
            return 1
    finally:
        pygame.quit()
    return 0


def main(argv: list[str] | None = None) -> int:
    """Command entry: ``[--enemies] MAP.ber``."""
    args = list(sys.argv[1:] if argv is None else argv)
    enemies = False
    if args and args[0] == "--enemies":
        enemies = True
        args = args[1:]
    if len(args) != 1:
        print("💥Invalid arguments !", end="")
        return 0
    return run(args[0], enemies)


if __name__ == "__main__":
    sys.exit(main())