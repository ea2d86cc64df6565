"""Reading and validating ``.ber`` map files."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from pathlib import Path

EXTENSION = ".ber"

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"
ENEMY = "N"


class MapError(Exception):
    """Raised when a map file cannot be read or is not a valid map."""


@dataclass(frozen=True)
class GameMap:
    """A validated map: its rows and the facts the game needs from them."""

    rows: tuple[str, ...]
    player: tuple[int, int]
    collectibles: int
    enemy_count: int = 0

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0])


def check_extension(path: str | Path) -> str | Path:
    """Return ``path`` if its name ends in ``.ber``, else raise MapError."""
    name = str(path)
    if len(name) < len(EXTENSION) or not name.endswith(EXTENSION):
        raise MapError("💥Invalid Extension!")
    return path


def read_map(path: str | Path) -> str:
    """Return the whole text of the map file at ``path``."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise MapError("💥Invalid file !") from exc


def _check_empty_lines(text: str) -> None:
    if not text:
        raise MapError("💥Empty map !")
    if text.startswith("\n") or text.endswith("\n") or "\n\n" in text:
        raise MapError("💥Empty line !")


def _count_items(rows: list[str], enemies: bool) -> tuple[dict[str, int], tuple[int, int]]:
    allowed = {WALL, FLOOR, PLAYER, EXIT, COLLECTIBLE}
    if enemies:
        allowed.add(ENEMY)
    counts = {PLAYER: 0, EXIT: 0, COLLECTIBLE: 0, ENEMY: 0}
    player = (0, 0)
    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            if cell not in allowed:
                raise MapError("💥Incorrect character")
            if cell in counts:
                counts[cell] += 1
            if cell == PLAYER:
                player = (r, c)
    return counts, player


def _check_shape(rows: list[str], counts: dict[str, int], enemies: bool) -> None:
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise MapError("💥Inconsistent lines.")
    if (
        counts[EXIT] != 1
        or counts[COLLECTIBLE] < 1
        or counts[PLAYER] != 1
        or (enemies and counts[ENEMY] < 1)
    ):
        raise MapError("💥Invalid number of items")


def _check_walls(rows: list[str]) -> None:
    if len(rows) < 2:
        raise MapError("💥Only one line of map found.")
    top, *middle, bottom = rows
    if set(top) != {WALL} or set(bottom) != {WALL}:
        raise MapError("💥Hole in the wall.")
    if any(row[0] != WALL or row[-1] != WALL for row in middle):
        raise MapError("💥Hole in the wall.")


def _check_reachable(rows: list[str], start: tuple[int, int], enemies: bool) -> None:
    """Every collectible and the exit must be reachable from the player.

    The exit is reachable but cannot be walked through; enemies block
    the way when they are in play.
    """
    blocking = {WALL, ENEMY} if enemies else {WALL}
    seen = {start}
    queue = deque([start])
    exits = 0
    collectibles = 0
    while queue:
        r, c = queue.popleft()
        cell = rows[r][c]
        if cell == EXIT:
            exits += 1
            continue
        if cell == COLLECTIBLE:
            collectibles += 1
        for nr, nc in ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)):
            if (nr, nc) in seen:
                continue
            if not (0 <= nr < len(rows) and 0 <= nc < len(rows[nr])):
                continue
            if rows[nr][nc] in blocking:
                continue
            seen.add((nr, nc))
            queue.append((nr, nc))
    total_collectibles = sum(row.count(COLLECTIBLE) for row in rows)
    total_exits = sum(row.count(EXIT) for row in rows)
    if exits != total_exits or collectibles != total_collectibles:
        raise MapError("💥'E' or 'C' or 'P' is invalid !")


def parse_map(text: str, enemies: bool = False) -> GameMap:
    """Validate map ``text`` and return it as a GameMap.

    With ``enemies`` set, the ``N`` tile is allowed and at least one is
    required.
    """
    _check_empty_lines(text)
    rows = text.split("\n")
    counts, player = _count_items(rows, enemies)
    _check_shape(rows, counts, enemies)
    _check_walls(rows)
    _check_reachable(rows, player, enemies)
    return GameMap(
        rows=tuple(rows),
        player=player,
        collectibles=counts[COLLECTIBLE],
        enemy_count=counts[ENEMY],
    )


def load_map(path: str | Path, enemies: bool = False) -> GameMap:
    """Check the extension of ``path``, read it and validate its map."""
    check_extension(path)
    return parse_map(read_map(path), enemies)