import pygame
import pytest

from hamster_long.game import Direction, Game
from hamster_long.mapfile import MapError, parse_map
from hamster_long.render import (
    BASE_TEXTURES,
    ENEMY_TEXTURES,
    TILE,
    Renderer,
    main,
    tile_for,
)

SIMPLE = "11111\n1PCE1\n11111"
WITH_ENEMY = "111111\n1PC0E1\n1N0001\n111111"


def _colors(names):
    return {name: (10 + i * 10, 200 - i * 7, (i * 31) % 256) for i, name in enumerate(names)}


def _write_textures(directory, colors):
    for name, color in colors.items():
        surface = pygame.Surface((TILE, TILE))
        surface.fill(color)
        pygame.image.save(surface, str(directory / f"{name}.bmp"))


def _pixel(surface, row, col):
    return tuple(surface.get_at((col * TILE + 10, row * TILE + 10)))[:3]


@pytest.fixture
def base_colors(tmp_path):
    colors = _colors(BASE_TEXTURES)
    _write_textures(tmp_path, colors)
    return colors


def test_tile_for_fixed_cells():
    game = Game(parse_map(SIMPLE))
    assert tile_for(game, 0, 0) == ("backgrnd", "wall")
    assert tile_for(game, 1, 1) == ("backgrnd", "player_f")
    assert tile_for(game, 1, 2) == ("backgrnd", "coin")
    assert tile_for(game, 1, 3) == ("backgrnd", "exit")


def test_tile_for_follows_face_and_open_exit():
    game = Game(parse_map(SIMPLE))
    game.move(Direction.RIGHT)
    assert tile_for(game, 1, 2) == ("backgrnd", "player_r")
    assert tile_for(game, 1, 1) == ("backgrnd",)
    assert tile_for(game, 1, 3) == ("backgrnd", "exit1")


def test_tile_for_enemy_animation_frames():
    game = Game(parse_map(WITH_ENEMY, enemies=True))
    assert tile_for(game, 2, 1) == ("backgrnd", "enemy1")
    game.frame = 2
    assert tile_for(game, 2, 1) == ("backgrnd", "enemy3")


def test_missing_textures_raise(tmp_path):
    game = Game(parse_map(SIMPLE))
    with pytest.raises(MapError, match="Invalid images"):
        Renderer(game, tmp_path)


def test_enemy_map_needs_enemy_textures(tmp_path, base_colors):
    game = Game(parse_map(WITH_ENEMY, enemies=True))
    with pytest.raises(MapError, match="Invalid images"):
        Renderer(game, tmp_path)


def test_draw_places_tiles(tmp_path, base_colors):
    game = Game(parse_map(SIMPLE))
    renderer = Renderer(game, tmp_path)
    surface = pygame.Surface((game.width * TILE, game.height * TILE))
    assert renderer.draw(surface) is False
    assert _pixel(surface, 0, 0) == base_colors["wall"]
    assert _pixel(surface, 1, 1) == base_colors["player_f"]
    assert _pixel(surface, 1, 2) == base_colors["coin"]
    assert _pixel(surface, 1, 3) == base_colors["exit"]


def test_draw_after_move(tmp_path, base_colors):
    game = Game(parse_map(SIMPLE))
    renderer = Renderer(game, tmp_path)
    surface = pygame.Surface((game.width * TILE, game.height * TILE))
    renderer.draw(surface)
    game.move(Direction.RIGHT)
    assert renderer.draw(surface) is True
    assert _pixel(surface, 1, 1) == base_colors["backgrnd"]
    assert _pixel(surface, 1, 2) == base_colors["player_r"]
    assert _pixel(surface, 1, 3) == base_colors["exit1"]
    assert renderer.draw(surface) is False


def test_draw_enemy(tmp_path, base_colors):
    enemy_colors = {
        name: (250 - i * 40, 5 + i * 3, 128) for i, name in enumerate(ENEMY_TEXTURES)
    }
    _write_textures(tmp_path, enemy_colors)
    game = Game(parse_map(WITH_ENEMY, enemies=True))
    renderer = Renderer(game, tmp_path)
    surface = pygame.Surface((game.width * TILE, game.height * TILE))
    renderer.draw(surface)
    assert _pixel(surface, 2, 1) == enemy_colors["enemy1"]
    game.frame = 1
    renderer.draw(surface)
    assert _pixel(surface, 2, 1) == enemy_colors["enemy2"]


def test_main_without_map_reports_arguments(capsys):
    assert main([]) == 0
    assert "Invalid arguments !" in capsys.readouterr().out


def test_main_bad_extension(capsys):
    assert main(["map.txt"]) == 1
    assert capsys.readouterr().err == "Error\n💥Invalid Extension!"


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.ber")]) == 1
    assert "Invalid file !" in capsys.readouterr().err


def test_main_invalid_map(tmp_path, capsys):
    path = tmp_path / "bad.ber"
    path.write_text("11111\n1PCE0\n11111", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "Hole in the wall." in capsys.readouterr().err


def test_main_enemies_flag_requires_enemy(tmp_path, capsys):
    path = tmp_path / "plain.ber"
    path.write_text(SIMPLE, encoding="utf-8")
    assert main(["--enemies", str(path)]) == 1
    assert "Invalid number of items" in capsys.readouterr().err