from collections import Counter

import pytest

from foxmaze.gamemap import (
    GameMap,
    MapError,
    Position,
    can_reach_collectable,
    check_file,
    is_ber_file,
    parse_map,
    read_map,
)

VALID = ["11111\n", "1PCC1\n", "1E001\n", "11111\n"]


def _map(rows):
    return parse_map(row + "\n" for row in rows)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("map.ber", True),
        ("a.ber", True),
        (".ber", False),
        ("map.txt", False),
        ("map.ber.txt", False),
    ],
)
def test_is_ber_file(name, expected):
    assert is_ber_file(name) is expected


def test_check_file_rejects_other_extension():
    with pytest.raises(MapError):
        check_file("level.txt")


def test_check_file_accepts_ber():
    check_file("level.ber")
    assert is_ber_file("level.ber")


def test_parse_map_strips_newlines():
    game_map = parse_map(VALID)
    assert game_map.height == 4
    assert game_map.width == 5
    assert str(game_map) == "\n".join(line.rstrip("\n") for line in VALID)


def test_parse_map_last_line_without_newline():
    game_map = parse_map(["111\n", "1P1\n", "111"])
    assert game_map.rows == ["111", "1P1", "111"]


def test_parse_empty_map_raises():
    with pytest.raises(MapError):
        parse_map([])


def test_valid_map_passes():
    game_map = parse_map(VALID)
    game_map.validate()
    assert game_map.find_player() == Position(1, 1)


def test_count_characters():
    counts = parse_map(VALID).count_characters()
    assert isinstance(counts, Counter)
    assert counts["P"] == 1
    assert counts["C"] == 2
    assert counts["E"] == 1


def test_invalid_character_raises():
    game_map = _map(["11111", "1PXC1", "1CE01", "11111"])
    with pytest.raises(MapError):
        game_map.count_characters()


def test_missing_side_wall():
    game_map = _map(["11111", "0PCC1", "1E001", "11111"])
    with pytest.raises(MapError):
        game_map.check_walls()


def test_missing_top_wall():
    game_map = _map(["11011", "1PCC1", "1E001", "11111"])
    with pytest.raises(MapError):
        game_map.validate()


def test_short_row_is_missing_wall():
    game_map = _map(["11111", "1PC", "1E0C1", "11111"])
    with pytest.raises(MapError):
        game_map.check_walls()


def test_single_collectable_rejected():
    game_map = _map(["11111", "1PC01", "1E001", "11111"])
    with pytest.raises(MapError):
        game_map.validate()


def test_two_players_rejected():
    game_map = _map(["11111", "1PCC1", "1EP01", "11111"])
    with pytest.raises(MapError):
        game_map.validate()


def test_missing_exit_rejected():
    game_map = _map(["11111", "1PCC1", "10001", "11111"])
    with pytest.raises(MapError):
        game_map.validate()


def test_unreachable_collectables():
    game_map = _map(["1111111", "1P1CCE1", "1111111"])
    assert can_reach_collectable(game_map, game_map.find_player()) is False
    with pytest.raises(MapError):
        game_map.validate()


def test_enemy_tiles_are_passable_for_search():
    game_map = _map(["111111", "1PBC01", "111111"])
    assert can_reach_collectable(game_map, (1, 1)) is True


def test_find_player_missing():
    game_map = _map(["111", "101", "111"])
    with pytest.raises(MapError):
        game_map.find_player()


def test_getitem_and_setitem():
    game_map = parse_map(VALID)
    game_map[Position(2, 2)] = "C"
    assert game_map[2, 2] == "C"
    with pytest.raises(IndexError):
        game_map[-1, 0]


def test_read_map_from_file(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text("".join(VALID), encoding="utf-8")
    game_map = read_map(path)
    assert game_map.rows == [line.rstrip("\n") for line in VALID]


def test_read_map_missing_file(tmp_path):
    with pytest.raises(MapError):
        read_map(tmp_path / "absent.ber")


def test_gamemap_constructed_directly():
    game_map = GameMap(grid=[list("111")], width=3)
    assert game_map.height == 1
    assert game_map.rows == ["111"]