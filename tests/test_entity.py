import pytest

from mindrun.entity import Enemy, Entity, Player, Position, in_bounds


def test_step_moves_by_offsets():
    start = Position(3, 4)
    assert start.step(-1, 0) == Position(2, 4)
    assert start.step(0, 2) == Position(3, 6)


def test_step_leaves_original_unchanged():
    start = Position(5, 5)
    start.step(1, 1)
    assert start == Position(5, 5)


def test_step_round_trip():
    start = Position(7, 2)
    assert start.step(3, -4).step(-3, 4) == start


def test_position_is_immutable():
    pos = Position(1, 1)
    with pytest.raises(AttributeError):
        pos.x = 2
    assert (pos.x, pos.y) == (1, 1)
    assert pos == Position(1, 1)


def test_positions_hash_by_value():
    assert {Position(1, 2), Position(1, 2), Position(2, 1)} == {
        Position(1, 2),
        Position(2, 1),
    }


@pytest.mark.parametrize(
    "pos",
    [Position(0, 0), Position(19, 19), Position(0, 19), Position(10, 5)],
)
def test_in_bounds_inside(pos):
    assert in_bounds(pos, 20, 20) is True


@pytest.mark.parametrize(
    "pos",
    [Position(-1, 0), Position(0, -1), Position(20, 0), Position(0, 20)],
)
def test_in_bounds_outside(pos):
    assert in_bounds(pos, 20, 20) is False


def test_in_bounds_uses_rows_for_x_and_cols_for_y():
    assert in_bounds(Position(4, 1), 5, 2) is True
    assert in_bounds(Position(1, 4), 5, 2) is False


def test_symbols():
    assert Entity(Position(0, 0)).symbol() == "?"
    assert Player(Position(1, 1)).symbol() == "P"
    assert Enemy(Position(2, 2)).symbol() == "X"


def test_entity_position_can_be_replaced():
    player = Player(Position(1, 1))
    player.pos = player.pos.step(0, 1)
    assert player.pos == Position(1, 2)