import pytest

from grid_core.constants import MAX_COORD
from grid_core.rect import GridError, Rect


def test_rect_edges():
    rect = Rect(10, 20, 30, 40)

    assert (rect.left, rect.top, rect.right, rect.bottom) == (10, 20, 40, 60)
    assert rect.area == 1200
    assert not rect.is_empty


def test_rect_is_empty():
    assert Rect(1, 1, 0, 5).is_empty
    assert Rect(1, 1, 5, 0).is_empty


def test_rect_is_immutable():
    rect = Rect(0, 0, 1, 1)
    with pytest.raises(AttributeError):
        rect.x = 5


@pytest.mark.parametrize(
    "values",
    [
        (-1, 0, 10, 10),
        (0, -1, 10, 10),
        (0, 0, -10, 10),
        (0, 0, 10, 1.5),
        (True, 0, 10, 10),
        (MAX_COORD, 0, 1, 1),
        (0, MAX_COORD + 1, 0, 0),
    ],
)
def test_rect_rejects_invalid_values(values):
    with pytest.raises(GridError):
        Rect(*values)


def test_rect_new_saturates_at_coordinate_limit():
    assert Rect.new(MAX_COORD - 5, 0, 100, 10) == Rect(MAX_COORD - 5, 0, 5, 10)
    assert Rect.new(70000, 70000, 3, 3) == Rect(MAX_COORD, MAX_COORD, 0, 0)
    assert Rect.new(1, 2, 3, 4) == Rect(1, 2, 3, 4)


def test_rect_contains():
    outer = Rect(0, 0, 10, 10)

    assert outer.contains(Rect(0, 0, 10, 10))
    assert outer.contains(Rect(2, 2, 3, 3))
    assert not outer.contains(Rect(8, 8, 3, 3))


def test_rect_intersects_and_intersection():
    first = Rect(0, 0, 10, 10)
    second = Rect(5, 5, 10, 10)

    assert first.intersects(second)
    assert first.intersection(second) == Rect(5, 5, 5, 5)

    apart = Rect(20, 20, 2, 2)
    assert not first.intersects(apart)
    assert first.intersection(apart).is_empty

    # Touching edges do not overlap
    assert not first.intersects(Rect(10, 0, 5, 5))


def test_rect_inner():
    assert Rect(0, 0, 10, 6).inner(2) == Rect(2, 2, 6, 2)
    assert Rect(0, 0, 10, 6).inner(4) == Rect(0, 0, 0, 0)
    with pytest.raises(GridError):
        Rect(0, 0, 10, 6).inner(-1)


def test_rect_serialisation():
    rect = Rect(1, 2, 3, 4)

    assert rect.as_tuple() == (1, 2, 3, 4)
    assert rect.to_dict() == {'x': 1, 'y': 2, 'width': 3, 'height': 4}
