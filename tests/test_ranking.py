"""
Tests for ranking mines and picking winners
"""
import pytest

from minefield.field import Field
from minefield.models import Interval, Mine
from minefield.ranking import assign_peaks, rank_mines, winners


def _mine(mine_id, x, y, explosions):
    return Mine(id=mine_id, x=x, y=y, power=0, peak=Interval(time=0, explosions=explosions))


m1 = _mine(1, 1, 1, 6)
m2 = _mine(2, 2, 2, 5)
m3 = _mine(3, 3, 3, 5)
m4 = _mine(4, 4, 4, 4)
m5 = _mine(5, 4, 5, 4)
m6 = _mine(6, 5, 2, 4)
m7 = _mine(7, 6, 6, 3)
m8 = _mine(8, 7, 7, 2)
m9 = _mine(9, 8, 8, 1)


@pytest.mark.parametrize("mines, expected", [
    ([m9, m4, m8, m7, m2, m1], [m1, m2, m4, m7, m8, m9]),  # all different explosions
    ([m3, m2], [m2, m3]),  # tie broken by X
    ([m5, m6, m4], [m4, m5, m6]),  # same X, tie broken by Y
    ([m3, m9, m5, m6, m4, m7, m1, m8, m2], [m1, m2, m3, m4, m5, m6, m7, m8, m9]),
])
def test_rank_mines(mines, expected):
    """Test ordering by peak explosions, then X, then Y"""
    ranked = rank_mines(mines)
    assert [m.id for m in ranked] == [m.id for m in expected]


def test_rank_mines_does_not_reorder_input():
    """Test that ranking returns a new list"""
    mines = [m9, m1]
    rank_mines(mines)
    assert mines == [m9, m1]


def test_rank_requires_peaks():
    """Test that unsimulated mines cannot be ranked"""
    with pytest.raises(ValueError):
        rank_mines([Mine(id=1, x=0, y=0, power=1), m1])


def test_winners():
    """Test winners are the leading run sharing the best count"""
    ranked = rank_mines([m6, m1, m4, m5])
    assert [m.id for m in winners(ranked)] == [1]

    ranked = rank_mines([m6, m9, m4, m5])
    assert [m.id for m in winners(ranked)] == [4, 5, 6]

    assert winners([]) == []


def test_winners_require_peaks():
    """Test that unsimulated mines cannot be picked as winners"""
    with pytest.raises(ValueError):
        winners([Mine(id=1, x=0, y=0, power=1)])

    with pytest.raises(ValueError):
        winners([m1, Mine(id=2, x=0, y=0, power=1)])


def test_grid_winners():
    """Test end-to-end winners on the 3x3 grid"""
    field = Field.from_mines([
        Mine(id=1, x=1, y=1, power=1.5),
        Mine(id=2, x=1, y=2, power=1.5),
        Mine(id=3, x=1, y=3, power=1.5),
        Mine(id=4, x=2, y=1, power=1.5),
        Mine(id=5, x=2, y=2, power=1.5),
        Mine(id=6, x=2, y=3, power=1.5),
        Mine(id=7, x=3, y=1, power=5.0),
        Mine(id=8, x=3, y=2, power=0.9),
        Mine(id=9, x=3, y=3, power=1.1),
    ])

    assign_peaks(field)
    ranked = rank_mines(field.mines)

    assert [m.id for m in winners(ranked)] == [5, 7]
    assert ranked[-1].id == 8
    assert field.get(5).peak == Interval(time=1, explosions=8)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
