import pytest

from difficulty import Difficulty


def test_starts_easy():
    d = Difficulty()
    assert (d.level, d.min_gap, d.max_gap) == (1, 100, 300)


@pytest.mark.parametrize("level,gaps", [(1, (100, 300)), (2, (80, 220)), (3, (50, 150))])
def test_change_sets_gap_range(level, gaps):
    d = Difficulty()
    assert d.change(level)
    assert d.level == level
    assert (d.min_gap, d.max_gap) == gaps


@pytest.mark.parametrize("bad", [0, 4, -1, "2", None])
def test_unknown_level_sets_level_keeps_gaps(bad):
    d = Difficulty(2)
    assert not d.change(bad)
    assert d.level == bad
    assert (d.min_gap, d.max_gap) == (80, 220)


def test_gaps_tighten_with_level():
    ranges = []
    for lv in (1, 2, 3):
        d = Difficulty(lv)
        ranges.append((d.min_gap, d.max_gap))
    assert ranges == sorted(ranges, reverse=True)


def test_sample_gap_bounds(scripted):
    d = Difficulty(1)
    assert d.sample_gap(scripted(0.0)) == 100
    assert d.sample_gap(scripted(0.25)) == 150
    assert d.sample_gap(scripted(0.999999)) == 299
    d.change(3)
    assert d.sample_gap(scripted(0.5)) == 100
