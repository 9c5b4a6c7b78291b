import pytest

from heartwave import consts
from heartwave.consts import session_data


def test_option_zero_is_high_coherence():
    points, scores = session_data(0)
    assert points is consts.HIGH_COHERENCE_PLOT_POINTS
    assert scores is consts.HIGH_COHERENCE_SCORES
    assert points[0] == pytest.approx(69.1)
    assert scores[0] == pytest.approx(6.4)


def test_option_one_is_medium_coherence():
    points, scores = session_data(1)
    assert points is consts.MED_COHERENCE_PLOT_POINTS
    assert scores is consts.MED_COHERENCE_SCORES
    assert points[0] == 70
    assert scores[0] == pytest.approx(2.9)


@pytest.mark.parametrize("option", [2, 3, -1, 99])
def test_other_options_are_low_coherence(option):
    points, scores = session_data(option)
    assert points is consts.LOW_COHERENCE_PLOT_POINTS
    assert scores is consts.LOW_COHERENCE_SCORES
    assert points[0] == 61
    assert scores[0] == pytest.approx(0.4)


def test_score_tables_have_equal_length():
    lengths = {len(session_data(option)[1]) for option in (0, 1, 2)}
    assert lengths == {40}


def test_score_ranges_are_ordered():
    _, high = session_data(0)
    _, medium = session_data(1)
    _, low = session_data(2)
    assert max(low) <= min(medium)
    assert max(medium) <= min(high)