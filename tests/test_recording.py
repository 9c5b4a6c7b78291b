import pytest

from heartwave.recording import Recording


@pytest.fixture
def recording():
    rec = Recording()
    rec.load([1.0, 2.0, 3.0], [0.5, 1.5])
    return rec


def test_defaults():
    rec = Recording()
    assert rec.challenge_level == 0
    assert rec.breath_interval == 9
    assert rec.length_of_session == 0
    assert rec.achievement_score == 0


def test_first_update(recording):
    recording.update()
    assert recording.length_of_session == 5
    assert recording.plot_points == [1.0, 2.0, 3.0, 1.0, 2.0]
    assert recording.coherence_score() == 0.5
    assert recording.achievement_score == pytest.approx(0.5)


def test_data_wraps_around(recording):
    recording.update()
    recording.update()
    assert recording.latest_plot_points() == [3.0, 1.0, 2.0, 3.0, 1.0]
    assert recording.coherence_score() == 1.5
    recording.update()
    assert recording.coherence_score() == 0.5


def test_achievement_is_sum_of_scores(recording):
    for _ in range(5):
        recording.update()
    assert recording.achievement_score == pytest.approx(sum(recording.coherence_scores))
    assert recording.average_coherence() == pytest.approx(
        recording.achievement_score / len(recording.coherence_scores)
    )


def test_average_without_scores_is_zero():
    assert Recording().average_coherence() == 0


def test_plot_points_grow_by_five(recording):
    for step in range(1, 4):
        recording.update()
        assert len(recording.plot_points) == 5 * step
        assert recording.length_of_session == 5 * step


def test_reset_clears_data_but_keeps_settings(recording):
    recording.challenge_level = 2
    recording.update()
    recording.reset()
    assert recording.plot_points == []
    assert recording.coherence_scores == []
    assert recording.length_of_session == 0
    assert recording.achievement_score == 0
    assert recording.challenge_level == 2
    recording.update()
    assert recording.plot_points == [1.0, 2.0, 3.0, 1.0, 2.0]


def test_coherence_score_before_update_raises():
    with pytest.raises(IndexError):
        Recording().coherence_score()


def test_latest_points_before_update_raises():
    with pytest.raises(IndexError):
        Recording().latest_plot_points()


def test_update_without_data_raises():
    with pytest.raises(RuntimeError):
        Recording().update()


def test_load_rejects_empty_data():
    with pytest.raises(ValueError):
        Recording().load([], [1.0])
    with pytest.raises(ValueError):
        Recording().load([1.0], [])