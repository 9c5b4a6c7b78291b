from datetime import datetime

import pytest

from heartwave import consts
from heartwave.device import Device, DeviceState

WHEN = datetime(2024, 3, 5, 14, 7, 9)
LATER = datetime(2024, 3, 5, 14, 9, 30)


def test_initial_state():
    device = Device()
    assert device.state is DeviceState.HOME
    assert device.breath_pace == 9
    assert device.challenge_level == 0
    assert device.battery_level == 100
    assert device.turned_on is True
    assert device.logs == []


def test_start_session_copies_settings():
    device = Device()
    device.breath_pace = 12
    device.challenge_level = 2
    device.start_session(1)
    assert device.recording.breath_interval == 12
    assert device.recording.challenge_level == 2
    device.update()
    assert device.recording.coherence_score() == consts.MED_COHERENCE_SCORES[0]
    assert device.recording.latest_plot_points() == list(consts.MED_COHERENCE_PLOT_POINTS[:5])


def test_start_session_resets_previous_data():
    device = Device()
    device.start_session(0)
    device.update()
    device.indicator()
    device.start_session(2)
    assert device.recording.length_of_session == 0
    assert device.high_indicator_time == 0


def test_high_session_gives_high_indicator():
    device = Device()
    device.start_session(0)
    device.update()
    assert device.indicator() == 2
    assert device.high_indicator_time == 5


def test_low_session_gives_low_indicator():
    device = Device()
    device.start_session(2)
    device.update()
    assert device.indicator() == 0
    assert device.low_indicator_time == 5


def test_medium_session_at_level_three_gives_medium():
    device = Device()
    device.challenge_level = 2
    device.start_session(1)
    device.update()
    assert device.indicator() == 1
    assert device.medium_indicator_time == 5


def test_hardest_level_makes_medium_session_low():
    device = Device()
    device.challenge_level = 3
    device.start_session(1)
    device.update()
    assert device.indicator() == 0


def test_save_recording_summary():
    device = Device()
    device.start_session(0)
    for _ in range(3):
        device.update()
        device.indicator()
    log = device.save_recording(WHEN)
    assert device.logs == [log]
    assert log.date == "05.03.2024 14:07:09"
    assert log.length_of_session == 15
    assert log.high_percentage == 100.0
    assert log.low_percentage == 0.0
    assert log.achievement_score == pytest.approx(sum(consts.HIGH_COHERENCE_SCORES[:3]))
    assert log.average_coherence == pytest.approx(log.achievement_score / 3)
    assert log.plot_points == consts.HIGH_COHERENCE_PLOT_POINTS[:15]


def test_save_empty_recording_has_zero_percentages():
    device = Device()
    device.start_session(0)
    log = device.save_recording(WHEN)
    assert (log.low_percentage, log.medium_percentage, log.high_percentage) == (0.0, 0.0, 0.0)
    assert log.average_coherence == 0


def test_saved_log_does_not_follow_later_updates():
    device = Device()
    device.start_session(0)
    device.update()
    log = device.save_recording(WHEN)
    device.update()
    assert len(log.plot_points) == 5


def test_toggle_power():
    device = Device()
    assert device.toggle_power() is False
    assert device.turned_on is False
    assert device.toggle_power() is True


def test_reset_battery():
    device = Device()
    device.battery_level = 4
    device.reset_battery()
    assert device.battery_level == 100


def test_log_index_by_date():
    device = Device()
    device.start_session(0)
    device.save_recording(WHEN)
    device.save_recording(LATER)
    title = "Log Summary: " + device.logs[1].date
    assert device.log_index_by_date(title) == 1
    assert device.log_index_by_date("Log Summary: 01.01.2000 00:00:00") == 0


def test_log_index_by_date_short_title_raises():
    device = Device()
    device.start_session(0)
    device.save_recording(WHEN)
    with pytest.raises(ValueError):
        device.log_index_by_date("short")


def test_delete_log():
    device = Device()
    device.start_session(0)
    first = device.save_recording(WHEN)
    device.save_recording(LATER)
    device.delete_log(1)
    assert device.logs == [first]


@pytest.mark.parametrize("index", [-1, 1])
def test_delete_log_out_of_range(index):
    device = Device()
    device.start_session(0)
    device.save_recording(WHEN)
    with pytest.raises(IndexError):
        device.delete_log(index)


def test_restore():
    device = Device()
    device.breath_pace = 20
    device.challenge_level = 3
    device.battery_level = 50
    device.toggle_power()
    device.start_session(0)
    device.update()
    device.save_recording(WHEN)
    device.restore()
    assert device.breath_pace == 9
    assert device.challenge_level == 0
    assert device.turned_on is True
    assert device.logs == []
    assert device.recording.length_of_session == 0
    assert device.battery_level == 50