"""The biofeedback device: settings, session state, battery and log history."""

from __future__ import annotations

from datetime import datetime
from enum import Enum, auto

from heartwave.consts import session_data
from heartwave.recording import Recording
from heartwave.session_log import SessionLog

_DATE_FORMAT = "%d.%m.%Y %H:%M:%S"
_TITLE_PREFIX_LENGTH = len("Log Summary: ")
_STEP_SECONDS = 5

# Medium coherence range (inclusive) for each challenge level; higher levels
# fall back to the last range.
_MEDIUM_RANGES = {
    0: (0.5, 0.9),
    1: (0.6, 2.1),
    2: (1.8, 4.0),
}
_HARDEST_MEDIUM_RANGE = (4.0, 6.0)


class DeviceState(Enum):
    """Screens the device can show."""

    HOME = auto()
    SESSION_SELECT = auto()
    SETTINGS = auto()
    CHALLENGE_LEVEL = auto()
    BREATH_PACER = auto()
    LOGS = auto()
    LOG = auto()
    ACTIVE_SESSION = auto()
    SESSION_END = auto()


class Device:
    """Holds the current recording, user settings, battery and saved logs."""

    def __init__(self) -> None:
        self.recording = Recording()
        self.state = DeviceState.HOME
        self.breath_pace = 9
        self.challenge_level = 0
        self.battery_level = 100
        self.turned_on = True
        self.logs: list[SessionLog] = []
        self._reset_indicator_times()

    def _reset_indicator_times(self) -> None:
        self.low_indicator_time = 0
        self.medium_indicator_time = 0
        self.high_indicator_time = 0

    def start_session(self, option: int) -> None:
        """Prepare a simulated session: 0 high, 1 medium, other low coherence."""
        self._reset_indicator_times()
        self.recording.reset()
        points, scores = session_data(option)
        self.recording.load(points, scores)
        self.recording.breath_interval = self.breath_pace
        self.recording.challenge_level = self.challenge_level

    def update(self) -> None:
        """Advance the current recording by one step."""
        self.recording.update()

    def save_recording(self, now: datetime | None = None) -> SessionLog:
        """Store a summary of the current recording and return it."""
        when = now if now is not None else datetime.now()
        rec = self.recording
        length = rec.length_of_session
        if length:
            low = self.low_indicator_time / length * 100
            medium = self.medium_indicator_time / length * 100
            high = self.high_indicator_time / length * 100
        else:
            low = medium = high = 0.0
        log = SessionLog(
            date=when.strftime(_DATE_FORMAT),
            challenge_level=rec.challenge_level,
            breath_interval=rec.breath_interval,
            length_of_session=length,
            average_coherence=rec.average_coherence(),
            low_percentage=low,
            medium_percentage=medium,
            high_percentage=high,
            achievement_score=rec.achievement_score,
            plot_points=tuple(rec.plot_points),
        )
        self.logs.append(log)
        return log

    def indicator(self) -> int:
        """Classify the latest coherence score: 0 low, 1 medium, 2 high.

        Each call also credits five seconds to the matching indicator time.
        """
        coherence = self.recording.coherence_score()
        low_bound, high_bound = _MEDIUM_RANGES.get(self.challenge_level, _HARDEST_MEDIUM_RANGE)
        if low_bound <= coherence <= high_bound:
            self.medium_indicator_time += _STEP_SECONDS
            return 1
        if coherence < low_bound:
            self.low_indicator_time += _STEP_SECONDS
            return 0
        self.high_indicator_time += _STEP_SECONDS
        return 2

    def toggle_power(self) -> bool:
        """Flip the power state and return whether the device is now on."""
        self.turned_on = not self.turned_on
        return self.turned_on

    def reset_battery(self) -> None:
        """Recharge the battery to full."""
        self.battery_level = 100

    def log_index_by_date(self, title: str) -> int:
        """Find the log whose date follows the ``Log Summary: `` prefix of a title.

        Returns 0 when no log matches.
        """
        if self.logs and len(title) < _TITLE_PREFIX_LENGTH:
            raise ValueError(f"title too short to hold a date: {title!r}")
        date = title[_TITLE_PREFIX_LENGTH:]
        return next((index for index, log in enumerate(self.logs) if log.date == date), 0)

    def delete_log(self, index: int) -> None:
        """Remove the log at the given position."""
        if not 0 <= index < len(self.logs):
            raise IndexError(f"no log at index {index}")
        del self.logs[index]

    def restore(self) -> None:
        """Restore default settings and erase recorded data and logs."""
        self._reset_indicator_times()
        self.breath_pace = 9
        self.challenge_level = 0
        self.turned_on = True
        self.recording = Recording()
        self.logs.clear()