"""Simulated heart-rate recording updated in five-second steps."""

from __future__ import annotations

from collections.abc import Sequence

_STEP_SECONDS = 5


class Recording:
    """Accumulates plot points and coherence scores for one session.

    Every update advances the session by five seconds, appends the next five
    plot points and the next coherence score (both cycling through the loaded
    data), and adds that score to the achievement score.
    """

    def __init__(self, challenge_level: int = 0, breath_interval: int = 9) -> None:
        self.challenge_level = challenge_level
        self.breath_interval = breath_interval
        self.length_of_session = 0
        self.achievement_score = 0.0
        self.plot_points: list[float] = []
        self.coherence_scores: list[float] = []
        self._data_points: Sequence[float] = ()
        self._coherence_values: Sequence[float] = ()

    def load(self, data_points: Sequence[float], coherence_values: Sequence[float]) -> None:
        """Set the data the simulation cycles through."""
        if not data_points or not coherence_values:
            raise ValueError("simulation data must not be empty")
        self._data_points = data_points
        self._coherence_values = coherence_values

    def update(self) -> None:
        """Advance the session by five seconds."""
        if not self._data_points or not self._coherence_values:
            raise RuntimeError("no simulation data loaded")
        self.length_of_session += _STEP_SECONDS
        points = self._data_points
        self.plot_points.extend(
            points[second % len(points)]
            for second in range(self.length_of_session - _STEP_SECONDS, self.length_of_session)
        )
        values = self._coherence_values
        score = values[len(self.coherence_scores) % len(values)]
        self.coherence_scores.append(score)
        self.achievement_score += score

    def coherence_score(self) -> float:
        """Return the most recent coherence score."""
        if not self.coherence_scores:
            raise IndexError("no coherence score recorded yet")
        return self.coherence_scores[-1]

    def average_coherence(self) -> float:
        """Return the mean of all coherence scores, or 0 if there are none."""
        if not self.coherence_scores:
            return 0.0
        return self.achievement_score / len(self.coherence_scores)

    def latest_plot_points(self) -> list[float]:
        """Return the five most recent plot points."""
        if len(self.plot_points) < _STEP_SECONDS:
            raise IndexError("fewer than five plot points recorded")
        return self.plot_points[-_STEP_SECONDS:]

    def reset(self) -> None:
        """Clear recorded data; settings and loaded data are kept."""
        self.coherence_scores.clear()
        self.plot_points.clear()
        self.length_of_session = 0
        self.achievement_score = 0.0