"""Immutable summary of a finished recording session."""

from __future__ import annotations

from dataclasses import dataclass, field


def truncate_percentage(value: float) -> float:
    """Truncate a percentage toward zero to one decimal place."""
    return int(value * 10) / 10.0


@dataclass(frozen=True)
class SessionLog:
    """Summary of a session: settings, coherence statistics and the full graph.

    The date has the form ``dd.MM.yyyy hh:mm:ss``; the challenge level runs
    from 0 to 3; percentages are truncated to one decimal place.
    """

    date: str
    challenge_level: int
    breath_interval: int
    length_of_session: int
    average_coherence: float
    low_percentage: float
    medium_percentage: float
    high_percentage: float
    achievement_score: float
    plot_points: tuple[float, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "low_percentage", truncate_percentage(self.low_percentage))
        object.__setattr__(self, "medium_percentage", truncate_percentage(self.medium_percentage))
        object.__setattr__(self, "high_percentage", truncate_percentage(self.high_percentage))
        object.__setattr__(self, "plot_points", tuple(self.plot_points))