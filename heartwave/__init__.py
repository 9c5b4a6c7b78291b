"""Simulated HRV coherence trainer: sessions, coherence indicators, session logs and a console front panel."""

__version__ = "0.1.0"

__all__ = ["__version__"]