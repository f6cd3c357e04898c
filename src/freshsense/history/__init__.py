"""Rolling per-channel history for trend display."""

from freshsense.history.buffer import HistoryBuffer

__all__ = ["HistoryBuffer"]
