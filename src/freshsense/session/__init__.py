"""Command surface and render state for one monitor session."""

from freshsense.session.monitor import FreshnessMonitor
from freshsense.session.state import ChannelReading, MonitorState, state_to_jsonable

__all__ = ["ChannelReading", "FreshnessMonitor", "MonitorState", "state_to_jsonable"]
