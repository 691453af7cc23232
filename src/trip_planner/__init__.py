"""Trip planner: journey reconciliation and realtime correlation for Transport for NSW."""

__version__ = "0.1.0"
