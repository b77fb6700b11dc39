"""Results pipeline data models."""

from f1results.models.raw import RawResult
from f1results.models.result import NOT_AVAILABLE, UNKNOWN_DRIVER, UNKNOWN_TEAM, ResultRecord
from f1results.models.session import SessionIdentifier, SessionKind
from f1results.models.views import DriverStanding, EventSummary, EventView

__all__ = [
    "DriverStanding",
    "EventSummary",
    "EventView",
    "NOT_AVAILABLE",
    "RawResult",
    "ResultRecord",
    "SessionIdentifier",
    "SessionKind",
    "UNKNOWN_DRIVER",
    "UNKNOWN_TEAM",
]
