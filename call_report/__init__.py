"""Call center weekly KPI report package."""

from .aggregator import aggregate, resolve_weeks
from .errors import MalformedRecord, UnknownWeek
from .models import AggregatedMetrics, CallTotals, WeeklyCallRecord
from .presentation import ReportView, build_report_view
from .session import ReportSession
from .storage import ReportStorage
from .store import ImportResult, RecordStore

__all__ = [
    "AggregatedMetrics",
    "CallTotals",
    "ImportResult",
    "MalformedRecord",
    "RecordStore",
    "ReportSession",
    "ReportStorage",
    "ReportView",
    "UnknownWeek",
    "WeeklyCallRecord",
    "aggregate",
    "build_report_view",
    "resolve_weeks",
]
