"""Services for uptime reconstruction and period merging."""
from .periods import Period, flatten_periods, summarize_periods
from .ping_store import PingStore, SqlPingStore
from .uptime_calculator import (
    NO_HISTORY_STATE,
    RunState,
    UptimeCalculator,
    UptimeRunBuilder,
    reconstruct_periods,
)

__all__ = [
    "Period",
    "flatten_periods",
    "summarize_periods",
    "PingStore",
    "SqlPingStore",
    "NO_HISTORY_STATE",
    "RunState",
    "UptimeCalculator",
    "UptimeRunBuilder",
    "reconstruct_periods",
]
