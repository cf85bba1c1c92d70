"""Input adapters that pull raw box scores from the stats API."""

from .stats import FetchFailure, fetch_all_stats, resolve_window

__all__ = [
    "FetchFailure",
    "fetch_all_stats",
    "resolve_window",
]
