"""Record selection utilities for the team filter."""

from .selection import FilterCriteria, FilterResult, filter_records

__all__ = [
    "FilterCriteria",
    "FilterResult",
    "filter_records",
]
