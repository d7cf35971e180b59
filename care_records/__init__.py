"""Record schemas for UWB location tracking and patient events.

This package contains the immutable record models and the JSON codec
that moves them across service boundaries.
"""

from care_records.observability import configure_logging

__all__ = ["configure_logging"]
