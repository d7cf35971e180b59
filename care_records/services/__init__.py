"""
Services for the record package.

This package contains the JSON codec and the Result type it reports
decode outcomes with.
"""

from .codec import RecordCodec, decode, encode
from .result import Result

__all__ = [
    "RecordCodec",
    "Result",
    "decode",
    "encode",
]
