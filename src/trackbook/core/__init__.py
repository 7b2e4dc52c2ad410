"""
Core book building modules.
"""

from .builder import BookBuilder
from .cache import DurationCache
from .filename import TrackName, TrackRecord, parse_track_name
from .processor import BookProcessor, BuildResult
from .prober import DurationProber
from .tree import Book, Chapter, Section, SubSection, Track

__all__ = [
    "BookBuilder",
    "DurationCache",
    "TrackName",
    "TrackRecord",
    "parse_track_name",
    "BookProcessor",
    "BuildResult",
    "DurationProber",
    "Book",
    "Chapter",
    "Section",
    "SubSection",
    "Track"
]
