"""
trackbook - Track listings with durations for audio books

Organizes a directory of numbered audio tracks into chapters, sections and
sub-sections, probes each track's length with FFmpeg (cached in a JSON
file) and renders the result as plain text and HTML.
"""

__version__ = "1.0.0"

from .core.builder import BookBuilder
from .core.cache import DurationCache
from .core.prober import DurationProber
from .exceptions import TrackbookError

__all__ = [
    "BookBuilder",
    "DurationCache",
    "DurationProber",
    "TrackbookError",
    "__version__"
]
