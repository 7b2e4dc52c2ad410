"""
Utility modules for book building.
"""

from .progress_tracker import create_progress_tracker, ProcessingTimer
from .file_utils import find_track_files, group_by, hms

__all__ = [
    "create_progress_tracker",
    "ProcessingTimer",
    "find_track_files",
    "group_by",
    "hms"
]
