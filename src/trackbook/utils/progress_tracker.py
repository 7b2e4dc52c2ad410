"""
Progress tracking for book builds.
"""

import os
import time
import logging
from contextlib import contextmanager
from typing import Any, Optional

from tqdm import tqdm


class ProgressTracker:
    """
    Progress display for the slow part of a build: resolving track durations.

    Progress is reported per track rather than by parsing FFmpeg output.
    """

    def __init__(self, use_progress_bars: bool = True, quiet: bool = False):
        """
        Initialize progress tracker.

        Args:
            use_progress_bars: Whether to draw tqdm progress bars
            quiet: Suppress most output except errors
        """
        self.use_progress_bars = use_progress_bars and not quiet
        self.quiet = quiet
        self.logger = logging.getLogger(__name__)

    @contextmanager
    def scan_progress(self, total_files: int, book_name: str):
        """
        Context manager for duration scanning progress of one book.

        Args:
            total_files: Number of tracks in the book
            book_name: Name shown next to the bar
        """
        with tqdm(
            total=total_files,
            desc=f"Scanning {book_name}",
            unit="track",
            colour="green",
            leave=False,
            disable=not self.use_progress_bars
        ) as pbar:
            yield ProgressUpdate(pbar)

    def print_step(self, message: str, step: Optional[int] = None, total_steps: Optional[int] = None):
        """
        Print a processing step message.

        Args:
            message: The message to print
            step: Current step number (optional)
            total_steps: Total number of steps (optional)
        """
        if self.quiet:
            return

        if step is not None and total_steps is not None:
            print(f"[{step}/{total_steps}] {message}")
        else:
            print(f"* {message}")

    def format_elapsed(self, seconds: float) -> str:
        """Format elapsed wall-clock time in a human-readable way."""
        if seconds < 60:
            return f"{seconds:.1f}s"
        elif seconds < 3600:
            minutes = int(seconds // 60)
            secs = seconds % 60
            return f"{minutes}m {secs:.1f}s"
        else:
            hours = int(seconds // 3600)
            minutes = int((seconds % 3600) // 60)
            secs = seconds % 60
            return f"{hours}h {minutes}m {secs:.1f}s"


class ProgressUpdate:
    """Thin wrapper so callers never touch tqdm directly."""

    def __init__(self, pbar: Any):
        self.pbar = pbar

    def update(self, increment: int = 1, description: Optional[str] = None):
        """
        Advance the bar.

        Args:
            increment: Amount to increment (default: 1)
            description: Optional text shown after the bar
        """
        if description:
            self.pbar.set_postfix_str(description, refresh=False)
        self.pbar.update(increment)


class ProcessingTimer:
    """Simple timer for measuring processing duration."""

    def __init__(self):
        self.start_time = None
        self.end_time = None

    def start(self):
        """Start the timer."""
        self.start_time = time.time()

    def stop(self):
        """Stop the timer and return duration."""
        self.end_time = time.time()
        return self.get_duration()

    def get_duration(self) -> float:
        """Get the current duration in seconds."""
        if self.start_time is None:
            return 0.0
        end_time = self.end_time or time.time()
        return end_time - self.start_time


def create_progress_tracker(quiet: bool = False, disable_bars: bool = False) -> ProgressTracker:
    """
    Create a progress tracker with appropriate settings.

    Args:
        quiet: Suppress most output
        disable_bars: Disable progress bars

    Returns:
        Configured ProgressTracker instance
    """
    return ProgressTracker(use_progress_bars=not disable_bars, quiet=quiet)


def format_file_status(filename: str, status: str, max_width: int = 40) -> str:
    """
    Format a filename for display in progress indicators.

    Args:
        filename: The filename to format
        status: Status string (e.g., "CACHED", "PROBED")
        max_width: Maximum width for the filename display

    Returns:
        Formatted string for display
    """
    basename = os.path.basename(filename)

    if len(basename) <= max_width:
        return f"[{status}] {basename}"
    truncated = basename[:max_width - 3] + "..."
    return f"[{status}] {truncated}"
