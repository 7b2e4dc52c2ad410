"""
Track duration probing through FFmpeg.
"""

import math
import re
import logging
import subprocess
from typing import Optional

from ..exceptions import DependencyError, ProbeError

DURATION_PATTERN = re.compile(r'Duration: (\d+):(\d+):(\d+\.\d+)')


def parse_duration(output: str) -> Optional[int]:
    """
    Extract a duration from FFmpeg's diagnostic output.

    Fractional seconds are rounded up, so a track of 12.01s counts as 13s.

    Args:
        output: Combined stdout/stderr text of ``ffmpeg -i``

    Returns:
        int: Duration in whole seconds, or None if no marker was found
    """
    match = DURATION_PATTERN.search(output)
    if not match:
        return None

    hours = int(match.group(1))
    minutes = int(match.group(2))
    seconds = math.ceil(float(match.group(3)))
    return hours * 3600 + minutes * 60 + seconds


class DurationProber:
    """Runs FFmpeg against a track and reads its duration."""

    def __init__(self, ffmpeg_path: str = "ffmpeg"):
        """
        Initialize the prober.

        Args:
            ffmpeg_path: FFmpeg executable name or path
        """
        self.ffmpeg_path = ffmpeg_path

    def probe(self, path: str) -> int:
        """
        Probe a track's duration.

        Args:
            path: Path to the audio file

        Returns:
            int: Duration in whole seconds

        Raises:
            DependencyError: If FFmpeg cannot be found
            ProbeError: If FFmpeg cannot be started or reports no duration
        """
        output = self._run_ffmpeg(path)
        duration = parse_duration(output)

        if duration is None:
            logging.error(f'No duration found for {path}')
            raise ProbeError("no duration in ffmpeg output", path, output=output)

        logging.debug(f'Probed {path}: {duration}s')
        return duration

    def _run_ffmpeg(self, path: str) -> str:
        """Run ``ffmpeg -i`` and return its combined output."""
        # ffmpeg exits non-zero when no output file is given, so the exit
        # status is not checked
        try:
            result = subprocess.run(
                [self.ffmpeg_path, '-i', path],
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors='replace'
            )
        except FileNotFoundError:
            raise DependencyError(
                "ffmpeg",
                f"FFmpeg is not installed or not found in system PATH ({self.ffmpeg_path})"
            )
        except OSError as e:
            raise ProbeError(f"could not start ffmpeg: {e}", path) from e

        return result.stdout or ''
