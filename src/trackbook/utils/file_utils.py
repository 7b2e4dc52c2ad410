"""
File and formatting helpers for book building.
"""

import os
import logging
from collections import OrderedDict
from pathlib import Path
from typing import Callable, Dict, Iterable, List, TypeVar, Union

from ..exceptions import ValidationError

T = TypeVar('T')

DEFAULT_EXTENSIONS = ('.mp3',)


def hms(seconds: int) -> str:
    """
    Format whole seconds as MM:SS, or H:MM:SS from one hour up.

    Args:
        seconds: Duration in seconds

    Returns:
        str: Formatted duration, e.g. ``"01:05"`` or ``"1:01:01"``
    """
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    if hours == 0:
        return f"{minutes:02d}:{seconds:02d}"
    return f"{hours}:{minutes:02d}:{seconds:02d}"


def find_track_files(directory: Union[str, Path],
                     extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> List[Path]:
    """
    Recursively list audio files below a directory.

    Hidden files and anything inside hidden directories are skipped, so
    sidecars such as macOS "._11111.mp3" never reach the name parser.

    The result is sorted by plain full path string; grouping of tracks
    relies on this order. This differs from component-wise ordering where
    "/" sorts first: here "a-b/..." comes before "a/...".

    Args:
        directory: Book root directory
        extensions: File extensions to include (case-sensitive, with dot)

    Returns:
        List of matching file paths

    Raises:
        ValidationError: If the directory does not exist
    """
    root = Path(directory)
    if not root.is_dir():
        raise ValidationError(f"Book directory does not exist: {root}", "path", str(root))

    wanted = tuple(extensions)
    track_files = [
        path for path in root.rglob('*')
        if path.suffix in wanted and path.is_file()
        and not any(part.startswith('.') for part in path.relative_to(root).parts)
    ]
    track_files.sort(key=str)

    logging.info(f'Found {len(track_files)} track files in {root}')
    return track_files


def group_by(items: Iterable[T], key: Callable[[T], int]) -> Dict[int, List[T]]:
    """
    Partition items by key, keeping keys in first-seen order.

    Args:
        items: Items to group
        key: Function returning each item's group key

    Returns:
        Ordered mapping of key to the items carrying it, in input order
    """
    groups = OrderedDict()
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups


def ensure_directory_exists(directory: Union[str, Path]):
    """
    Ensure that a directory exists, creating it if necessary.

    Args:
        directory: Path to the directory
    """
    if not os.path.exists(directory):
        try:
            os.makedirs(directory, exist_ok=True)
        except OSError as e:
            logging.error(f"Failed to create directory {directory}: {e}")
            raise
