"""
Track metadata parsed from base file names.
"""

import re
from dataclasses import dataclass
from typing import Optional

from ..exceptions import FormatError

# book, chapter (X = 10), section, sub-section, track, optional trailing N
TRACK_NAME_PATTERN = re.compile(r'([0-9])([0-9X])([0-9])([0-9])([0-9])N?')

CHAPTER_TEN = 'X'


@dataclass(frozen=True)
class TrackName:
    """Numbers encoded in a track's base name."""
    book: int
    chapter: int
    section: int
    sub_section: int
    track: int


@dataclass(frozen=True)
class TrackRecord:
    """A parsed track together with its probed duration."""
    book_number: int
    chapter_number: int
    section_number: int
    sub_section_number: int
    track_number: int
    source_path: str
    base_name: str
    duration_seconds: int

    @classmethod
    def from_name(cls, name: TrackName, source_path: str, base_name: str,
                  duration_seconds: int) -> 'TrackRecord':
        return cls(
            book_number=name.book,
            chapter_number=name.chapter,
            section_number=name.section,
            sub_section_number=name.sub_section,
            track_number=name.track,
            source_path=source_path,
            base_name=base_name,
            duration_seconds=duration_seconds
        )


def parse_track_name(base_name: str, source_path: Optional[str] = None) -> TrackName:
    """
    Parse the numbers out of a track's base name.

    Args:
        base_name: File name without directory or extension, e.g. ``"2X234N"``
        source_path: Full path, used only for error reporting

    Returns:
        TrackName: The five positional numbers

    Raises:
        FormatError: If the name does not follow the convention
    """
    match = TRACK_NAME_PATTERN.fullmatch(base_name)
    if not match:
        raise FormatError(base_name, source_path)

    book, chapter, section, sub_section, track = match.groups()
    return TrackName(
        book=int(book),
        chapter=10 if chapter == CHAPTER_TEN else int(chapter),
        section=int(section),
        sub_section=int(sub_section),
        track=int(track)
    )
