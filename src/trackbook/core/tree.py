"""
Book tree model: Book -> Chapter -> Section -> SubSection -> Track.

Every level sums its children's durations. Sections and tracks are rendered
against their immediate parent so each line shows its own length next to
the length of the block it belongs to.
"""

import html
from dataclasses import dataclass
from typing import Tuple

from ..utils.file_utils import hms


@dataclass(frozen=True)
class Track:
    """A single audio file; its duration is the probed value."""
    number: int
    name: str
    duration: int

    def to_text(self, parent: 'SubSection') -> str:
        return f"  * {self.name}  ({self._duration_label(parent)})"

    def to_html(self, parent: 'SubSection') -> str:
        return f"<li>{html.escape(self.name)}  ({self._duration_label(parent)})</li>"

    def _duration_label(self, parent: 'SubSection') -> str:
        # a lone track would only repeat its own length
        if len(parent.tracks) == 1:
            return hms(self.duration)
        return f"{hms(self.duration)} / {hms(parent.duration)}"


@dataclass(frozen=True)
class SubSection:
    number: int
    tracks: Tuple[Track, ...]

    @property
    def duration(self) -> int:
        return sum(track.duration for track in self.tracks)

    def to_text(self) -> str:
        return "\n".join(track.to_text(self) for track in self.tracks)

    def to_html(self) -> str:
        items = "\n".join(track.to_html(self) for track in self.tracks)
        return f"<ul>\n{items}\n</ul>"


@dataclass(frozen=True)
class Section:
    number: int
    sub_sections: Tuple[SubSection, ...]

    @property
    def duration(self) -> int:
        return sum(sub_section.duration for sub_section in self.sub_sections)

    def heading(self, parent: 'Chapter') -> str:
        """Section label, e.g. ``"3-2 (12:40 / 1:02:15)"``."""
        return f"{parent.number}-{self.number} ({hms(self.duration)} / {hms(parent.duration)})"

    def to_text(self, parent: 'Chapter') -> str:
        lines = [self.heading(parent)]
        lines += [sub_section.to_text() for sub_section in self.sub_sections]
        return "\n\n".join(lines)

    def to_html(self, parent: 'Chapter') -> str:
        parts = [f"<h2>{html.escape(self.heading(parent))}</h2>"]
        parts += [sub_section.to_html() for sub_section in self.sub_sections]
        return "\n".join(parts)


@dataclass(frozen=True)
class Chapter:
    number: int
    sections: Tuple[Section, ...]

    @property
    def duration(self) -> int:
        return sum(section.duration for section in self.sections)

    def to_text(self) -> str:
        return "\n\n".join(section.to_text(self) for section in self.sections)

    def to_html(self) -> str:
        body = "\n".join(section.to_html(self) for section in self.sections)
        return f'<section class="chapter">\n{body}\n</section>'


@dataclass(frozen=True)
class Book:
    chapters: Tuple[Chapter, ...]

    @property
    def duration(self) -> int:
        return sum(chapter.duration for chapter in self.chapters)

    @property
    def track_count(self) -> int:
        return sum(
            len(sub_section.tracks)
            for chapter in self.chapters
            for section in chapter.sections
            for sub_section in section.sub_sections
        )

    def to_text(self) -> str:
        return "\n\n".join(chapter.to_text() for chapter in self.chapters)

    def to_html(self) -> str:
        return "\n".join(chapter.to_html() for chapter in self.chapters)

    def __str__(self):
        return self.to_text()
