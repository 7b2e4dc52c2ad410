"""
Builds the book tree from a directory of track files.
"""

import os
import logging
from typing import Iterable, List, Optional

from .cache import DurationCache
from .filename import TrackRecord, parse_track_name
from .tree import Book, Chapter, Section, SubSection, Track
from ..utils.file_utils import DEFAULT_EXTENSIONS, find_track_files, group_by
from ..utils.progress_tracker import ProgressTracker, format_file_status

# front matter tracks carry chapter 0 and are left out of the book
IGNORED_CHAPTER = 0


class BookBuilder:
    """Turns a book directory into a Book tree."""

    def __init__(self, cache: DurationCache, extensions: Iterable[str] = DEFAULT_EXTENSIONS,
                 progress_tracker: Optional[ProgressTracker] = None):
        """
        Initialize the builder.

        Args:
            cache: Duration cache used to resolve every track's length
            extensions: Audio file extensions to pick up
            progress_tracker: Progress tracking instance
        """
        self.cache = cache
        self.extensions = tuple(extensions)
        self.progress_tracker = progress_tracker

    def build(self, directory: str) -> Book:
        """
        Build the tree for one book directory.

        Any malformed name or failed probe aborts the whole build.

        Args:
            directory: Book root directory

        Returns:
            Book: The assembled tree, possibly without chapters
        """
        records = self.collect_records(directory)
        kept = [record for record in records if record.chapter_number != IGNORED_CHAPTER]

        skipped = len(records) - len(kept)
        if skipped:
            logging.info(f'Skipped {skipped} front matter tracks in {directory}')

        return self.assemble(kept)

    def collect_records(self, directory: str) -> List[TrackRecord]:
        """Parse and time every track file below the directory, in path order."""
        track_files = find_track_files(directory, self.extensions)

        if self.progress_tracker is None:
            return [self._make_record(path) for path in track_files]

        records = []
        book_name = os.path.basename(os.path.normpath(directory))
        with self.progress_tracker.scan_progress(len(track_files), book_name) as progress:
            for path in track_files:
                status = "CACHED" if path in self.cache else "PROBED"
                records.append(self._make_record(path))
                progress.update(1, format_file_status(str(path), status))
        return records

    def assemble(self, records: List[TrackRecord]) -> Book:
        """
        Nest records into chapters, sections and sub-sections.

        Groups keep the order in which their key first appears in
        ``records``.
        """
        chapters = []
        for chapter_number, chapter_records in group_by(records, _chapter_key).items():
            sections = []
            for section_number, section_records in group_by(chapter_records, _section_key).items():
                sub_sections = []
                for sub_section_number, sub_section_records in group_by(section_records, _sub_section_key).items():
                    tracks = tuple(
                        Track(
                            number=record.track_number,
                            name=record.base_name,
                            duration=record.duration_seconds
                        )
                        for record in sub_section_records
                    )
                    sub_sections.append(SubSection(number=sub_section_number, tracks=tracks))

                sections.append(Section(number=section_number, sub_sections=tuple(sub_sections)))

            chapters.append(Chapter(number=chapter_number, sections=tuple(sections)))

        return Book(chapters=tuple(chapters))

    def _make_record(self, path) -> TrackRecord:
        base_name = path.stem
        name = parse_track_name(base_name, str(path))
        duration = self.cache.scan(path)
        return TrackRecord.from_name(name, str(path), base_name, duration)


def _chapter_key(record: TrackRecord) -> int:
    return record.chapter_number


def _section_key(record: TrackRecord) -> int:
    return record.section_number


def _sub_section_key(record: TrackRecord) -> int:
    return record.sub_section_number
