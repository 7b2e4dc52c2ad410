"""
Build orchestration: books in, text/HTML files and an index out.
"""

import os
import logging
from dataclasses import dataclass
from typing import List, Optional

from .builder import BookBuilder
from .cache import DurationCache
from .renderer import render_book_page, render_index
from .tree import Book
from ..config import BuildConfig
from ..utils.file_utils import ensure_directory_exists, hms
from ..utils.progress_tracker import ProgressTracker

INDEX_FILE = "index.html"


@dataclass
class BuildResult:
    """Result of building one book."""
    name: str
    book: Book
    text_file: str
    html_file: str

    @property
    def chapter_count(self) -> int:
        return len(self.book.chapters)

    @property
    def track_count(self) -> int:
        return self.book.track_count

    @property
    def duration(self) -> int:
        return self.book.duration


class BookProcessor:
    """Builds every configured book in order and writes the outputs."""

    def __init__(self, config: BuildConfig, cache: DurationCache,
                 progress_tracker: Optional[ProgressTracker] = None):
        """
        Initialize the processor.

        Args:
            config: Build configuration
            cache: Duration cache shared by all books of the run
            progress_tracker: Progress tracking instance
        """
        self.config = config
        self.cache = cache
        self.progress_tracker = progress_tracker
        self.builder = BookBuilder(
            cache, extensions=config.extensions, progress_tracker=progress_tracker
        )

    def process_all(self) -> List[BuildResult]:
        """
        Build every book, then write the index page.

        The first error aborts the run; books finished before it keep their
        output files.
        """
        results = []
        total = len(self.config.books)

        for step, book_dir in enumerate(self.config.books, 1):
            if self.progress_tracker:
                self.progress_tracker.print_step(f"Building {book_dir}", step, total)
            results.append(self.process_book(book_dir))

        self.write_index(results)
        return results

    def process_book(self, book_dir: str) -> BuildResult:
        """
        Build one book and write its text and HTML files.

        The tree is complete before anything is written, so a failing book
        leaves no output behind.
        """
        name = os.path.basename(os.path.normpath(book_dir))
        book = self.builder.build(book_dir)

        ensure_directory_exists(self.config.output_dir)
        text_file = os.path.join(self.config.output_dir, f"{name}.txt")
        html_file = os.path.join(self.config.output_dir, f"{name}.html")

        text = book.to_text()
        page = render_book_page(name, book.to_html())

        with open(text_file, 'w', encoding='utf-8') as f:
            f.write(text)

        with open(html_file, 'w', encoding='utf-8') as f:
            f.write(page)

        logging.info(
            f'Built {name}: {len(book.chapters)} chapters, {book.track_count} tracks, '
            f'{hms(book.duration)}'
        )
        return BuildResult(name=name, book=book, text_file=text_file, html_file=html_file)

    def write_index(self, results: List[BuildResult]) -> str:
        """Write the index page linking each built book and return its path."""
        ensure_directory_exists(self.config.output_dir)
        index_file = os.path.join(self.config.output_dir, INDEX_FILE)
        paths = [os.path.basename(result.html_file) for result in results]

        with open(index_file, 'w', encoding='utf-8') as f:
            f.write(render_index(self.config.index_title, paths))

        logging.info(f'Wrote index with {len(paths)} books to {index_file}')
        return index_file
