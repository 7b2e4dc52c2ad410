"""
Command-line interface for trackbook.
"""

import argparse
import sys
import logging
from datetime import datetime

from . import __version__
from .config import DEFAULT_CONFIG_FILE, load_config
from .core.cache import DurationCache
from .core.processor import BookProcessor
from .core.prober import DurationProber
from .utils.file_utils import hms
from .utils.progress_tracker import create_progress_tracker, ProcessingTimer
from .exceptions import TrackbookError


def setup_logging(quiet=False):
    """
    Sets up the logging configuration for the application.

    Args:
        quiet (bool): If True, reduces console output verbosity.
    """
    now = datetime.now()
    dt_string = now.strftime("%Y-%m-%d_%H-%M-%S")

    # Configure file logging
    logging.basicConfig(
        filename=f'trackbook_{dt_string}.log',
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    # Add console handler for user feedback (unless quiet mode)
    if not quiet:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)
        console_formatter = logging.Formatter('%(message)s')
        console_handler.setFormatter(console_formatter)
        logging.getLogger().addHandler(console_handler)


def parse_arguments(argv=None):
    """
    Parses command line arguments for the application.

    Returns:
        argparse.Namespace: Parsed command line arguments.
    """
    parser = argparse.ArgumentParser(
        description="trackbook - Build text and HTML track listings with durations for audio books",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Track files must be named BCSUT[N].<ext>: book, chapter (X = 10), section,
sub-section and track digits, optionally followed by N. Chapter 0 tracks
are left out of the listing.

Books, cache file and output location are read from {DEFAULT_CONFIG_FILE}
in the working directory when present.
        """
    )

    parser.add_argument(
        '--config', '-c',
        help=f'Path to a JSON configuration file (default: ./{DEFAULT_CONFIG_FILE} if present)'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Reduce output verbosity'
    )

    parser.add_argument(
        '--version', '-v',
        action='version',
        version=f'trackbook {__version__}'
    )

    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for the CLI application."""
    args = parse_arguments(argv)
    setup_logging(quiet=args.quiet)

    try:
        config = load_config(args.config)

        progress_tracker = create_progress_tracker(quiet=args.quiet)
        processing_timer = ProcessingTimer()
        processing_timer.start()

        cache = DurationCache(config.cache_file, DurationProber(config.ffmpeg))
        processor = BookProcessor(config, cache, progress_tracker=progress_tracker)
        results = processor.process_all()

        processing_duration = processing_timer.stop()

        if not args.quiet:
            print("\nBooks built successfully!")
            for result in results:
                print(f"   - {result.name}: {hms(result.duration)} "
                      f"({result.chapter_count} chapters, {result.track_count} tracks)")
                print(f"     {result.text_file}, {result.html_file}")
            print(f"   - Processing time: {progress_tracker.format_elapsed(processing_duration)}")

        sys.exit(0)

    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        sys.exit(1)
    except TrackbookError as e:
        logging.error(str(e))
        print(f"\nError: {e.get_user_message()}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        logging.error(f'I/O error: {e}')
        print(f"\nI/O error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
