#!/usr/bin/env python3
"""
EITANGOS Vocabulary Monitor - X (Twitter) to Appwrite vocabulary sync.

Command-line entry point:
  - Poll the configured account for new posts
  - Extract "term / translation" pairs ("cat 猫")
  - Upload new pairs to Appwrite, skipping terms already stored
  - Remember the last processed post between runs

Usage:
    python main.py                      # Poll every CHECK_INTERVAL seconds
    python main.py --once               # Single poll, then exit
    python main.py --dry-run --once     # Extract only, no writes
    python main.py --text "cat 猫"      # Try the extractor on one string
    python main.py --seed               # Upload the starter vocabulary

Examples:
    # Development run
    python main.py --once --dry-run --verbose

    # Production run
    python main.py --interval 60
"""

import argparse
import sys

from eitangos import __version__
from eitangos.config import (
    CHECK_INTERVAL,
    DEBUG,
    LAST_POST_ID_FILE,
    MAX_RESULTS,
    TWITTER_USERNAME,
    APPWRITE_DATABASE_ID,
    print_config_summary,
    validate_config,
    validate_polling,
)
from eitangos.extraction import extract_vocabulary
from eitangos.monitor import MonitorConfig, PollResult, VocabularyMonitor, run_forever
from eitangos.seed import seed_storage
from eitangos.sources import TwitterSource
from eitangos.storage import (
    AppwriteStorage,
    FileCursorStore,
    MockAppwriteStorage,
    VocabularyStorage,
)


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="eitangos-monitor",
        description="Watch an X account for vocabulary posts and store them in Appwrite.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                           Poll forever with defaults
  %(prog)s --once                    Poll a single time and exit
  %(prog)s --dry-run --once          Extract only, skip storage
  %(prog)s --interval 300            Poll every 5 minutes
  %(prog)s --reset-cursor --once     Re-read the latest page of posts
  %(prog)s --text "make a shift シフトの作成"
  %(prog)s --seed                    Upload the starter vocabulary
        """,
    )

    # Core options
    parser.add_argument(
        "--once",
        action="store_true",
        help="Poll a single time and exit",
    )

    parser.add_argument(
        "--dry-run", "-n",
        action="store_true",
        help="Extract pairs but skip storage and cursor writes",
    )

    parser.add_argument(
        "--interval", "-i",
        type=float,
        default=None,
        metavar="SECONDS",
        help=f"Seconds between polls (default: {CHECK_INTERVAL})",
    )

    parser.add_argument(
        "--max-results", "-m",
        type=int,
        default=None,
        metavar="N",
        help=f"Posts requested per poll, 5-100 (default: {MAX_RESULTS})",
    )

    parser.add_argument(
        "--max-cycles",
        type=int,
        default=None,
        metavar="N",
        help="Stop after N polls (default: run until interrupted)",
    )

    # Cursor options
    parser.add_argument(
        "--cursor-file",
        default=None,
        metavar="PATH",
        help=f"File holding the last processed post id (default: {LAST_POST_ID_FILE})",
    )

    parser.add_argument(
        "--reset-cursor",
        action="store_true",
        help="Forget the last processed post before polling",
    )

    # One-off modes
    parser.add_argument(
        "--text",
        default=None,
        metavar="TEXT",
        help="Extract a pair from TEXT, print it and exit (no network)",
    )

    parser.add_argument(
        "--seed",
        action="store_true",
        help="Upload the starter vocabulary and exit",
    )

    # Output options
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show detailed progress and debug info (also enabled by DEBUG=true)",
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Hide the banner, per-cycle status lines and summaries of polls that found nothing",
    )

    # Info options
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Show current configuration and exit",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def show_config() -> None:
    """Display current configuration."""
    print("=" * 60)
    print("EITANGOS Monitor Configuration")
    print("=" * 60)
    print_config_summary()

    errors = validate_config()
    if errors:
        print("\nConfiguration warnings:")
        for error in errors:
            print(f"  ⚠️  {error}")
    else:
        print("\n✓ Configuration valid")
    print("=" * 60)


def report_config_errors(errors: list) -> None:
    """Print missing configuration in the form of a fix-it list."""
    print("❌ Missing or invalid configuration:")
    for error in errors:
        print(f"   - {error}")
    print("\nPlease create a .env file based on .env.example")


def extract_text(text: str) -> int:
    """Run the extractor on one string and print the outcome."""
    pair = extract_vocabulary(text)
    if pair is None:
        print("No vocabulary pair found")
    else:
        print(f"Term:        {pair.term}")
        print(f"Translation: {pair.translation}")
    return 0


def get_storage(dry_run: bool) -> VocabularyStorage:
    """Get the configured storage backend."""
    if dry_run:
        return MockAppwriteStorage()
    return AppwriteStorage()


def run_seed(args) -> int:
    """Upload the starter vocabulary."""
    if not args.dry_run:
        errors = validate_config(require_twitter=False)
        if errors:
            report_config_errors(errors)
            return 1

    storage = get_storage(args.dry_run)
    print(f"Uploading starter vocabulary to {storage.name}...\n")

    result = seed_storage(storage)

    print("\nUpload summary:")
    print(f"  Uploaded: {result.inserted}")
    print(f"  Existing: {result.existing}")
    print(f"  Failed:   {result.failed}")

    return 1 if result.failed else 0


def print_result_summary(result: PollResult, quiet: bool = False) -> None:
    """Print the poll result summary."""
    if quiet and result.success and not result.pairs_found:
        return
    print(result.to_summary())


def main(argv: list = None) -> int:
    """
    Main entry point.

    Args:
        argv: Command-line arguments (default: sys.argv[1:]).

    Returns:
        Exit code (0 = success, 1 = error, 130 = interrupted).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    # Handle info and one-off modes
    if args.show_config:
        show_config()
        return 0

    if args.text is not None:
        return extract_text(args.text)

    if args.seed:
        return run_seed(args)

    interval = args.interval if args.interval is not None else CHECK_INTERVAL
    max_results = args.max_results if args.max_results is not None else MAX_RESULTS

    errors = validate_config(require_appwrite=not args.dry_run)
    if args.interval is not None or args.max_results is not None:
        errors.extend(validate_polling(interval, max_results, "--interval", "--max-results"))
    if args.max_cycles is not None and args.max_cycles < 1:
        errors.append("--max-cycles must be at least 1")
    if errors:
        report_config_errors(errors)
        return 1

    config = MonitorConfig(
        max_results=max_results,
        interval_seconds=interval,
        dry_run=args.dry_run,
        verbose=args.verbose or DEBUG,
        quiet=args.quiet,
    )

    # Print header (unless quiet)
    if not args.quiet:
        print("=" * 60)
        print("EITANGOS Vocabulary Monitor")
        print("=" * 60)
        print(f"Monitoring: @{TWITTER_USERNAME}")
        print(f"Interval:   {config.interval_seconds:g}s")
        print(f"Database:   {APPWRITE_DATABASE_ID or '(not set)'}")
        if args.dry_run:
            print("Mode:       DRY RUN (no storage writes)")
        if config.verbose:
            print("\nConfiguration:")
            print_config_summary()
        print("=" * 60)

    cursor_store = FileCursorStore(args.cursor_file)
    if args.reset_cursor:
        cursor_store.clear()

    monitor = VocabularyMonitor(
        source=TwitterSource(),
        storage=get_storage(args.dry_run),
        cursor_store=cursor_store,
        config=config,
    )

    try:
        if not args.dry_run and not monitor.check_connection():
            print("Failed to connect to Appwrite. Please check your configuration.")
            return 1

        if args.once:
            result = monitor.poll_once()
            print_result_summary(result, args.quiet)
            return 0 if result.success else 1

        if not args.quiet:
            print("\n✨ Monitor is running. Press Ctrl+C to stop.")

        run_forever(
            monitor,
            max_cycles=args.max_cycles,
            on_result=lambda r: print_result_summary(r, args.quiet),
        )
        return 0

    except KeyboardInterrupt:
        print("\n\nShutting down monitor...")
        return 130


if __name__ == "__main__":
    sys.exit(main())
