"""
Vocabulary Monitor - Core polling logic.

This module orchestrates one poll and the polling loop:

    Cursor → Feed → Extraction → Storage → Cursor → Summary

Steps of a poll:
1. Load the cursor (id of the last processed post)
2. Fetch posts newer than the cursor, oldest first
3. Extract a vocabulary pair from each post
4. Save new pairs, skipping terms that are already stored
5. Advance the cursor after every processed post
6. Return a summary

Design principles:
- Error isolation: a failed save or a failed poll doesn't stop the loop
- Idempotency: re-reading posts never duplicates stored terms
- Dry-run support: extract without writing pairs or the cursor
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, List, Optional, Dict, Any
import time
import traceback

from eitangos.config import CHECK_INTERVAL, MAX_RESULTS
from eitangos.extraction.extractor import VocabularyExtractor
from eitangos.models.post import RawPost
from eitangos.models.vocabulary import VocabularyPair
from eitangos.sources.base import PostSource
from eitangos.storage.base import SaveStatus, VocabularyStorage
from eitangos.storage.cursor import CursorStore, MemoryCursorStore


# =============================================================================
# Poll Result Data Structures
# =============================================================================

@dataclass
class PostOutcome:
    """What happened to a single post."""
    post_id: str
    text: str
    status: str  # uploaded, existing, skipped, error, extracted (dry-run)
    pair: Optional[VocabularyPair] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {"post_id": self.post_id, "status": self.status}
        if self.pair:
            data["term"] = self.pair.term
            data["translation"] = self.pair.translation
        return data


@dataclass
class PollResult:
    """Complete result of one poll."""
    started_at: datetime
    finished_at: Optional[datetime] = None

    posts_checked: int = 0
    uploaded: int = 0
    existing: int = 0
    skipped: int = 0
    errors: int = 0

    cursor: Optional[str] = None
    rate_limited: bool = False
    dry_run: bool = False

    entries: List[PostOutcome] = field(default_factory=list)
    messages: List[str] = field(default_factory=list)

    @property
    def pairs_found(self) -> int:
        """Number of posts that yielded a pair."""
        return sum(1 for e in self.entries if e.pair is not None)

    @property
    def success(self) -> bool:
        return self.errors == 0 and not self.messages

    @property
    def duration_seconds(self) -> float:
        """Total poll duration in seconds."""
        if self.finished_at:
            return (self.finished_at - self.started_at).total_seconds()
        return 0.0

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly summary."""
        return {
            "success": self.success,
            "timestamp": self.started_at.isoformat(),
            "posts_checked": self.posts_checked,
            "uploaded": self.uploaded,
            "existing": self.existing,
            "skipped": self.skipped,
            "errors": self.errors,
            "cursor": self.cursor,
            "rate_limited": self.rate_limited,
            "dry_run": self.dry_run,
            "results": [e.to_dict() for e in self.entries if e.pair is not None],
        }

    def to_summary(self) -> str:
        """Generate a human-readable summary."""
        lines = [
            "=" * 60,
            "POLL SUMMARY",
            "=" * 60,
            f"Started:  {self.started_at.strftime('%Y-%m-%d %H:%M:%S')}",
            f"Duration: {self.duration_seconds:.2f}s",
            f"Mode:     {'DRY RUN' if self.dry_run else 'LIVE'}",
            "",
            f"Posts checked: {self.posts_checked}",
            f"Pairs found:   {self.pairs_found}",
        ]

        if self.dry_run:
            lines.append("\nStorage: SKIPPED (dry-run mode)")
        else:
            lines.extend([
                "",
                "Storage:",
                f"  Uploaded: {self.uploaded}",
                f"  Existing: {self.existing}",
                f"  Failed:   {self.errors}",
            ])

        lines.append(f"\nSkipped (not vocabulary): {self.skipped}")
        lines.append(f"Cursor: {self.cursor or '(none)'}")

        if self.rate_limited:
            lines.append("Feed: RATE LIMITED")

        if self.messages:
            lines.extend([
                "",
                "Errors:",
            ])
            for message in self.messages[:5]:  # Show first 5
                lines.append(f"  - {message}")

        lines.append("=" * 60)
        return "\n".join(lines)


# =============================================================================
# Monitor Configuration
# =============================================================================

@dataclass
class MonitorConfig:
    """
    Configuration for the monitor.

    CLI arguments override config file defaults.
    """
    max_results: int = MAX_RESULTS
    interval_seconds: float = CHECK_INTERVAL
    dry_run: bool = False
    verbose: bool = False
    quiet: bool = False  # no per-cycle status line in run_forever


# =============================================================================
# Monitor Class
# =============================================================================

class VocabularyMonitor:
    """
    Polls a post feed and stores the vocabulary it finds.

    Usage:
        monitor = VocabularyMonitor(TwitterSource(), AppwriteStorage(), FileCursorStore())
        result = monitor.poll_once()
        print(result.to_summary())
    """

    def __init__(
        self,
        source: PostSource,
        storage: VocabularyStorage,
        cursor_store: CursorStore = None,
        extractor: VocabularyExtractor = None,
        config: MonitorConfig = None,
    ):
        """
        Initialize the monitor.

        Args:
            source: Feed to poll.
            storage: Where new pairs go.
            cursor_store: Cursor persistence. Defaults to an in-memory store.
            extractor: Text splitter. Defaults to English/Japanese.
            config: Monitor configuration. Defaults to MonitorConfig().
        """
        self.source = source
        self.storage = storage
        self.cursor_store = cursor_store if cursor_store is not None else MemoryCursorStore()
        self.extractor = extractor or VocabularyExtractor()
        self.config = config or MonitorConfig()

    def check_connection(self) -> bool:
        """
        Verify the store is reachable.

        Returns:
            True if the store answered a count request.
        """
        print(f"[monitor] Testing {self.storage.name} connection...")
        try:
            total = self.storage.count()
        except (RuntimeError, ValueError) as e:
            print(f"[monitor] {self.storage.name} connection failed: {e}")
            return False

        print(f"[monitor] Connection successful. Current vocabulary count: {total}")
        return True

    def _process_post(self, post: RawPost, result: PollResult) -> None:
        """Extract from one post and save the pair, recording the outcome."""
        if self.config.verbose:
            print(f"[monitor] Post: {post.text!r}")

        pair = self.extractor.extract(post.text)

        if pair is None:
            if self.config.verbose:
                print("[monitor] Not vocabulary format, skipping")
            result.skipped += 1
            result.entries.append(PostOutcome(post.id, post.text, "skipped"))
            return

        if self.config.verbose:
            print(f"[monitor] Found: {pair}")

        if self.config.dry_run:
            result.entries.append(PostOutcome(post.id, post.text, "extracted", pair))
            return

        status = self.storage.save_pair(pair)

        if status is SaveStatus.INSERTED:
            result.uploaded += 1
        elif status is SaveStatus.EXISTS:
            result.existing += 1
        else:
            result.errors += 1

        result.entries.append(PostOutcome(post.id, post.text, status.value, pair))

    def poll_once(self) -> PollResult:
        """
        Run one poll.

        Returns:
            PollResult with per-post outcomes and counts.
        """
        result = PollResult(started_at=datetime.now(), dry_run=self.config.dry_run)

        cursor = self.cursor_store.load()
        result.cursor = cursor

        if self.config.verbose:
            print(f"[monitor] Checking {self.source.name} since {cursor or '(start)'}...")

        fetch = self.source.fetch_posts(cursor=cursor, limit=self.config.max_results)
        result.rate_limited = fetch.rate_limited
        if fetch.error:
            result.messages.append(f"{self.source.name}: {fetch.error}")

        result.posts_checked = len(fetch.posts)

        for post in fetch.posts:
            self._process_post(post, result)

            if not self.config.dry_run:
                self.cursor_store.save(post.id)
            result.cursor = post.id

        # Covers pages where every entry was unparseable
        if fetch.cursor and fetch.cursor != result.cursor:
            if not self.config.dry_run:
                self.cursor_store.save(fetch.cursor)
            result.cursor = fetch.cursor

        result.finished_at = datetime.now()
        return result


# =============================================================================
# Polling Loop
# =============================================================================

def run_forever(
    monitor: VocabularyMonitor,
    interval_seconds: float = None,
    max_cycles: Optional[int] = None,
    sleep: Callable[[float], None] = time.sleep,
    on_result: Optional[Callable[[PollResult], None]] = None,
) -> int:
    """
    Poll immediately, then once per interval.

    A cycle that raises is reported and the loop carries on.
    KeyboardInterrupt is not caught.

    Args:
        monitor: The monitor to drive.
        interval_seconds: Delay between polls. Defaults to monitor.config.interval_seconds.
        max_cycles: Stop after this many polls (None = run until interrupted).
        sleep: Sleep function (injectable for tests).
        on_result: Called with each PollResult.

    Returns:
        Number of completed cycles.
    """
    if interval_seconds is None:
        interval_seconds = monitor.config.interval_seconds

    cycles = 0
    while max_cycles is None or cycles < max_cycles:
        if not monitor.config.quiet:
            timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            print(f"\n[monitor] [{timestamp}] Checking for new posts...")

        try:
            result = monitor.poll_once()
            if on_result is not None:
                on_result(result)
        except Exception as e:
            print(f"[monitor] Poll failed: {type(e).__name__}: {e}")
            if monitor.config.verbose:
                traceback.print_exc()

        cycles += 1
        if max_cycles is not None and cycles >= max_cycles:
            break

        sleep(interval_seconds)

    return cycles
