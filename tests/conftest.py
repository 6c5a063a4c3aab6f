"""
Pytest Configuration and Fixtures

Shared fixtures for all tests: sample posts, in-memory storage and
cursor stores, and a ready-to-use monitor.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from eitangos.models.post import RawPost
from eitangos.monitor import MonitorConfig, VocabularyMonitor
from eitangos.sources.static import StaticSource
from eitangos.storage.appwrite import MockAppwriteStorage
from eitangos.storage.cursor import MemoryCursorStore


# =============================================================================
# SAMPLE DATA
# =============================================================================

SAMPLE_TEXTS = [
    "make a shift シフトの作成",
    "Good morning everyone! Have a nice day",
    "cat 猫 #eitangos https://t.co/abc123",
    "computer　コンピューター",
    "@friend thanks for the follow!",
]


# =============================================================================
# SHARED FIXTURES
# =============================================================================

@pytest.fixture
def sample_posts():
    """Posts in feed order (oldest first), ids "1".."5"."""
    return [RawPost(id=str(i), text=t) for i, t in enumerate(SAMPLE_TEXTS, start=1)]


@pytest.fixture
def static_source(sample_posts):
    """A StaticSource serving the sample posts."""
    return StaticSource(sample_posts)


@pytest.fixture
def mock_storage():
    """An empty in-memory vocabulary store."""
    return MockAppwriteStorage()


@pytest.fixture
def cursor_store():
    """An empty in-memory cursor store."""
    return MemoryCursorStore()


@pytest.fixture
def monitor(static_source, mock_storage, cursor_store):
    """A monitor wired to in-memory collaborators."""
    return VocabularyMonitor(
        source=static_source,
        storage=mock_storage,
        cursor_store=cursor_store,
        config=MonitorConfig(max_results=10),
    )


# =============================================================================
# MARKERS FOR TEST CATEGORIES
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "network_mocked: Tests that patch requests"
    )
