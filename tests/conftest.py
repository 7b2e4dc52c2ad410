"""
Pytest configuration and fixtures for trackbook tests.
"""

import pytest
import os
import tempfile
import shutil

from trackbook.core.cache import DurationCache


class FakeProber:
    """Prober returning preset durations; refuses to probe a path twice."""

    def __init__(self, durations=None, default=60):
        self.durations = durations or {}
        self.default = default
        self.calls = []

    def probe(self, path):
        if path in self.calls:
            raise AssertionError(f"probed twice: {path}")
        self.calls.append(path)
        return self.durations.get(os.path.basename(path), self.default)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    temp_dir = tempfile.mkdtemp()
    yield temp_dir
    shutil.rmtree(temp_dir)


@pytest.fixture
def fake_prober():
    """Prober with no real subprocess behind it."""
    return FakeProber()


@pytest.fixture
def cache(temp_dir, fake_prober):
    """Duration cache backed by a file in the temp directory."""
    return DurationCache(os.path.join(temp_dir, 'durations.json'), fake_prober)


@pytest.fixture
def make_book_dir(temp_dir):
    """Create a book directory holding empty track files."""
    def _make(name, relative_paths):
        book_dir = os.path.join(temp_dir, name)
        os.makedirs(book_dir, exist_ok=True)
        for relative_path in relative_paths:
            filepath = os.path.join(book_dir, relative_path)
            os.makedirs(os.path.dirname(filepath), exist_ok=True)
            with open(filepath, 'wb') as f:
                f.write(b'ID3\x03\x00\x00\x00\x00\x00\x00')
        return book_dir
    return _make


@pytest.fixture
def isolated_environment(temp_dir, monkeypatch):
    """Run inside the temp directory."""
    monkeypatch.chdir(temp_dir)
    yield temp_dir


@pytest.fixture
def fake_prober_class():
    """The fake prober type, for tests that need several instances."""
    return FakeProber
