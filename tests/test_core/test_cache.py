"""
Tests for the persistent duration cache.
"""

import pytest
import os
import json

from trackbook.core.cache import DurationCache
from trackbook.exceptions import CacheCorruptionError


class TestDurationCache:
    """Test cases for DurationCache."""

    def test_starts_empty_without_file(self, cache):
        """Test a missing cache file means an empty cache."""
        assert len(cache) == 0
        assert not cache.path.exists()

    def test_second_scan_does_not_probe(self, cache, fake_prober):
        """Test a cached path is answered without probing."""
        fake_prober.durations['11111.mp3'] = 77

        first = cache.scan('/books/11111.mp3')
        second = cache.scan('/books/11111.mp3')

        assert first == second == 77
        assert fake_prober.calls == ['/books/11111.mp3']

    def test_path_objects_share_string_key(self, cache, fake_prober):
        """Test str and Path forms of a path hit the same entry."""
        from pathlib import Path

        cache.scan(Path('/books/11111.mp3'))
        cache.scan('/books/11111.mp3')

        assert len(fake_prober.calls) == 1
        assert Path('/books/11111.mp3') in cache

    def test_miss_rewrites_file(self, cache):
        """Test every new entry is persisted right away."""
        cache.scan('/books/11111.mp3')

        with open(cache.path, encoding='utf-8') as f:
            assert json.load(f) == {'/books/11111.mp3': 60}

        cache.scan('/books/11112.mp3')

        with open(cache.path, encoding='utf-8') as f:
            assert json.load(f) == {'/books/11111.mp3': 60, '/books/11112.mp3': 60}

    def test_file_is_pretty_printed(self, cache):
        """Test the cache file is human readable."""
        cache.scan('/books/11111.mp3')

        text = cache.path.read_text(encoding='utf-8')
        assert text == '{\n  "/books/11111.mp3": 60\n}\n'

    def test_round_trip(self, temp_dir, fake_prober_class):
        """Test entries survive reconstructing the cache."""
        cache_path = os.path.join(temp_dir, 'durations.json')
        durations = {'1000%d.mp3' % i: 10 * i + 1 for i in range(5)}
        first = DurationCache(cache_path, fake_prober_class(durations))
        for name in durations:
            first.scan(f'/books/{name}')

        second = DurationCache(cache_path, fake_prober_class())

        assert second.entries() == first.entries()
        assert len(second) == 5
        assert second.scan('/books/10003.mp3') == 31
        assert second.prober.calls == []

    def test_entries_is_a_copy(self, cache):
        """Test entries() cannot mutate the cache."""
        cache.scan('/books/11111.mp3')

        cache.entries()['/books/11111.mp3'] = 0

        assert cache.scan('/books/11111.mp3') == 60

    def test_probe_failure_keeps_earlier_entries(self, temp_dir, fake_prober_class):
        """Test a failing probe leaves the persisted entries intact."""
        class FailingProber(fake_prober_class):
            def probe(self, path):
                if path.endswith('bad.mp3'):
                    raise RuntimeError("probe failed")
                return super().probe(path)

        cache_path = os.path.join(temp_dir, 'durations.json')
        cache = DurationCache(cache_path, FailingProber())
        cache.scan('/books/11111.mp3')

        with pytest.raises(RuntimeError):
            cache.scan('/books/bad.mp3')

        reloaded = DurationCache(cache_path, fake_prober_class())
        assert reloaded.entries() == {'/books/11111.mp3': 60}

    @pytest.mark.parametrize("content", [
        '{not json',
        '[1, 2, 3]',
        '{"/books/11111.mp3": "60"}',
        '{"/books/11111.mp3": 12.5}',
        '{"/books/11111.mp3": -1}',
        '{"/books/11111.mp3": true}',
        '',
    ])
    def test_corrupt_file_fails(self, temp_dir, fake_prober_class, content):
        """Test malformed cache files are fatal."""
        cache_path = os.path.join(temp_dir, 'durations.json')
        with open(cache_path, 'w', encoding='utf-8') as f:
            f.write(content)

        with pytest.raises(CacheCorruptionError) as exc_info:
            DurationCache(cache_path, fake_prober_class())

        assert exc_info.value.cache_path == cache_path
        assert exc_info.value.error_code == "CACHE001"
