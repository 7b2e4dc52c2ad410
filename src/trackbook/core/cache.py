"""
Persistent cache of probed track durations.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Union

from .prober import DurationProber
from ..exceptions import CacheCorruptionError


class DurationCache:
    """
    Maps a track path to its duration in seconds, backed by a JSON file.

    The file is read once on construction and rewritten in full after every
    newly probed track, so a probe failure later in a run never loses the
    durations gathered before it.
    """

    def __init__(self, cache_path: Union[str, Path], prober: DurationProber):
        """
        Initialize the cache, loading the persisted mapping if present.

        Args:
            cache_path: Location of the JSON cache file
            prober: Prober used for paths not in the cache

        Raises:
            CacheCorruptionError: If the cache file exists but cannot be parsed
        """
        self._path = Path(cache_path)
        self.prober = prober
        self._durations = self._load()

    @property
    def path(self) -> Path:
        return self._path

    def __contains__(self, path) -> bool:
        return str(path) in self._durations

    def __len__(self) -> int:
        return len(self._durations)

    def entries(self) -> Dict[str, int]:
        """Return a copy of every cached path and duration."""
        return dict(self._durations)

    def scan(self, path: Union[str, Path]) -> int:
        """
        Get the duration of a track, probing it only on a cache miss.

        Args:
            path: Path to the audio file

        Returns:
            int: Duration in whole seconds
        """
        key = str(path)

        value = self._durations.get(key)
        if value is not None:
            return value

        logging.info(f'Probing duration: {key}')
        value = self.prober.probe(key)

        self._durations[key] = value
        self._save()

        return value

    def _load(self) -> Dict[str, int]:
        """Read the cache file, or start empty when there is none."""
        if not self._path.exists():
            logging.info(f'No duration cache at {self._path}, starting empty')
            return {}

        try:
            data = json.loads(self._path.read_text(encoding='utf-8'))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise CacheCorruptionError(str(e), str(self._path)) from e

        if not isinstance(data, dict):
            raise CacheCorruptionError("top level is not an object", str(self._path))

        for key, value in data.items():
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise CacheCorruptionError(
                    f"duration for {key!r} is not a non-negative integer: {value!r}",
                    str(self._path)
                )

        logging.info(f'Loaded {len(data)} cached durations from {self._path}')
        return data

    def _save(self):
        """Rewrite the whole cache file."""
        self._path.write_text(
            json.dumps(self._durations, indent=2, ensure_ascii=False) + '\n',
            encoding='utf-8'
        )
