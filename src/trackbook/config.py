"""
Build configuration loaded from an optional JSON file.
"""

import json
import logging
import os
from dataclasses import dataclass, field, fields
from typing import List, Optional

from .exceptions import ConfigurationError

DEFAULT_CONFIG_FILE = "trackbook.json"


@dataclass
class BuildConfig:
    """Settings for one build run."""
    books: List[str] = field(default_factory=lambda: ["N_Math1A", "N_Math2B", "N_Math3"])
    cache_file: str = "durations.json"
    output_dir: str = "."
    index_title: str = "Nagaoka Math Book"
    extensions: List[str] = field(default_factory=lambda: [".mp3"])
    ffmpeg: str = "ffmpeg"

    def __post_init__(self):
        for name in ("books", "extensions"):
            value = getattr(self, name)
            if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
                raise ConfigurationError("expected a list of strings", name, value)

        for name in ("cache_file", "output_dir", "index_title", "ffmpeg"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ConfigurationError("expected a non-empty string", name, value)

        if len(set(self.books)) != len(self.books):
            raise ConfigurationError("book names must be unique", "books", self.books)

        for extension in self.extensions:
            if not extension.startswith('.'):
                raise ConfigurationError("extensions must start with '.'", "extensions", extension)


def load_config(config_path: Optional[str] = None) -> BuildConfig:
    """
    Load the build configuration.

    Without an explicit path, ``trackbook.json`` in the working directory is
    used when present, otherwise the defaults apply.

    Args:
        config_path: Explicit configuration file path

    Returns:
        BuildConfig: The loaded configuration

    Raises:
        ConfigurationError: If the file is missing (when given explicitly),
            not valid JSON, or holds unknown keys or wrong types
    """
    if config_path is None:
        if not os.path.exists(DEFAULT_CONFIG_FILE):
            return BuildConfig()
        config_path = DEFAULT_CONFIG_FILE
    elif not os.path.exists(config_path):
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Top level of {config_path} must be an object")

    known = {f.name for f in fields(BuildConfig)}
    for key in data:
        if key not in known:
            raise ConfigurationError("unknown setting", key, data[key])

    logging.info(f'Loaded configuration from {config_path}')
    return BuildConfig(**data)
