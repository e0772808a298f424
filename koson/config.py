"""
Configuration for value admission, rendering and the command line.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path


@dataclass
class KosonConfig:
    """Configuration options for koson."""

    # Accept objects whose type defines __str__ and store that text as a string
    stringify_unknown: bool = True

    # Escape U+0000..U+001F as \uXXXX in addition to '"' and '\'
    escape_control_characters: bool = True

    # CLI: turn true/false/null/numbers given as KEY=VALUE into JSON literals
    coerce_cli_scalars: bool = True

    @staticmethod
    def from_dict(d: dict) -> KosonConfig:
        """Create a config from a dictionary."""
        config = KosonConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    @staticmethod
    def from_file(path: str | Path) -> KosonConfig:
        """Create a config from a JSON file.

        Raises:
            ValueError: the file is not valid JSON or does not hold an object
        """
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"config file {path} must contain a JSON object")
        return KosonConfig.from_dict(data)

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "stringify_unknown": self.stringify_unknown,
            "escape_control_characters": self.escape_control_characters,
            "coerce_cli_scalars": self.coerce_cli_scalars,
        }


DEFAULT_CONFIG = KosonConfig()
