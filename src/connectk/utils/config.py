"""
Configuration management for the Connect-K engine and its CLI.

Uses a dataclass with sensible defaults.
Supports loading from YAML files.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional
import yaml

from ..game.options import MAX_WIDTH, MAX_HEIGHT, format_options, DEFAULT_OPTIONS


@dataclass
class Config:
    """CLI and session configuration."""

    # Options string for new games
    options: str = format_options(DEFAULT_OPTIONS)

    # Bounds handed to the options parser
    max_width: int = MAX_WIDTH
    max_height: int = MAX_HEIGHT

    # Move log directory (no log file if None)
    log_dir: Optional[str] = None
    verbose: bool = True

    def save(self, path: str) -> None:
        """Save config to YAML file."""
        with open(path, "w") as f:
            yaml.dump(asdict(self), f, default_flow_style=False)

    @classmethod
    def load(cls, path: str) -> Config:
        """Load config from YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        defaults = cls()
        return cls(
            options=str(data.get("options", defaults.options)),
            max_width=int(data.get("max_width", defaults.max_width)),
            max_height=int(data.get("max_height", defaults.max_height)),
            log_dir=data.get("log_dir"),
            verbose=bool(data.get("verbose", defaults.verbose)),
        )

    def ensure_dirs(self) -> None:
        """Create the log directory if one is configured."""
        if self.log_dir:
            Path(self.log_dir).mkdir(parents=True, exist_ok=True)


def get_default_config() -> Config:
    """Get default configuration (classic 7x6 board, connect 4)."""
    return Config()
