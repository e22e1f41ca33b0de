"""
Logging utilities with rich formatting.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Optional, Any

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape
from rich.text import Text


console = Console()


@dataclass
class MoveRecord:
    """One accepted move."""

    move_number: int
    player: str
    column: int
    state: str
    result: str
    timestamp: str = ""

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = datetime.now().isoformat()


class Logger:
    """
    Session logger with rich output and JSON move logging.

    Args:
        log_dir: Directory for move log files (no file if None)
        verbose: Whether to print to console
    """

    def __init__(self, log_dir: Optional[str] = None, verbose: bool = True):
        self.verbose = verbose
        self.log_file: Optional[Path] = None

        if log_dir is not None:
            log_path = Path(log_dir)
            log_path.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            self.log_file = log_path / f"moves_{timestamp}.jsonl"

        self.move_history: list[MoveRecord] = []

    def log_move(self, record: MoveRecord) -> None:
        """Log one accepted move."""
        self.move_history.append(record)

        if self.log_file is not None:
            with open(self.log_file, "a") as f:
                f.write(json.dumps(asdict(record)) + "\n")

        if self.verbose:
            console.print(
                f"[cyan]#{record.move_number}[/] {record.player} -> column {record.column}"
                f" [dim]({escape(record.state)})[/]",
                highlight=False,
            )

    def log_message(self, message: str, style: str = "white") -> None:
        """Log a message."""
        if self.verbose:
            console.print(f"[{style}]{escape(message)}[/]", highlight=False)

    def log_info(self, message: str) -> None:
        """Log info message."""
        self.log_message(message, "blue")

    def log_success(self, message: str) -> None:
        """Log success message."""
        self.log_message(message, "green")

    def log_warning(self, message: str) -> None:
        """Log warning message."""
        self.log_message(message, "yellow")

    def log_error(self, message: str) -> None:
        """Log error message. Errors are printed even when not verbose."""
        console.print(f"[red]{escape(message)}[/]", highlight=False)


def print_config(config: Any) -> None:
    """Print configuration in a nice format."""
    table = Table(title="Configuration", show_header=True)
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="white")

    for k, v in asdict(config).items():
        table.add_row(k, str(v))

    console.print(table)


def print_board(board_str: str, title: str = "Board") -> None:
    """Print a game board in a panel."""
    console.print(Panel(Text(board_str), title=title, border_style="blue"))
