"""
Runtime settings for Tablux.

Defaults live here as module constants; the CLI builds a Settings
instance from its parsed arguments.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass

# Widest a table column may grow before its cells are truncated
DEFAULT_COLUMN_MAX_WIDTH = 30

# Narrowest a table column may be
MIN_COLUMN_WIDTH = 10

# Terminal size assumed by --no-interactive
DEFAULT_WIDTH = 100
DEFAULT_HEIGHT = 30

# Rows/columns taken by the title, controls line and border
HEADER_FOOTER_SPACE = 4
TABLE_BORDER_SPACE = 6

# Tree viewport height before the first resize event arrives
DEFAULT_TREE_HEIGHT = 20

FORMAT_CHOICES = ("json", "jsonl", "csv")


@dataclass(frozen=True)
class Settings:
    """Settings shared by the CLI, the controller and the viewers."""

    column_max_width: int = DEFAULT_COLUMN_MAX_WIDTH
    default_width: int = DEFAULT_WIDTH
    default_height: int = DEFAULT_HEIGHT
    header_footer_space: int = HEADER_FOOTER_SPACE
    table_border_space: int = TABLE_BORDER_SPACE
    forced_format: str | None = None
    log_level: int = logging.WARNING
    log_file: str | None = None

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> Settings:
        """Build settings from parsed command line arguments."""
        column_max_width = max(MIN_COLUMN_WIDTH, args.column_max_width)
        return cls(
            column_max_width=column_max_width,
            forced_format=args.format,
            log_level=logging.DEBUG if args.debug else logging.WARNING,
            log_file=args.log_file,
        )

    def tree_viewport_height(self, height: int) -> int:
        """Height available to the tree viewer in a terminal of `height` rows."""
        return height - self.header_footer_space

    def table_viewport(self, width: int, height: int) -> tuple[int, int]:
        """(width, height) available to the table viewer."""
        return width - self.header_footer_space, height - self.table_border_space
