"""
JSONL format parser.

This module provides the JSONLParser class for JSON Lines input, where
each non-blank line is a complete JSON value. The records become the
children of a synthetic root array.
"""

from __future__ import annotations

import json
from typing import Any

from tablux.data_formats.base import DataParser
from tablux.data_formats.json_parser import build_tree
from tablux.errors import ParseError
from tablux.model import TreeNode


class JSONLParser(DataParser):
    """Parser for JSONL (JSON Lines) input.

    Attributes:
        format_name: Returns 'jsonl'.
        supported_extensions: Returns ['.jsonl', '.ndjson'].
    """

    @property
    def format_name(self) -> str:
        """Return the format name."""
        return "jsonl"

    @property
    def supported_extensions(self) -> list[str]:
        """Return supported file extensions."""
        return [".jsonl", ".ndjson"]

    def parse(self, data: bytes) -> TreeNode:
        """Parse JSONL input into a tree whose root is an array of records.

        Args:
            data: Raw JSONL bytes.

        Returns:
            The root TreeNode (an array keyed "root").

        Raises:
            ParseError: If any non-blank line cannot be decoded. The error
                carries the 1-based line number.
        """
        records: list[Any] = []
        for lineno, line in enumerate(self.decode(data).splitlines(), start=1):
            line = line.strip()
            if not line:
                continue
            try:
                records.append(json.loads(line))
            except json.JSONDecodeError as e:
                raise ParseError(self.format_name, e.msg, line=lineno, column=e.colno) from e
            except RecursionError as e:
                raise ParseError(self.format_name, "record is nested too deeply", line=lineno) from e
            except ValueError as e:
                # e.g. integers past the int string conversion limit
                raise ParseError(self.format_name, str(e), line=lineno) from e

        return build_tree(records, self.format_name)
