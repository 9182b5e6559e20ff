"""
Abstract base class for document parsers.

This module defines the DataParser interface that all format-specific
parsers must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from tablux.errors import ParseError


class DataParser(ABC):
    """Abstract base class for parsing raw input into a document model.

    All format-specific parsers (JSON, JSONL, CSV) must inherit from this
    class and implement all abstract methods.
    """

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Return the format name (e.g., 'json', 'jsonl', 'csv')."""
        pass

    @property
    @abstractmethod
    def supported_extensions(self) -> list[str]:
        """Return supported file extensions (e.g., ['.json'])."""
        pass

    @abstractmethod
    def parse(self, data: bytes) -> Any:
        """Parse the whole input into a model.

        Args:
            data: Raw input bytes.

        Returns:
            A TreeNode for JSON formats, a TableData for CSV.

        Raises:
            ParseError: If the input is malformed.
        """
        pass

    def decode(self, data: bytes) -> str:
        """Decode UTF-8 input, tolerating a byte order mark.

        Raises:
            ParseError: If the input is not valid UTF-8.
        """
        try:
            return data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise ParseError(
                self.format_name, f"input is not valid UTF-8 ({e.reason} at byte {e.start})"
            ) from e
