"""
JSON format parser.

This module provides the JSONParser class, which turns a single JSON
document into a TreeNode tree under a synthetic "root" node.
"""

from __future__ import annotations

import json

from tablux.data_formats.base import DataParser
from tablux.errors import ParseError
from tablux.model import TreeNode

ROOT_KEY = "root"


def build_tree(value, format_name: str = "json") -> TreeNode:
    """Build a tree from a decoded value, mapping depth errors to ParseError."""
    try:
        return TreeNode.from_value(ROOT_KEY, value)
    except ValueError as e:
        raise ParseError(format_name, str(e)) from e


class JSONParser(DataParser):
    """Parser for a single JSON document (object, array or scalar).

    Attributes:
        format_name: Returns 'json'.
        supported_extensions: Returns ['.json'].
    """

    @property
    def format_name(self) -> str:
        """Return the format name."""
        return "json"

    @property
    def supported_extensions(self) -> list[str]:
        """Return supported file extensions."""
        return [".json"]

    def parse(self, data: bytes) -> TreeNode:
        """Parse a JSON document into a tree.

        Args:
            data: Raw JSON bytes.

        Returns:
            The root TreeNode, keyed "root".

        Raises:
            ParseError: If the data is not valid JSON.

        Examples:
            >>> root = JSONParser().parse(b'{"a": 1}')
            >>> root.children[0].key
            'a'
        """
        text = self.decode(data)
        try:
            value = json.loads(text)
        except json.JSONDecodeError as e:
            raise ParseError(self.format_name, e.msg, line=e.lineno, column=e.colno) from e
        except RecursionError as e:
            raise ParseError(self.format_name, "document is nested too deeply") from e
        except ValueError as e:
            # e.g. integers past the int string conversion limit
            raise ParseError(self.format_name, str(e)) from e

        return build_tree(value, self.format_name)
