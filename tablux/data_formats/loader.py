"""
Source loading: read raw input, pick a format and parse it.

Usage:
    from tablux.data_formats import load_document

    document = load_document("data.csv")
    if document.table is not None:
        print(document.table.headers)
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from tablux.data_formats.format_detector import (
    UNKNOWN_FORMAT,
    detect_format,
    get_parser_for_format,
)
from tablux.errors import ReadError, UnsupportedFormatError
from tablux.model import TableData, TreeNode

logger = logging.getLogger(__name__)

# Label used for standard input
STDIN_SOURCE = "<stdin>"


@dataclass
class Document:
    """A parsed input: the format name plus either a tree or a table."""

    format_name: str
    tree: TreeNode | None = None
    table: TableData | None = None

    @property
    def is_tree(self) -> bool:
        return self.tree is not None


def is_stdin(source: str | None) -> bool:
    return source in (None, "-", STDIN_SOURCE)


def read_source(source: str | None) -> bytes:
    """Read all bytes from a file path, or from stdin for None/"-"/"<stdin>".

    Raises:
        ReadError: If the source cannot be read.
    """
    if is_stdin(source):
        try:
            return sys.stdin.buffer.read()
        except (OSError, ValueError) as e:
            raise ReadError(STDIN_SOURCE, str(e)) from e

    path = Path(source)
    if path.is_dir():
        raise ReadError(source, "is a directory, must be a file")
    try:
        return path.read_bytes()
    except FileNotFoundError as e:
        raise ReadError(source, "file not found") from e
    except PermissionError as e:
        raise ReadError(source, "permission denied") from e
    except OSError as e:
        raise ReadError(source, e.strerror or str(e)) from e


def parse_data(
    data: bytes,
    forced_format: str | None = None,
    extension: str | None = None,
) -> Document:
    """Parse raw bytes into a Document.

    Args:
        data: Raw input.
        forced_format: Format override ("json", "jsonl" or "csv"); skips detection.
        extension: Optional file extension hint for detection.

    Raises:
        UnsupportedFormatError: If no parser applies.
        ParseError: If the input is malformed.
    """
    format_name = forced_format or detect_format(data, extension)
    if format_name == UNKNOWN_FORMAT:
        raise UnsupportedFormatError("unsupported file type: could not detect JSON, JSONL or CSV")

    parser = get_parser_for_format(format_name)
    model = parser.parse(data)
    logger.info("Parsed %d bytes as %s", len(data), format_name)

    if isinstance(model, TableData):
        return Document(format_name=format_name, table=model)
    return Document(format_name=format_name, tree=model)


def load_document(
    source: str | None,
    forced_format: str | None = None,
    data: bytes | None = None,
) -> Document:
    """Read (unless `data` is given) and parse a source.

    Args:
        source: File path, or None/"-" for stdin.
        forced_format: Optional format override.
        data: Bytes already read from the source.

    Raises:
        ReadError, UnsupportedFormatError, ParseError
    """
    if data is None:
        data = read_source(source)

    extension = None if is_stdin(source) else Path(source).suffix
    return parse_data(data, forced_format, extension)
