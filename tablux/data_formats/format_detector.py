"""
Format detection utilities for input data.

This module provides functions to detect the format of raw input and get
the appropriate parser.
"""

from __future__ import annotations

import csv
import io
import json
import logging
from typing import TYPE_CHECKING

from tablux.errors import UnsupportedFormatError

if TYPE_CHECKING:
    from tablux.data_formats.base import DataParser

logger = logging.getLogger(__name__)


# Mapping of file extensions to format names
EXTENSION_MAP: dict[str, str] = {
    ".json": "json",
    ".jsonl": "jsonl",
    ".ndjson": "jsonl",
    ".csv": "csv",
}

# Supported format names
SUPPORTED_FORMATS = frozenset(["json", "jsonl", "csv"])

UNKNOWN_FORMAT = "unknown"

# Number of lines sampled when checking for JSONL
JSONL_SAMPLE_SIZE = 10


def _looks_like_json(trimmed: bytes) -> bool:
    if not trimmed.startswith((b"{", b"[")):
        return False
    try:
        json.loads(trimmed)
    except (ValueError, RecursionError):
        return False
    return True


def _looks_like_jsonl(trimmed: bytes) -> bool:
    lines = trimmed.split(b"\n")
    if len(lines) <= 1:
        return False

    sampled = [line.strip() for line in lines[:JSONL_SAMPLE_SIZE]]
    non_empty = [line for line in sampled if line]
    objects = 0
    for line in non_empty:
        if not line.startswith(b"{"):
            continue
        try:
            if isinstance(json.loads(line), dict):
                objects += 1
        except (ValueError, RecursionError):
            continue

    return objects > 0 and objects * 2 >= len(non_empty)


def _looks_like_csv(trimmed: bytes) -> bool:
    try:
        text = trimmed.decode("utf-8-sig")
        records = list(csv.reader(io.StringIO(text), strict=True))
    except (UnicodeDecodeError, csv.Error):
        return False

    if len(records) <= 1:
        return False

    valid = sum(1 for record in records if len(record) >= 2)
    return valid * 2 > len(records)


def detect_format(data: bytes, extension: str | None = None) -> str:
    """Detect the format of raw input.

    The extension hint wins when it is one we know. Otherwise the content
    is checked for a single JSON document, then for JSON Lines (at least
    half of up to 10 sampled non-empty lines are JSON objects), then for
    CSV (more than half of the records have two or more fields).

    Args:
        data: Raw input bytes.
        extension: Optional file extension hint such as ".csv".

    Returns:
        Format name: "json", "jsonl", "csv" or "unknown".

    Examples:
        >>> detect_format(b'{"a": 1}')
        'json'
        >>> detect_format(b'{"a": 1}\\n{"a": 2}\\n')
        'jsonl'
        >>> detect_format(b"name,age\\nalice,30\\n")
        'csv'
    """
    if extension:
        format_name = EXTENSION_MAP.get(extension.lower())
        if format_name is not None:
            logger.debug("Format %s chosen from extension %s", format_name, extension)
            return format_name

    trimmed = data.strip()
    if not trimmed:
        return UNKNOWN_FORMAT

    if _looks_like_json(trimmed):
        format_name = "json"
    elif _looks_like_jsonl(trimmed):
        format_name = "jsonl"
    elif _looks_like_csv(trimmed):
        format_name = "csv"
    else:
        format_name = UNKNOWN_FORMAT

    logger.debug("Format %s detected from content", format_name)
    return format_name


def get_parser_for_format(format_name: str) -> "DataParser":
    """Get a parser for a specific format name.

    Args:
        format_name: The format name ("json", "jsonl", or "csv").

    Returns:
        A DataParser instance for the specified format.

    Raises:
        UnsupportedFormatError: If the format name is not supported.

    Examples:
        >>> get_parser_for_format("csv").format_name
        'csv'
    """
    # Import parsers here to avoid circular imports
    from tablux.data_formats.csv_parser import CSVParser
    from tablux.data_formats.json_parser import JSONParser
    from tablux.data_formats.jsonl_parser import JSONLParser

    if format_name not in SUPPORTED_FORMATS:
        raise UnsupportedFormatError(
            f"Unsupported format '{format_name}'. "
            f"Supported formats: {', '.join(sorted(SUPPORTED_FORMATS))}"
        )

    parsers: dict[str, DataParser] = {
        "json": JSONParser(),
        "jsonl": JSONLParser(),
        "csv": CSVParser(),
    }

    return parsers[format_name]
