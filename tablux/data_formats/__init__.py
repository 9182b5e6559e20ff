"""
Data formats module: format detection, parsing and source loading.

This module provides a unified interface for turning JSON, JSONL and CSV
input into the document models the viewers display.

Usage:
    from tablux.data_formats import detect_format, get_parser_for_format

    format_name = detect_format(data)          # 'json', 'jsonl', 'csv' or 'unknown'
    model = get_parser_for_format(format_name).parse(data)

    # Or read, detect and parse in one step
    from tablux.data_formats import load_document
    document = load_document("data.jsonl")
"""

from tablux.data_formats.base import DataParser
from tablux.data_formats.csv_parser import CSVParser
from tablux.data_formats.format_detector import (
    EXTENSION_MAP,
    SUPPORTED_FORMATS,
    UNKNOWN_FORMAT,
    detect_format,
    get_parser_for_format,
)
from tablux.data_formats.json_parser import JSONParser
from tablux.data_formats.jsonl_parser import JSONLParser
from tablux.data_formats.loader import (
    STDIN_SOURCE,
    Document,
    load_document,
    parse_data,
    read_source,
)

__all__ = [
    # Base class
    "DataParser",
    # Format detection
    "detect_format",
    "get_parser_for_format",
    "EXTENSION_MAP",
    "SUPPORTED_FORMATS",
    "UNKNOWN_FORMAT",
    # Parsers
    "CSVParser",
    "JSONLParser",
    "JSONParser",
    # Loading
    "Document",
    "STDIN_SOURCE",
    "load_document",
    "parse_data",
    "read_source",
]
