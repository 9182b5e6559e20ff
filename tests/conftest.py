"""Pytest configuration and shared fixtures for Tablux tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from tablux.data_formats import CSVParser, JSONParser
from tablux.model import TableData, TreeNode

SCENARIO_JSON = b'{"a": 1, "b": [1, 2]}'

PEOPLE_CSV = b"name,age\nalice,30\nbob,25\n"

NESTED_JSON = b"""{
    "name": "tablux",
    "version": 2,
    "ratio": 0.5,
    "stable": true,
    "license": null,
    "authors": [
        {"name": "alice", "roles": ["dev", "ops"]},
        {"name": "bob", "roles": []}
    ],
    "meta": {}
}"""

# Valid JSON that json.loads rejects once the int string conversion limit applies
OVERSIZED_INT_JSON = b'{"n": ' + b"9" * 5000 + b"}"

requires_int_digit_limit = pytest.mark.skipif(
    not hasattr(sys, "get_int_max_str_digits") or not 0 < sys.get_int_max_str_digits() < 5000,
    reason="interpreter has no int string conversion limit",
)


@pytest.fixture
def scenario_tree() -> TreeNode:
    """Return the tree for {"a": 1, "b": [1, 2]}."""
    return JSONParser().parse(SCENARIO_JSON)


@pytest.fixture
def nested_tree() -> TreeNode:
    """Return a tree with every node kind and a few levels of nesting."""
    return JSONParser().parse(NESTED_JSON)


@pytest.fixture
def people_table() -> TableData:
    """Return the two-row name/age table."""
    return CSVParser().parse(PEOPLE_CSV)


@pytest.fixture
def wide_table() -> TableData:
    """Return a table with five columns of width 10 and ten rows."""
    headers = [f"c{i}" for i in range(5)]
    rows = [[f"r{row}c{col}" for col in range(5)] for row in range(10)]
    return TableData(headers=headers, rows=rows)


def write_file(directory: Path, name: str, content: bytes) -> Path:
    """Helper to write raw bytes to a file and return its path."""
    path = directory / name
    path.write_bytes(content)
    return path
