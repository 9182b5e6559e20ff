"""
Tablux - a terminal viewer for structured data.

Renders JSON/JSONL documents as collapsible trees and CSV files as
navigable, sortable tables.

Usage:
    python -m tablux data.json
    cat data.csv | python -m tablux --no-interactive

Components:
    - tablux.model: TreeNode and TableData
    - tablux.data_formats: format detection, parsers and source loading
    - tablux.tui: viewers, controller and the Textual application
"""

__version__ = "0.2.0"
