"""
CSV format parser.

This module provides the CSVParser class. The first record is the header
row, the remaining records are data rows. Lines starting with the comment
character are skipped and rows may have differing field counts.
"""

from __future__ import annotations

import csv
import io
from typing import Iterator

from tablux.data_formats.base import DataParser
from tablux.errors import ParseError
from tablux.model import TableData


class CSVParser(DataParser):
    """Parser for comma separated values.

    Attributes:
        delimiter: Field separator.
        comment: Lines starting with this character are ignored ("" disables).
        use_first_line_as_header: When False, headers are generated as
            "Column 1", "Column 2", ... and every record is a data row.
    """

    def __init__(
        self,
        delimiter: str = ",",
        comment: str = "#",
        use_first_line_as_header: bool = True,
    ) -> None:
        self.delimiter = delimiter
        self.comment = comment
        self.use_first_line_as_header = use_first_line_as_header

    @property
    def format_name(self) -> str:
        """Return the format name."""
        return "csv"

    @property
    def supported_extensions(self) -> list[str]:
        """Return supported file extensions."""
        return [".csv"]

    def _lines(self, text: str) -> Iterator[str]:
        for line in io.StringIO(text):
            if self.comment and line.startswith(self.comment):
                continue
            yield line

    def read_records(self, text: str) -> list[list[str]]:
        """Split CSV text into records.

        Raises:
            ParseError: On malformed quoting.
        """
        reader = csv.reader(self._lines(text), delimiter=self.delimiter, strict=True)
        try:
            return [record for record in reader if record]
        except csv.Error as e:
            raise ParseError(self.format_name, str(e), line=reader.line_num) from e

    def parse(self, data: bytes) -> TableData:
        """Parse CSV bytes into a table.

        Args:
            data: Raw CSV bytes.

        Returns:
            A TableData with all columns visible and no sort applied. Empty
            input yields an empty table.

        Raises:
            ParseError: If the CSV is malformed or not UTF-8.

        Examples:
            >>> table = CSVParser().parse(b"name,age\\nalice,30\\n")
            >>> table.headers, table.rows
            (['name', 'age'], [['alice', '30']])
        """
        records = self.read_records(self.decode(data))
        if not records:
            return TableData()

        if self.use_first_line_as_header:
            headers, rows = records[0], records[1:]
        else:
            headers = [f"Column {i + 1}" for i in range(len(records[0]))]
            rows = records

        return TableData(headers=list(headers), rows=[list(row) for row in rows])
