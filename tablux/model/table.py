"""
Table model for CSV documents.

TableData holds the header row and the data rows as strings. Column
visibility and the sort state are mutated by the table viewer; sorting
reorders the backing row list in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# Sentinel for "no sort column"
NO_SORT = -1


@dataclass
class TableData:
    """A parsed CSV table.

    Attributes:
        headers: Column names, one per column.
        rows: Data records. A row may be shorter or longer than `headers`;
              missing cells read as "".
        column_visibility: One flag per column, all True by default.
        sort_column: Index of the sort column, or NO_SORT.
        sort_ascending: Sort direction, only meaningful when sorted.
    """

    headers: list[str] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)
    column_visibility: list[bool] = field(default_factory=list)
    sort_column: int = NO_SORT
    sort_ascending: bool = True

    def __post_init__(self) -> None:
        if not self.column_visibility:
            self.column_visibility = [True] * len(self.headers)
        elif len(self.column_visibility) != len(self.headers):
            raise ValueError(
                f"column_visibility has {len(self.column_visibility)} entries "
                f"for {len(self.headers)} headers"
            )

    @property
    def column_count(self) -> int:
        return len(self.headers)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def is_sorted(self) -> bool:
        return self.sort_column != NO_SORT

    def cell(self, row: int, column: int) -> str:
        """Return the cell text, or "" when the row has no such column."""
        record = self.rows[row]
        if 0 <= column < len(record):
            return record[column]
        return ""

    def is_column_visible(self, column: int) -> bool:
        if 0 <= column < len(self.column_visibility):
            return self.column_visibility[column]
        return False

    def toggle_column_visibility(self, column: int) -> None:
        """Flip the visibility of a column. Out-of-range indices are ignored."""
        if 0 <= column < len(self.column_visibility):
            self.column_visibility[column] = not self.column_visibility[column]

    def visible_columns(self) -> list[int]:
        """Indices of the currently visible columns."""
        return [i for i, visible in enumerate(self.column_visibility) if visible]

    def sort_by_column(self, column: int, ascending: bool = True) -> None:
        """Sort rows in place by the string value of one column.

        Rows without the column sort as if the cell were empty. Out-of-range
        columns are ignored.
        """
        if not 0 <= column < self.column_count:
            return

        self.sort_column = column
        self.sort_ascending = ascending
        self.rows.sort(
            key=lambda record: record[column] if column < len(record) else "",
            reverse=not ascending,
        )
