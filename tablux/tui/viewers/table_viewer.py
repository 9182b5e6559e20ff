"""
Table viewer for CSV documents.

Keeps a (row, column) cursor and a two dimensional viewport over a
TableData, and renders the visible window as fixed-width cells. Column
widths are computed once at construction; resizing only changes how many
rows and columns fit.
"""

from __future__ import annotations

from rich.style import Style
from rich.text import Text

from tablux.config import (
    DEFAULT_COLUMN_MAX_WIDTH,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    HEADER_FOOTER_SPACE,
    MIN_COLUMN_WIDTH,
    TABLE_BORDER_SPACE,
)
from tablux.model import TableData
from tablux.tui.theme import DEFAULT_THEME, Theme

EMPTY_PLACEHOLDER = "Empty CSV"

# Padding added around header text (room for the sort glyph) and cell text
HEADER_PADDING = 4
CELL_PADDING = 2

# Rows of the viewport not used for data: the header line and spacing
RESERVED_ROWS = 2


def compute_column_widths(
    data: TableData,
    column_max_width: int = DEFAULT_COLUMN_MAX_WIDTH,
) -> list[int]:
    """Compute the fixed display width of every column.

    Each width is ``max(len(header) + 4, longest cell + 2)``, clamped to
    ``[MIN_COLUMN_WIDTH, column_max_width]`` and made even.
    """
    widths = [len(header) + HEADER_PADDING for header in data.headers]
    for row in data.rows:
        for i, cell in enumerate(row[: len(widths)]):
            widths[i] = max(widths[i], len(cell) + CELL_PADDING)

    upper = max(MIN_COLUMN_WIDTH, column_max_width)
    result = []
    for width in widths:
        width = min(max(width, MIN_COLUMN_WIDTH), upper)
        if width % 2:
            # Round up unless that would pass the maximum
            width = width + 1 if width + 1 <= upper else width - 1
        result.append(width)
    return result


def truncate(content: str, width: int, ellipsis: str = "...") -> str:
    """Shorten content that does not fit a cell of `width` (two cells are padding)."""
    if len(content) > width - CELL_PADDING:
        return content[: max(0, width - CELL_PADDING - len(ellipsis))] + ellipsis
    return content


def _single_line(content: str) -> str:
    return content.replace("\r\n", " ").replace("\n", " ").replace("\r", " ").replace("\t", " ")


class TableViewer:
    """Navigable view over a CSV table.

    Attributes:
        data: The table being shown (sort and visibility state live there).
        cursor_row: Selected row, 0..row_count inclusive.
        cursor_col: Selected column, 0..column_count-1.
        viewport_x: First rendered column.
        viewport_y: First rendered data row.
        viewport_width: Cells available horizontally (<= 0 renders every column).
        viewport_height: Lines available, including the header line.
        column_widths: Fixed width of each column.
    """

    def __init__(
        self,
        data: TableData,
        viewport_width: int = DEFAULT_WIDTH - HEADER_FOOTER_SPACE,
        viewport_height: int = DEFAULT_HEIGHT - TABLE_BORDER_SPACE,
        column_max_width: int = DEFAULT_COLUMN_MAX_WIDTH,
        theme: Theme = DEFAULT_THEME,
    ) -> None:
        self.data = data
        self.theme = theme
        self.cursor_row = 0
        self.cursor_col = 0
        self.viewport_x = 0
        self.viewport_y = 0
        self.viewport_width = viewport_width
        self.viewport_height = viewport_height
        self.column_max_width = column_max_width
        self.column_widths = compute_column_widths(data, column_max_width)

    @property
    def data_rows_visible(self) -> int:
        """Number of data rows that fit under the header."""
        return max(1, self.viewport_height - RESERVED_ROWS)

    def column_width(self, column: int) -> int:
        """Width of a column, or 0 for an out-of-range index."""
        if 0 <= column < len(self.column_widths):
            return self.column_widths[column]
        return 0

    def rendered_width(self, column: int) -> int:
        """Width the column occupies on screen (collapsed columns are narrow)."""
        if self.data.is_column_visible(column):
            return self.column_widths[column]
        return self.theme.collapsed_column_width

    # ------------------------------------------------------------------
    # Viewport
    # ------------------------------------------------------------------

    def set_viewport(self, width: int, height: int) -> None:
        self.viewport_width = width
        self.viewport_height = height
        self._ensure_cursor_visible()

    def _columns_fit(self, first: int, last: int) -> bool:
        total = sum(self.rendered_width(i) for i in range(first, last + 1))
        return total <= self.viewport_width

    def _ensure_cursor_visible(self) -> None:
        # Vertical
        if self.cursor_row < self.viewport_y:
            self.viewport_y = self.cursor_row
        elif self.cursor_row >= self.viewport_y + self.data_rows_visible:
            self.viewport_y = self.cursor_row - self.data_rows_visible + 1

        # Horizontal
        if self.viewport_width <= 0:
            self.viewport_x = 0
            return
        if self.cursor_col < self.viewport_x:
            self.viewport_x = self.cursor_col
        while self.viewport_x < self.cursor_col and not self._columns_fit(
            self.viewport_x, self.cursor_col
        ):
            self.viewport_x += 1

    def visible_column_range(self) -> range:
        """Columns rendered in the current viewport (always at least one)."""
        count = self.data.column_count
        if self.viewport_width <= 0:
            return range(self.viewport_x, count)

        end = self.viewport_x
        used = 0
        while end < count:
            width = self.rendered_width(end)
            if end > self.viewport_x and used + width > self.viewport_width:
                break
            used += width
            end += 1
        return range(self.viewport_x, end)

    def visible_row_range(self) -> range:
        end = min(self.viewport_y + self.data_rows_visible, self.data.row_count)
        return range(self.viewport_y, max(self.viewport_y, end))

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def move_up(self) -> None:
        if self.cursor_row > 0:
            self.cursor_row -= 1
            self._ensure_cursor_visible()

    def move_down(self) -> None:
        # The cursor may rest one past the last data row
        if self.cursor_row < self.data.row_count:
            self.cursor_row += 1
            self._ensure_cursor_visible()

    def move_left(self) -> None:
        if self.cursor_col > 0:
            self.cursor_col -= 1
            self._ensure_cursor_visible()

    def move_right(self) -> None:
        if self.cursor_col < self.data.column_count - 1:
            self.cursor_col += 1
            self._ensure_cursor_visible()

    def toggle_column_visibility(self) -> None:
        self.data.toggle_column_visibility(self.cursor_col)
        self._ensure_cursor_visible()

    def sort_by_current_column(self) -> None:
        """Sort by the cursor column; a second sort on it reverses the order."""
        ascending = True
        if self.data.sort_column == self.cursor_col:
            ascending = not self.data.sort_ascending
        self.data.sort_by_column(self.cursor_col, ascending)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> Text:
        """Render the header line followed by the data rows in the viewport."""
        if self.data.column_count == 0:
            return Text(EMPTY_PLACEHOLDER)

        self._clamp_cursor()
        columns = self.visible_column_range()
        lines = [self._render_header(columns)]
        lines.extend(self._render_row(row, columns) for row in self.visible_row_range())
        return Text("\n").join(lines)

    def _clamp_cursor(self) -> None:
        self.cursor_row = min(max(self.cursor_row, 0), self.data.row_count)
        self.cursor_col = min(max(self.cursor_col, 0), max(0, self.data.column_count - 1))

    def _cell_text(self, content: str, width: int) -> str:
        content = truncate(_single_line(content), width, self.theme.ellipsis)
        return f" {content}".ljust(width)

    def _collapsed_text(self) -> str:
        return f" {self.theme.collapsed_column}".ljust(self.theme.collapsed_column_width)

    def _render_header(self, columns: range) -> Text:
        theme = self.theme
        line = Text()
        for i in columns:
            on_cursor = i == self.cursor_col
            if not self.data.is_column_visible(i):
                style = theme.collapsed_header
                if on_cursor:
                    style = style + Style(bgcolor=theme.header_cursor.bgcolor)
                line.append(self._collapsed_text(), style=style)
                continue

            content = self.data.headers[i]
            if i == self.data.sort_column:
                content += theme.sort_ascending if self.data.sort_ascending else theme.sort_descending
            style = theme.header_cursor if on_cursor else theme.header
            line.append(self._cell_text(content, self.column_widths[i]), style=style)
        return line

    def _render_row(self, row: int, columns: range) -> Text:
        theme = self.theme
        line = Text()
        on_row = row == self.cursor_row
        for i in columns:
            on_col = i == self.cursor_col
            if not self.data.is_column_visible(i):
                style = theme.collapsed_cell
                if on_row and on_col:
                    style = style + Style(bgcolor=theme.selected_cell.bgcolor)
                elif on_col:
                    style = style + Style(bgcolor=theme.selected_column.bgcolor)
                elif on_row:
                    style = style + Style(bgcolor=theme.selected_row.bgcolor)
                line.append(self._collapsed_text(), style=style)
                continue

            if on_row and on_col:
                style = theme.selected_cell
            elif on_row:
                style = theme.selected_row
            elif on_col:
                style = theme.selected_column
            else:
                style = theme.cell
            line.append(self._cell_text(self.data.cell(row, i), self.column_widths[i]), style=style)
        return line
