"""
Error types raised while loading a document.

Every failure of a load attempt is reported as exactly one of these.
"""

from __future__ import annotations


class TabluxError(Exception):
    """Base class for all Tablux load errors."""


class ReadError(TabluxError):
    """The input source could not be read."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot read {source}: {reason}")


class UnsupportedFormatError(TabluxError, ValueError):
    """Detection or the --format override yielded no usable parser."""


class ParseError(TabluxError, ValueError):
    """Malformed JSON, JSONL or CSV input.

    Attributes:
        format_name: Format the parser was reading.
        line: 1-based line of the error, if known.
        column: 1-based column of the error, if known.
    """

    def __init__(
        self,
        format_name: str,
        message: str,
        *,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        self.format_name = format_name
        self.message = message
        self.line = line
        self.column = column
        super().__init__(self._describe())

    def _describe(self) -> str:
        where = ""
        if self.line is not None:
            where = f" (line {self.line}"
            if self.column is not None:
                where += f", column {self.column}"
            where += ")"
        return f"failed to parse {self.format_name.upper()}{where}: {self.message}"
