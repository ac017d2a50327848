# -*- coding: utf-8 -*-
"""Result types passed between the pipeline stages."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class InvalidLine:
    text: str
    token: str
    line_number: Optional[int] = None

    @property
    def message(self) -> str:
        where = f"line {self.line_number}: " if self.line_number is not None else ""
        return f'{where}For input string: "{self.token}"'


@dataclass(frozen=True)
class FileOpenError:
    path: str
    operation: str  # read / write
    reason: str

    @property
    def message(self) -> str:
        if self.operation == "read":
            return f"Error occurred while reading input file: {self.reason}"
        return f"Error occurred while writing to output file: {self.reason}"


@dataclass(frozen=True)
class ParseResult:
    values: Optional[List[int]] = None
    invalid: Optional[InvalidLine] = None

    @property
    def ok(self) -> bool:
        return self.values is not None


@dataclass
class ReadResult:
    lists: List[List[int]] = field(default_factory=list)
    invalid_lines: List[InvalidLine] = field(default_factory=list)
    blank_lines: int = 0
    error: Optional[FileOpenError] = None


@dataclass
class WriteResult:
    lines_written: int = 0
    error: Optional[FileOpenError] = None


@dataclass
class RunSummary:
    input_path: str
    output_path: str
    lists_read: int = 0
    blank_lines: int = 0
    invalid_lines: int = 0
    lines_written: int = 0
    errors: List[FileOpenError] = field(default_factory=list)
    elapsed: float = 0.0

    @property
    def ok(self) -> bool:
        return not self.errors
