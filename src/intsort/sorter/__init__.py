from .types import FileOpenError, InvalidLine, ParseResult, ReadResult, RunSummary, WriteResult
from .parser import parse_line, parse_token
from .reader import read_input_file
from .algorithm import insertion_sort, sort_lists
from .writer import format_list, write_output_file

__all__ = [
    "FileOpenError",
    "InvalidLine",
    "ParseResult",
    "parse_line",
    "parse_token",
    "ReadResult",
    "RunSummary",
    "read_input_file",
    "insertion_sort",
    "sort_lists",
    "WriteResult",
    "format_list",
    "write_output_file",
]
