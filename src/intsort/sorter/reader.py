# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from .parser import parse_line
from .types import FileOpenError, ReadResult

# trimmed characters: every code point up to and including the space
TRIM_CHARS = "".join(chr(c) for c in range(0x21))


def trim(line: str) -> str:
    """Strip control characters and spaces from both ends; other Unicode whitespace is kept."""
    return line.strip(TRIM_CHARS)


def read_input_file(path: Union[str, Path], logger: Optional[logging.Logger] = None) -> ReadResult:
    """Read one integer list per line from ``path``.

    Blank lines are skipped quietly, invalid lines are logged and skipped.
    An unreadable file is logged and reported through ``ReadResult.error``.
    Lines are decoded one at a time, so a bad byte stops the read at that
    line and every list parsed before it is still returned.
    """
    logger = logger or logging.getLogger("intsort")
    result = ReadResult()

    try:
        f = open(path, "rb")
    except OSError as e:
        result.error = FileOpenError(path=str(path), operation="read", reason=str(e))
        logger.error(result.error.message)
        return result

    try:
        with f:
            for line_number, raw in enumerate(f, 1):
                try:
                    text = raw.decode("utf-8")
                except UnicodeDecodeError as e:
                    result.error = FileOpenError(path=str(path), operation="read", reason=f"line {line_number}: {e}")
                    logger.error(result.error.message)
                    break

                line = trim(text)
                if not line:
                    result.blank_lines += 1
                    logger.debug(f"line {line_number}: blank, skipped")
                    continue

                parsed = parse_line(line, line_number)
                if parsed.ok:
                    result.lists.append(parsed.values)
                else:
                    result.invalid_lines.append(parsed.invalid)
                    logger.warning(f"Error: Invalid input - {parsed.invalid.message}")
    except OSError as e:
        result.error = FileOpenError(path=str(path), operation="read", reason=str(e))
        logger.error(result.error.message)

    logger.debug(
        f"{path}: {len(result.lists)} lists, {len(result.invalid_lines)} invalid, {result.blank_lines} blank"
    )
    return result
