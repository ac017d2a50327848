# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .types import FileOpenError, WriteResult


def format_list(values: Sequence[int]) -> str:
    return "[" + ", ".join(str(v) for v in values) + "]"


def write_output_file(
    path: Union[str, Path],
    lists: Sequence[List[int]],
    logger: Optional[logging.Logger] = None,
) -> WriteResult:
    """Write one ``[a, b, c]`` line per list, truncating ``path`` first.

    Failures are logged and returned in ``WriteResult.error``, never raised.
    """
    logger = logger or logging.getLogger("intsort")
    result = WriteResult()

    try:
        # text mode turns "\n" into the platform line separator
        with open(path, "w", encoding="utf-8") as f:
            for values in lists:
                f.write(format_list(values) + "\n")
                result.lines_written += 1
    except OSError as e:
        result.error = FileOpenError(path=str(path), operation="write", reason=str(e))
        logger.error(result.error.message)

    return result
