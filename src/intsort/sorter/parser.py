# -*- coding: utf-8 -*-
"""
Line parser.

A line is a run of base-10 integers separated by single spaces. A line is
either fully valid or rejected as a whole; there is no partial result.
Tokens follow the usual 32-bit integer rules: an optional leading sign, then
decimal digits (any script, so "٣" is 3), and the value must fit in a signed
32-bit int. Underscores and embedded whitespace are rejected.
"""
from __future__ import annotations

import re
from typing import List, Optional

from .types import InvalidLine, ParseResult

INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1

_TOKEN_RE = re.compile(r"[+-]?\d+")


def parse_token(token: str) -> Optional[int]:
    if not _TOKEN_RE.fullmatch(token):
        return None
    value = int(token)
    if value < INT_MIN or value > INT_MAX:
        return None
    return value


def parse_line(line: str, line_number: Optional[int] = None) -> ParseResult:
    """Parse a trimmed, non-empty line into its integers.

    Tokens are split on a single space, so two spaces in a row yield an
    empty token and the whole line is rejected.
    """
    values: List[int] = []
    for token in line.split(" "):
        v = parse_token(token)
        if v is None:
            return ParseResult(invalid=InvalidLine(text=line, token=token, line_number=line_number))
        values.append(v)
    return ParseResult(values=values)
