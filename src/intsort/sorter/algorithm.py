# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import List, Sequence

from ..common.progress import make_progress


def insertion_sort(values: List[int]) -> List[int]:
    """Sort ``values`` ascending in place and return the same list.

    Only strictly greater elements are shifted, so equal values keep their order.
    """
    for i in range(1, len(values)):
        current = values[i]
        j = i - 1
        while j >= 0 and values[j] > current:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = current
    return values


def sort_lists(lists: Sequence[List[int]], progress: bool = False) -> List[List[int]]:
    if not progress:
        return [insertion_sort(values) for values in lists]

    out: List[List[int]] = []
    with make_progress(len(lists), "Sorting") as bar:
        for values in lists:
            out.append(insertion_sort(values))
            bar.update(1)
    return out
