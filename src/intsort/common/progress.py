from __future__ import annotations
from tqdm import tqdm


def make_progress(total: int, desc: str) -> tqdm:
    return tqdm(
        total=total,
        desc=desc,
        leave=False,
        bar_format="{desc}: {percentage:3.0f}%|{bar}| {n_fmt}/{total_fmt} [{elapsed}<{remaining}]"
    )
