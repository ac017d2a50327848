# -*- coding: utf-8 -*-
from __future__ import annotations

from .config.loader import load_config
from .sorter.engine import SortEngine

INPUT_FILE = "input.txt"
OUTPUT_FILE = "output.txt"


def main() -> int:
    # fixed file names, no arguments or config files consulted
    cfg = load_config(overrides={"paths": {"input": INPUT_FILE, "output": OUTPUT_FILE}})
    return SortEngine(cfg).run_and_report()


if __name__ == "__main__":
    raise SystemExit(main())
