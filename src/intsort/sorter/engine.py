# -*- coding: utf-8 -*-
from __future__ import annotations

import time
import logging
from typing import Any, Dict, Optional

from colorama import Fore, Style, init as colorama_init

from ..config.loader import load_config
from ..common.logging_utils import setup_logger
from .algorithm import sort_lists
from .reader import read_input_file
from .types import RunSummary
from .writer import write_output_file

colorama_init(autoreset=True)


class SortEngine:
    """Reader -> Sorter -> Writer over the paths named in the config."""

    def __init__(self, cfg: Optional[Dict[str, Any]] = None, logger: Optional[logging.Logger] = None):
        self.cfg = cfg if cfg is not None else load_config()
        log_cfg = self.cfg.get("logging", {})
        self.logger = logger or setup_logger("intsort", str(log_cfg.get("level", "INFO")), log_cfg.get("log_file"))

    def _paths(self):
        paths = self.cfg.get("paths", {})
        return str(paths.get("input", "input.txt")), str(paths.get("output", "output.txt"))

    def run(self) -> RunSummary:
        input_path, output_path = self._paths()
        show_progress = bool(self.cfg.get("runtime", {}).get("show_progress", False))
        summary = RunSummary(input_path=input_path, output_path=output_path)
        start = time.time()

        self.logger.info(f"Sorting {input_path} -> {output_path}")

        read = read_input_file(input_path, self.logger)
        summary.lists_read = len(read.lists)
        summary.blank_lines = read.blank_lines
        summary.invalid_lines = len(read.invalid_lines)
        if read.error:
            summary.errors.append(read.error)

        sorted_lists = sort_lists(read.lists, progress=show_progress)

        written = write_output_file(output_path, sorted_lists, self.logger)
        summary.lines_written = written.lines_written
        if written.error:
            summary.errors.append(written.error)

        summary.elapsed = time.time() - start
        self.logger.info(
            f"Done: read={summary.lists_read} invalid={summary.invalid_lines} "
            f"written={summary.lines_written} seconds={summary.elapsed:.3f}"
        )
        return summary

    def show_summary(self, summary: RunSummary):
        color = Fore.GREEN if summary.ok else Fore.YELLOW
        print(f"\n{color}{'=' * 40}{Style.RESET_ALL}")
        print(f"{color}Sorted {summary.lines_written} list(s) into {summary.output_path}{Style.RESET_ALL}")
        print(f"   Lists read:    {summary.lists_read}")
        print(f"   Blank lines:   {summary.blank_lines}")
        print(f"   Invalid lines: {summary.invalid_lines}")
        for err in summary.errors:
            print(f"{Fore.RED}   {err.message}{Style.RESET_ALL}")
        print(f"{color}{'=' * 40}{Style.RESET_ALL}")

    def run_and_report(self) -> int:
        summary = self.run()
        if self.cfg.get("runtime", {}).get("show_summary", True):
            self.show_summary(summary)
        # data and I/O problems are reported, never turned into a failing exit code
        return 0
