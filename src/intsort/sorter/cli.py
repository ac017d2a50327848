# -*- coding: utf-8 -*-
from __future__ import annotations

import argparse
from typing import Any, Dict, List, Optional

from colorama import Fore, Style

from ..__about__ import __author__, __title__, __version__
from ..config.loader import ConfigError, LOG_LEVELS, load_config
from .engine import SortEngine


def _overrides(args: argparse.Namespace) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    if args.input_path:
        out.setdefault("paths", {})["input"] = args.input_path
    if args.output_path:
        out.setdefault("paths", {})["output"] = args.output_path
    if args.log_level:
        out.setdefault("logging", {})["level"] = args.log_level
    if args.progress:
        out.setdefault("runtime", {})["show_progress"] = True
    if args.quiet:
        out.setdefault("runtime", {})["show_summary"] = False
    return out


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="intsort-run", description="Insertion-sort integer lists, one list per line")
    p.add_argument("-i", "--input", dest="input_path", help="input file (default: input.txt)")
    p.add_argument("-o", "--output", dest="output_path", help="output file (default: output.txt)")
    p.add_argument("--config", help="optional YAML config")
    p.add_argument("--log-level", choices=LOG_LEVELS, help="log level (default: INFO)")
    p.add_argument("--progress", action="store_true", help="show a progress bar while sorting")
    p.add_argument("--quiet", action="store_true", help="skip the summary")
    p.add_argument("--version", action="version", version=f"{__title__} {__version__} ({__author__})")
    return p


def run(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = load_config(args.config, _overrides(args))
        engine = SortEngine(cfg)
    except (ConfigError, OSError) as e:
        print(f"{Fore.RED}Config error: {e}{Style.RESET_ALL}")
        return 2
    return engine.run_and_report()


def main():
    raise SystemExit(run())
