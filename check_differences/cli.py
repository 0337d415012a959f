#!/usr/bin/env python3
"""
Command-line entry point.

Usage:
    check-differences <file1> <file2> [<file3>...]
    python -m check_differences <file1> <file2> [<file3>...]

Prints one ``file1,file2:description`` line per contradiction and exits 1,
or prints nothing and exits 0.
"""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from . import __version__
from .config import Settings, get_settings
from .errors import MissingArtifactError, UsageError
from .pipeline import check_files

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="check-differences",
        description="Detect contradictions between two or more files.",
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="Files to compare (two or more)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def usage_text(parser: argparse.ArgumentParser, settings: Settings) -> str:
    """Usage line plus the environment variables that drive backend selection"""
    key_state = "set" if settings.openai_api_key else "not set"
    return (
        f"usage: {parser.prog} <file1> <file2> [<file3>...]\n"
        "environment:\n"
        f"  LLM_MODE=xxx      : backend to use: mock|openai|cli (current: {settings.llm_mode.value})\n"
        f"  OPENAI_API_KEY    : OpenAI API key ({key_state})\n"
        f"  USE_EXTERNAL_TOOL : use the external helper command (current: {settings.use_external_tool})\n"
        f"  RESPONSE_LOCALE   : reply language hint (current: {settings.response_locale})\n"
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"error: invalid configuration: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )

    for warning in settings.validate_llm_config():
        logger.warning(warning)

    if len(args.files) < 2:
        print(usage_text(parser, settings), end="", file=sys.stderr)
        return 1

    try:
        report = check_files(args.files, settings)
    except MissingArtifactError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except UsageError as e:
        print(f"error: {e}", file=sys.stderr)
        print(usage_text(parser, settings), end="", file=sys.stderr)
        return 1

    if report.text:
        print(report.text)
    return int(report.signal)


if __name__ == "__main__":
    sys.exit(main())
