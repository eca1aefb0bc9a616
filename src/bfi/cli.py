from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from .api import RunOptions, run_file
from .errors import BFError

logger = logging.getLogger("bfi.cli")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="bfi",
        description="A tiny Brainfuck interpreter.",
    )
    parser.add_argument(
        "program_path",
        help="Path of the Brainfuck program to execute (typically ending in .bf or .b)",
    )
    args = parser.parse_args(argv)

    log_level = os.getenv("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format='%(asctime)s %(levelname)s %(name)s %(message)s',
        stream=sys.stderr,
    )

    try:
        options = RunOptions.from_env()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    logger.info({"evt": "startup", "program": args.program_path, "tape_size": options.tape_size, "strict": options.strict})
    try:
        run_file(args.program_path, options=options)
    except OSError as e:
        print(f"error: couldn't read {args.program_path}: {e.strerror or e}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"error: {args.program_path} is not valid UTF-8 text: {e}", file=sys.stderr)
        return 1
    except BFError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0
