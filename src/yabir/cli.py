from __future__ import annotations

import os
import sys
from typing import List, Optional

from .api import RunOptions, run_file
from .errors import YabirError

USAGE = "usage: yabir PROG"


def should_print_usage(args: List[str]) -> bool:
    return len(args) != 1 or args[0] in ("-h", "--help")


def print_usage() -> None:
    print(USAGE)


def print_error(err: Exception) -> None:
    print(f"error: {err}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    # Any single argument other than -h/--help is a path, even "--" or "-x".
    args = list(sys.argv[1:] if argv is None else argv)
    if should_print_usage(args):
        print_usage()
        return 0

    options = RunOptions(encoding=os.environ.get("YABIR_ENCODING", "utf-8"))
    output = sys.stdout.buffer
    status = 0
    try:
        run_file(args[0], sys.stdin.buffer, output, options=options)
    except YabirError as e:
        print_error(e)
        status = 1

    try:
        output.flush()
    except OSError as e:
        print_error(e)
        status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())
