from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional, Union

from .lexer import tokenize
from .loader import load_prog
from .parser import Instructions, parse
from .runner import MAX_DP, Runner

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunOptions:
    encoding: str = "utf-8"
    max_dp: int = MAX_DP


def compile_string(source: str) -> Instructions:
    symbols = tokenize(source)
    prog = parse(symbols)
    logger.debug("parsed %d instructions from %d source characters", len(prog), len(source))
    return prog


def run_string(source: str, input: BinaryIO, output: BinaryIO, *, options: Optional[RunOptions] = None) -> Runner:
    opts = RunOptions() if options is None else options
    prog = compile_string(source)
    runner = Runner(max_dp=opts.max_dp)
    runner.run(prog, input, output)
    return runner


def run_file(path: Union[str, Path], input: BinaryIO, output: BinaryIO, *, options: Optional[RunOptions] = None) -> Runner:
    opts = RunOptions() if options is None else options
    source = load_prog(path, encoding=opts.encoding)
    return run_string(source, input, output, options=opts)
