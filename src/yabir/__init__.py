from .lexer import Symbol, tokenize
from .parser import Instruction, Instructions, parse
from .runner import Runner, run
from .errors import (
    YabirError,
    LoadError,
    ParseError,
    UnmatchedLoopClose,
    UnmatchedLoopOpen,
    RunError,
    PointerUnderflow,
    PointerOverflow,
    ProgramIOError,
)
from .api import RunOptions, compile_string, run_file, run_string

__all__ = [
    'Symbol',
    'tokenize',
    'Instruction',
    'Instructions',
    'parse',
    'Runner',
    'run',
    'YabirError',
    'LoadError',
    'ParseError',
    'UnmatchedLoopClose',
    'UnmatchedLoopOpen',
    'RunError',
    'PointerUnderflow',
    'PointerOverflow',
    'ProgramIOError',
    'RunOptions',
    'compile_string',
    'run_file',
    'run_string',
]
