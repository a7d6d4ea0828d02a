from __future__ import annotations

from enum import Enum
from typing import List


class Symbol(Enum):
    """A recognized program character. The value is the character itself."""

    MOVE_RIGHT = '>'
    MOVE_LEFT = '<'
    INCREMENT = '+'
    DECREMENT = '-'
    READ_BYTE = ','
    WRITE_BYTE = '.'
    LOOP_OPEN = '['
    LOOP_CLOSE = ']'


_SYMBOLS = {s.value: s for s in Symbol}


def is_code_char(ch: str) -> bool:
    return ch in _SYMBOLS


def tokenize(source: str) -> List[Symbol]:
    """
    Convert program text into a list of symbols.

    Every character other than the eight command characters is a comment
    and is dropped without leaving a trace in the result.
    """
    return [_SYMBOLS[ch] for ch in source if is_code_char(ch)]
