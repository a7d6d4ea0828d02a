from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

from .errors import UnmatchedLoopClose, UnmatchedLoopOpen, make_parse_error
from .lexer import Symbol


# ---------------- Instructions ----------------
@dataclass(frozen=True)
class MoveRight:
    char = '>'


@dataclass(frozen=True)
class MoveLeft:
    char = '<'


@dataclass(frozen=True)
class Increment:
    char = '+'


@dataclass(frozen=True)
class Decrement:
    char = '-'


@dataclass(frozen=True)
class ReadByte:
    char = ','


@dataclass(frozen=True)
class WriteByte:
    char = '.'


@dataclass(frozen=True)
class LoopOpen:
    target: int  # index of the matching LoopClose
    char = '['


@dataclass(frozen=True)
class LoopClose:
    target: int  # index of the matching LoopOpen
    char = ']'


Instruction = Union[MoveRight, MoveLeft, Increment, Decrement, ReadByte, WriteByte, LoopOpen, LoopClose]
Instructions = Tuple[Instruction, ...]

_SIMPLE = {
    Symbol.MOVE_RIGHT: MoveRight(),
    Symbol.MOVE_LEFT: MoveLeft(),
    Symbol.INCREMENT: Increment(),
    Symbol.DECREMENT: Decrement(),
    Symbol.READ_BYTE: ReadByte(),
    Symbol.WRITE_BYTE: WriteByte(),
}


# ---------------- Parser: symbols -> instructions ----------------
def parse(symbols: Sequence[Symbol]) -> Instructions:
    """
    Resolve a symbol sequence into instructions.

    Every loop instruction gets the index of its partner as its target.
    Raises UnmatchedLoopClose on the first "]" without an open loop, or
    UnmatchedLoopOpen for the innermost loop left open at the end.
    """
    instructions: List[Instruction] = []
    loop_stack: List[int] = []

    for i, symbol in enumerate(symbols):
        if symbol is Symbol.LOOP_OPEN:
            # Target is unknown until the matching close is reached.
            instructions.append(LoopOpen(0))
            loop_stack.append(i)
        elif symbol is Symbol.LOOP_CLOSE:
            if not loop_stack:
                raise make_parse_error(
                    UnmatchedLoopClose,
                    message=f"missing start of a loop ended at index {i}",
                    chars=[s.value for s in symbols],
                    position=i,
                )
            start = loop_stack.pop()
            instructions.append(LoopClose(start))
            instructions[start] = LoopOpen(i)
        else:
            instructions.append(_SIMPLE[symbol])

    if loop_stack:
        start = loop_stack[-1]
        raise make_parse_error(
            UnmatchedLoopOpen,
            message=f"missing end of a loop started at index {start}",
            chars=[s.value for s in symbols],
            position=start,
        )
    return tuple(instructions)


def to_source(instructions: Sequence[Instruction]) -> str:
    return ''.join(instr.char for instr in instructions)
