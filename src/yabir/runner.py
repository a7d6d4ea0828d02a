from __future__ import annotations

import sys
from typing import BinaryIO, Sequence

from .errors import PointerOverflow, PointerUnderflow, ProgramIOError
from .parser import (
    Decrement,
    Increment,
    Instruction,
    LoopClose,
    LoopOpen,
    MoveLeft,
    MoveRight,
    ReadByte,
    WriteByte,
)
from .state import MachineState

MAX_DP = sys.maxsize


class Runner:
    """
    Tape machine executing resolved instructions.

    State:
    - A tape of 8-bit cells that grows on demand and never shrinks
    - A data pointer (dp) into the tape
    - An instruction pointer (ip) into the program

    The state is reset at the start of every run, so one runner can be
    reused for several programs, but not from several threads at once.
    """

    def __init__(self, max_dp: int = MAX_DP):
        self.max_dp = max_dp
        self.state = MachineState()

    @property
    def tape(self) -> bytes:
        return bytes(self.state.data)

    @property
    def dp(self) -> int:
        return self.state.dp

    @property
    def ip(self) -> int:
        return self.state.ip

    def run(self, prog: Sequence[Instruction], input: BinaryIO, output: BinaryIO) -> None:
        """
        Run prog, reading "," bytes from input and writing "." bytes to output.

        Both streams belong to the caller and are left open. Raises a
        RunError subclass at the first failing instruction.
        """
        state = self.state
        state.reset(tuple(prog))

        while state.ip < len(state.prog):
            self._run_instruction(state.prog[state.ip], input, output)
            state.ip += 1

    def _run_instruction(self, instr: Instruction, input: BinaryIO, output: BinaryIO) -> None:
        state = self.state
        t = type(instr)

        if t is MoveRight:
            if state.dp >= self.max_dp:
                raise PointerOverflow("cannot increment the data pointer because it is MAX")
            state.dp += 1
        elif t is MoveLeft:
            if state.dp == 0:
                raise PointerUnderflow("cannot decrement the data pointer because it is 0")
            state.dp -= 1
        elif t is Increment:
            self._store((self._load() + 1) & 0xFF)
        elif t is Decrement:
            self._store((self._load() - 1) & 0xFF)
        elif t is ReadByte:
            self._read_value(input)
        elif t is WriteByte:
            self._write_value(output)
        elif t is LoopOpen:
            if self._load() == 0:
                state.ip = instr.target
        elif t is LoopClose:
            if self._load() != 0:
                state.ip = instr.target
        else:
            raise TypeError(f"Unknown instruction: {instr!r}")

    def _load(self) -> int:
        self.state.ensure_current_cell()
        return self.state.data[self.state.dp]

    def _store(self, value: int) -> None:
        self.state.ensure_current_cell()
        self.state.data[self.state.dp] = value

    def _read_value(self, input: BinaryIO) -> None:
        try:
            chunk = input.read(1)
        except (OSError, ValueError) as e:
            raise ProgramIOError(
                message=f"reading of a value failed (reason: {e})",
                reason=str(e),
            ) from e
        # EOF leaves the current cell unchanged.
        if chunk:
            self._store(chunk[0])

    def _write_value(self, output: BinaryIO) -> None:
        value = self._load()
        try:
            output.write(bytes((value,)))
            output.flush()
        except (OSError, ValueError) as e:
            raise ProgramIOError(
                message=f"writing of a value failed (reason: {e})",
                reason=str(e),
            ) from e


def run(prog: Sequence[Instruction], input: BinaryIO, output: BinaryIO) -> None:
    Runner().run(prog, input, output)
