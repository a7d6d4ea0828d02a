from __future__ import annotations

from dataclasses import dataclass, field

from .parser import Instructions


@dataclass
class MachineState:
    prog: Instructions = ()
    data: bytearray = field(default_factory=bytearray)
    ip: int = 0
    dp: int = 0

    def reset(self, prog: Instructions = ()) -> None:
        self.prog = prog
        self.data.clear()
        self.ip = 0
        self.dp = 0

    def ensure_current_cell(self) -> None:
        # Grow the tape with zeros so that data[dp] exists.
        missing = self.dp + 1 - len(self.data)
        if missing > 0:
            self.data.extend(bytes(missing))
