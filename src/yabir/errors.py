from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence


def _build_context(chars: Sequence[str], index: int, *, context: int = 8) -> str:
    # Window of program characters around index, with a caret under it.
    start = max(0, index - context)
    end = min(len(chars), index + context + 1)

    window = ''.join(chars[start:end])
    prefix = '...' if start > 0 else ''
    suffix = '...' if end < len(chars) else ''
    caret = ' ' * (len(prefix) + index - start) + '^'
    return f"  {prefix}{window}{suffix}\n  {caret}"


def _hint_for(message: str, *, kind: str) -> Optional[str]:
    msg = message.lower()
    if kind == 'parse':
        if 'missing start of a loop' in msg:
            return 'Remove the extra "]" or add a matching "[" before it.'
        if 'missing end of a loop' in msg:
            return 'Add a matching "]" after the loop body.'
        return None
    return None


@dataclass
class YabirError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class LoadError(YabirError):
    path: str
    reason: str


@dataclass
class ParseError(YabirError):
    position: int
    context: str = field(default='', compare=False)


class UnmatchedLoopClose(ParseError):
    pass


class UnmatchedLoopOpen(ParseError):
    pass


class RunError(YabirError):
    pass


class PointerUnderflow(RunError):
    pass


class PointerOverflow(RunError):
    pass


@dataclass
class ProgramIOError(RunError):
    reason: str


def make_load_error(*, path: str, reason: str) -> LoadError:
    return LoadError(message=f"cannot load {path}: {reason}", path=path, reason=reason)


def make_parse_error(error_cls, *, message: str, chars: Sequence[str], position: int) -> ParseError:
    ctx = _build_context(chars, position)
    hint = _hint_for(message, kind='parse')
    hint_block = f"\nHint: {hint}" if hint else ""
    return error_cls(
        message=message,
        position=position,
        context=f"{ctx}{hint_block}",
    )
