from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .lexer import Program


def _build_context(lines: List[str], line_no_1: int, *, context: int = 2) -> str:
    if not lines:
        return ""
    idx = min(max(1, line_no_1), len(lines))
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
    return "\n".join(out)


def _hint_for(symbol: str, *, kind: str) -> Optional[str]:
    if kind == 'bracket':
        if symbol == ']':
            return 'This "]" closes no loop. Remove it or add a matching "[" before it.'
        if symbol == '[':
            return 'This "[" is never closed. Add a matching "]" after it.'
        return None
    if kind == 'instruction':
        if symbol.isspace():
            return 'Strict mode rejects whitespace too. Strip the program down to the eight instruction symbols.'
        return 'Only > < + - . , [ ] are instructions. Disable strict mode to treat other characters as comments.'
    return None


@dataclass
class BFError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class UnmatchedBracket(BFError):
    index: int
    symbol: str
    line: int
    context: str


@dataclass
class UnknownInstruction(BFError):
    symbol: str
    index: int
    line: int
    context: str


@dataclass
class InputExhausted(BFError):
    index: int


@dataclass
class OutputFailure(BFError):
    index: int
    value: int


def make_unmatched_bracket(*, program: Program, index: int) -> UnmatchedBracket:
    symbol = program.symbol_at(index)
    line, col = program.location(index)
    ctx = _build_context(program.source.split('\n'), line)
    hint = _hint_for(symbol, kind='bracket')
    hint_block = f"\nHint: {hint}" if hint else ""
    return UnmatchedBracket(
        message=f"UnmatchedBracket: '{symbol}' at index {index} (line {line}, column {col})\n{ctx}{hint_block}",
        index=index,
        symbol=symbol,
        line=line,
        context=ctx,
    )


def make_unknown_instruction(*, program: Program, index: int) -> UnknownInstruction:
    symbol = program.symbol_at(index)
    line, col = program.location(index)
    ctx = _build_context(program.source.split('\n'), line)
    hint = _hint_for(symbol, kind='instruction')
    hint_block = f"\nHint: {hint}" if hint else ""
    return UnknownInstruction(
        message=f"UnknownInstruction: {symbol!r} at index {index} (line {line}, column {col})\n{ctx}{hint_block}",
        symbol=symbol,
        index=index,
        line=line,
        context=ctx,
    )


def make_input_exhausted(*, index: int, reason: str = "end of input") -> InputExhausted:
    return InputExhausted(
        message=f"InputExhausted: no byte available for ',' at index {index} ({reason})",
        index=index,
    )


def make_output_failure(*, index: int, value: int, reason: str) -> OutputFailure:
    return OutputFailure(
        message=f"OutputFailure: could not write byte {value} for '.' at index {index} ({reason})",
        index=index,
        value=value,
    )
