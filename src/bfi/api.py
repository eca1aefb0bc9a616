from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

import numpy as np

from .channels import Channel, MemoryChannel, stdio_channels
from .interpreter import Interpreter
from .lexer import load_file, load_program
from .tape import DEFAULT_TAPE_SIZE

_TRUTHY = {'1', 'true', 'yes', 'on'}


@dataclass(frozen=True)
class RunOptions:
    tape_size: int = DEFAULT_TAPE_SIZE
    strict: bool = False

    def __post_init__(self) -> None:
        if self.tape_size <= 0:
            raise ValueError(f"tape_size must be positive, got {self.tape_size}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'RunOptions':
        env = os.environ if environ is None else environ
        raw_size = env.get("BFI_TAPE_SIZE", "").strip()
        try:
            tape_size = int(raw_size) if raw_size else DEFAULT_TAPE_SIZE
        except ValueError:
            raise ValueError(f"BFI_TAPE_SIZE must be an integer, got {raw_size!r}") from None
        strict = env.get("BFI_STRICT", "").strip().lower() in _TRUTHY
        return cls(tape_size=tape_size, strict=strict)


@dataclass(frozen=True, eq=False)
class RunResult:
    output: bytes
    tape: np.ndarray
    cursor: int
    steps: int


def _make_interpreter(program, options: Optional[RunOptions]) -> Interpreter:
    opts = RunOptions() if options is None else options
    return Interpreter(program, tape_size=opts.tape_size, strict=opts.strict)


def run_string(source: str, *, options: Optional[RunOptions] = None, input: bytes = b"") -> RunResult:
    interpreter = _make_interpreter(load_program(source), options)
    channel_in = MemoryChannel(input)
    channel_out = MemoryChannel()
    steps = interpreter.run(channel_in, channel_out)
    return RunResult(
        output=channel_out.output,
        tape=interpreter.tape.snapshot(),
        cursor=interpreter.tape.cursor,
        steps=steps,
    )


def run_file(
    path: str | Path,
    *,
    options: Optional[RunOptions] = None,
    source: Optional[Channel] = None,
    sink: Optional[Channel] = None,
    encoding: str = "utf-8",
) -> Interpreter:
    interpreter = _make_interpreter(load_file(path, encoding=encoding), options)
    if source is None or sink is None:
        std_in, std_out = stdio_channels()
        source = std_in if source is None else source
        sink = std_out if sink is None else sink
    interpreter.run(source, sink)
    return interpreter
