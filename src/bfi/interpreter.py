from __future__ import annotations

import logging
from typing import Dict, Optional, Union

from .brackets import resolve_brackets
from .channels import Channel, MemoryChannel, hold
from .errors import (
    BFError,
    make_input_exhausted,
    make_output_failure,
    make_unknown_instruction,
)
from .lexer import Op, Program, load_program
from .tape import DEFAULT_TAPE_SIZE, Tape

logger = logging.getLogger("bfi.interpreter")


class Interpreter:
    """Executes a program against a circular byte tape.

    The program and its bracket map are read-only during a run; only the tape,
    its cursor and the program pointer change.
    """

    def __init__(self, program: Union[Program, str], *, tape_size: int = DEFAULT_TAPE_SIZE, strict: bool = False):
        self.program = program if isinstance(program, Program) else load_program(program)
        self.strict = strict
        self.tape = Tape(tape_size)
        self.pc = 0
        self.steps = 0
        self.bracket_map: Optional[Dict[int, int]] = None

    @classmethod
    def from_program(cls, text: str, **kwargs) -> 'Interpreter':
        return cls(load_program(text), **kwargs)

    def reset(self) -> None:
        self.tape.reset()
        self.pc = 0
        self.steps = 0

    @property
    def finished(self) -> bool:
        return self.pc >= len(self.program)

    def run(self, source: Optional[Channel] = None, sink: Optional[Channel] = None) -> int:
        """Run from the first instruction until the program pointer passes the end.

        Returns the number of instructions executed in this run. Bracket errors
        are raised before anything executes; I/O errors leave the tape as it was
        at the failing instruction.
        """
        self.bracket_map = resolve_brackets(self.program)
        self.pc = 0
        start_steps = self.steps

        if source is None:
            source = MemoryChannel()
        if sink is None:
            sink = MemoryChannel()

        logger.debug({"evt": "run_start", "length": len(self.program), "tape_size": self.tape.size, "strict": self.strict})
        with hold(source, sink):
            try:
                while self.step(source, sink):
                    pass
            except BFError as exc:
                logger.info({"evt": "run_failed", "error": type(exc).__name__, "pc": self.pc, "steps": self.steps - start_steps})
                raise

        executed = self.steps - start_steps
        logger.debug({"evt": "run_finished", "steps": executed, "cursor": self.tape.cursor})
        return executed

    def step(self, source: Channel, sink: Channel) -> bool:
        """Execute one instruction. Returns False once the program has ended.

        Resolves the bracket map on first use when called without ``run``.
        """
        if self.bracket_map is None:
            self.bracket_map = resolve_brackets(self.program)
        if self.finished:
            return False

        op = self.program.ops[self.pc]
        tape = self.tape

        if op is Op.RIGHT:
            tape.move(1)
        elif op is Op.LEFT:
            tape.move(-1)
        elif op is Op.INC:
            tape.add(1)
        elif op is Op.DEC:
            tape.add(-1)
        elif op is Op.OUTPUT:
            self._output(sink)
        elif op is Op.INPUT:
            self._input(source)
        elif op is Op.LOOP_START:
            if tape.read() == 0:
                self.pc = self.bracket_map[self.pc]
        elif op is Op.LOOP_END:
            if tape.read() != 0:
                self.pc = self.bracket_map[self.pc]
        elif self.strict:
            raise make_unknown_instruction(program=self.program, index=self.pc)
        else:
            # comment
            self.pc += 1
            return not self.finished

        self.pc += 1
        self.steps += 1
        return not self.finished

    def _output(self, sink: Channel) -> None:
        value = self.tape.read()
        try:
            sink.write_byte(value)
        except (OSError, ValueError) as exc:
            raise make_output_failure(index=self.pc, value=value, reason=str(exc)) from exc

    def _input(self, source: Channel) -> None:
        try:
            value = source.read_byte()
        except (OSError, ValueError) as exc:
            raise make_input_exhausted(index=self.pc, reason=str(exc)) from exc
        if value is None:
            raise make_input_exhausted(index=self.pc)
        self.tape.write(value)
