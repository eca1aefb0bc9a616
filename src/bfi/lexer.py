from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator, Tuple, Union


class Op(Enum):
    RIGHT = '>'
    LEFT = '<'
    INC = '+'
    DEC = '-'
    OUTPUT = '.'
    INPUT = ','
    LOOP_START = '['
    LOOP_END = ']'
    OTHER = ''

    @classmethod
    def from_char(cls, ch: str) -> 'Op':
        return _BY_CHAR.get(ch, cls.OTHER)


_BY_CHAR = {op.value: op for op in Op if op is not Op.OTHER}


@dataclass(frozen=True)
class Program:
    """A loaded program: one ``Op`` per source character.

    Non-instruction characters are kept as ``Op.OTHER`` so indices line up with
    character offsets in ``source``.
    """

    source: str
    ops: Tuple[Op, ...]

    def __len__(self) -> int:
        return len(self.ops)

    def __iter__(self) -> Iterator[Op]:
        return iter(self.ops)

    def __getitem__(self, index: int) -> Op:
        return self.ops[index]

    def symbol_at(self, index: int) -> str:
        return self.source[index]

    def location(self, index: int) -> Tuple[int, int]:
        # 1-based (line, column)
        line = self.source.count('\n', 0, index) + 1
        col = index - (self.source.rfind('\n', 0, index) + 1) + 1
        return line, col

    def instruction_count(self) -> int:
        return sum(1 for op in self.ops if op is not Op.OTHER)


def load_program(text: str) -> Program:
    return Program(source=text, ops=tuple(Op.from_char(ch) for ch in text))


def load_file(path: Union[str, Path], *, encoding: str = "utf-8") -> Program:
    p = Path(path)
    return load_program(p.read_text(encoding=encoding))
