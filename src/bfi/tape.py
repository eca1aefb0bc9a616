from __future__ import annotations

import numpy as np

DEFAULT_TAPE_SIZE = 30000
CELL_MODULUS = 256


class Tape:
    """Fixed-size circular tape of unsigned 8-bit cells.

    Cell and cursor arithmetic is done on Python ints with explicit modulo,
    never by letting the ``uint8`` storage overflow.
    """

    def __init__(self, size: int = DEFAULT_TAPE_SIZE):
        if size <= 0:
            raise ValueError(f"Tape size must be positive, got {size}")
        self.size = size
        self.reset()

    def reset(self) -> None:
        self.cells = np.zeros(self.size, dtype=np.uint8)
        self.cursor = 0

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, index: int) -> int:
        return int(self.cells[index])

    def move(self, delta: int) -> None:
        self.cursor = (self.cursor + delta) % self.size

    def read(self) -> int:
        return int(self.cells[self.cursor])

    def write(self, value: int) -> None:
        self.cells[self.cursor] = value % CELL_MODULUS

    def add(self, delta: int) -> None:
        self.write(self.read() + delta)

    def snapshot(self) -> np.ndarray:
        return self.cells.copy()

    def window(self, start: int = 0, count: int = 16) -> list:
        # Wraps past the last cell like the cursor does.
        return [int(self.cells[(start + i) % self.size]) for i in range(count)]

    def __repr__(self) -> str:
        return f"Tape(size={self.size}, cursor={self.cursor}, head={self.window(0, 8)})"
