from __future__ import annotations

import logging
from typing import Dict, List

from .errors import make_unmatched_bracket
from .lexer import Op, Program

logger = logging.getLogger("bfi.brackets")


def resolve_brackets(program: Program) -> Dict[int, int]:
    """Pair every '[' with its ']' (and back) by strict nesting.

    Raises ``UnmatchedBracket`` for a ']' with no open loop, and for the
    innermost '[' still open once the scan ends.
    """
    bracket_map: Dict[int, int] = {}
    stack: List[int] = []

    for pos, op in enumerate(program.ops):
        if op is Op.LOOP_START:
            stack.append(pos)
        elif op is Op.LOOP_END:
            if not stack:
                raise make_unmatched_bracket(program=program, index=pos)
            start = stack.pop()
            bracket_map[start] = pos
            bracket_map[pos] = start

    if stack:
        raise make_unmatched_bracket(program=program, index=stack[-1])

    logger.debug({"evt": "brackets_resolved", "pairs": len(bracket_map) // 2})
    return bracket_map
