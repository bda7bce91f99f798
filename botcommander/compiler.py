"""Compiler — flattens nested repeat blocks into a linear instruction trace."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Iterator, Sequence

from .program import AtomicInstruction, Block, Repeat

logger = logging.getLogger(__name__)


def compile_program(program: Sequence[Block]) -> list[AtomicInstruction]:
    """Expand every repeat block in *program* into consecutive copies of its body.

    Non-repeat blocks pass through unchanged and in order. A repeat with
    count ``k`` appends its compiled body ``k`` times; an empty body (or a
    zero count) contributes nothing. Nesting depth is unbounded.

    Args:
        program: Ordered top-level blocks, possibly containing repeats.

    Returns:
        A flat list containing only atomic instructions.
    """
    compiled: list[AtomicInstruction] = []
    # (remaining blocks, output so far, times to repeat that output on exit)
    stack: list[tuple[Iterator[Block], list[AtomicInstruction], int]] = [
        (iter(program), compiled, 1)
    ]
    while stack:
        blocks, output, count = stack[-1]
        block = next(blocks, None)
        if block is None:
            stack.pop()
            if stack:
                stack[-1][1].extend(output * count)
        elif isinstance(block, Repeat):
            stack.append((iter(block.body), [], block.count))
        else:
            output.append(block)
    return compiled


def count_blocks(program: Sequence[Block]) -> int:
    """Top-level block count; a repeat counts once however large its body."""
    return len(program)


def count_instructions(trace: Sequence[AtomicInstruction]) -> dict[str, int]:
    """Return a frequency map of block type names in a compiled trace.

    Args:
        trace: Output of :func:`compile_program`.

    Returns:
        A dict mapping block type strings to occurrence counts.
        Empty dict for an empty trace.
    """
    return dict(Counter(inst.type for inst in trace))
