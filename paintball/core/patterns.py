"""
Area-attack patterns.

Each pattern is a pure function ``(x, y, width, height) -> [(dx, dy), ...]``
giving the ordered offsets, relative to the attacker, of the cells it
attacks. The attacker's own cell is never part of a pattern.
"""

from __future__ import annotations

from typing import Callable, List

from .types import GridPos

AttackPattern = Callable[[int, int, int, int], List[GridPos]]


def rectangle_pattern(x: int, y: int, width: int, height: int) -> List[GridPos]:
    """
    Every cell of the block from the attacker to the bottom-right corner.

    Scanned row-major, starting one cell past the attacker.

    >>> rectangle_pattern(9, 9, 10, 10)
    [(1, 0), (0, 1), (1, 1)]
    """
    attack_width = width - x + 1
    attack_height = height - y + 1
    return [(i % attack_width, i // attack_width) for i in range(1, attack_width * attack_height)]


def row_pattern(x: int, y: int, width: int, height: int) -> List[GridPos]:
    """
    Every other cell of the attacker's row, alternating right and left.

    Offsets go +1, -1, +2, -2, ... Once one side runs past the field edge,
    the remaining cells are taken from the other side, moving outwards, so
    exactly ``width - 1`` distinct cells are visited.

    >>> [x + dx for dx, _ in row_pattern(8, 1, 10, 1)]
    [9, 7, 10, 6, 5, 4, 3, 2, 1]
    """
    offsets: List[GridPos] = []
    for i in range(1, width):
        step = (i - 1) // 2 + 1
        if x + step > width:
            target = width - i
        elif x - step <= 0:
            target = i + 1
        else:
            target = x + step if i % 2 != 0 else x - step
        offsets.append((target - x, 0))
    return offsets


# NW, NE, SW, SE
_DIAGONALS = ((-1, -1), (1, -1), (-1, 1), (1, 1))


def diagonal_pattern(x: int, y: int, width: int, height: int) -> List[GridPos]:
    """
    Every cell on both diagonals through the attacker.

    Rays are visited round-robin (NW, NE, SW, SE), one cell further out per
    round; a ray is skipped once it has no cells left. The order is the same
    every round and does not depend on the attacker's position.
    """
    lengths = (
        min(x - 1, y - 1),
        min(width - x, y - 1),
        min(x - 1, height - y),
        min(width - x, height - y),
    )
    offsets: List[GridPos] = []
    for distance in range(1, max(lengths) + 1):
        for (sx, sy), length in zip(_DIAGONALS, lengths):
            if distance <= length:
                offsets.append((sx * distance, sy * distance))
    return offsets
