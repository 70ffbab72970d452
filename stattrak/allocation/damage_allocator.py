#!filepath: stattrak/allocation/damage_allocator.py
from __future__ import annotations

import math
from typing import Sequence, Tuple, TypeVar, Union

from stattrak.utils.logger import logs

Number = Union[int, float]
T = TypeVar("T")


class DamageAllocator:
    """
    Equal split of one damage occurrence across N targets.

    new = round_half_up((current + total / N) * 10) / 10

    Each target is rounded on its own, so the rounded deltas may miss
    ``total`` by at most 0.05 per target. No remainder is carried.
    """

    @staticmethod
    def share(total: Number, count: int) -> float:
        if count <= 0:
            return 0.0
        return total / count

    @staticmethod
    def round_tenth(value: Number) -> float:
        if not math.isfinite(value):
            return float(value)
        return math.floor(value * 10.0 + 0.5) / 10.0

    @staticmethod
    def allocate(
            total: Number,
            targets: Sequence[Tuple[T, Number]],
    ) -> list[Tuple[T, float]]:
        """
        targets: (target, current_value) pairs collected in one read pass.
        Returns (target, new_value) in the same order; empty input → [].
        A non-finite ``total`` allocates nothing: every target keeps its value.
        """
        if not targets:
            return []

        if not math.isfinite(total):
            logs.warning(f"[DamageAllocator] non-finite damage {total!r} ignored")
            per_target = 0.0
        else:
            per_target = DamageAllocator.share(total, len(targets))

        return [
            (target, DamageAllocator.round_tenth(current + per_target))
            for target, current in targets
        ]
