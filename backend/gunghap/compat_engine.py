"""Name compatibility (이름 궁합) calculation. Pure Python, no external dependencies.

Pipeline: per-syllable stroke totals of both names -> digits (mod 10) ->
interleave -> pyramid of pairwise sums mod 10 -> two-digit score.
"""
from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, TypeVar

from .hangul import name_strokes

T = TypeVar("T")

MAX_SCORE = 100


# ── Interleaving ─────────────────────────────────────────────────────

def interleave(first: Sequence[T], second: Sequence[T], start_with_second: bool = False) -> list[T]:
    """Alternate elements of two sequences by position.

    At each position the primary sequence (``second`` if ``start_with_second``)
    contributes first; a sequence that has run out is skipped.
    """
    primary, other = (second, first) if start_with_second else (first, second)
    result: list[T] = []
    for i in range(max(len(first), len(second))):
        if i < len(primary):
            result.append(primary[i])
        if i < len(other):
            result.append(other[i])
    return result


def starts_with_second(name_1: str, name_2: str) -> bool:
    """The longer name leads the interleave; on a tie the first name does."""
    return len(name_2) > len(name_1)


# ── Reduction ────────────────────────────────────────────────────────

def normalize_strokes(values: Iterable[Any]) -> tuple[int, ...]:
    """Keep non-negative ints and take each modulo 10.

    Anything else (None for undecomposable syllables, negatives, non-numbers)
    is dropped, so the result can be shorter than the input.
    """
    return tuple(
        v % 10
        for v in values
        if isinstance(v, int) and not isinstance(v, bool) and v >= 0
    )


def build_ladder(digits: Sequence[int]) -> tuple[tuple[int, ...], ...]:
    """Collapse adjacent pairs mod 10 until a row has two or fewer digits.

    Fewer than two input digits gives an empty ladder.
    """
    if len(digits) < 2:
        return ()
    row = tuple(digits)
    rows = [row]
    while len(row) > 2:
        row = tuple((row[i] + row[i + 1]) % 10 for i in range(len(row) - 1))
        rows.append(row)
    return tuple(rows)


def score_ladder(rows: Sequence[Sequence[int]]) -> int:
    last = rows[-1] if rows else (0, 0)
    tens = last[0] if len(last) > 0 else 0
    ones = last[1] if len(last) > 1 else 0
    return min(MAX_SCORE, tens * 10 + ones)


# ── Result dataclass ─────────────────────────────────────────────────

@dataclass(frozen=True)
class CompatibilityResult:
    strokes_1: tuple[int, ...]
    strokes_2: tuple[int, ...]
    interleaved: tuple[int, ...]
    rows: tuple[tuple[int, ...], ...]
    score: int
    start_with_second: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "strokes_1": list(self.strokes_1),
            "strokes_2": list(self.strokes_2),
            "interleaved": list(self.interleaved),
            "rows": [list(row) for row in self.rows],
            "score": self.score,
        }


def calculate_from_strokes(
    strokes_1: Iterable[Any],
    strokes_2: Iterable[Any],
    start_with_second: bool = False,
) -> CompatibilityResult:
    """Run normalization, interleaving and reduction on two raw stroke sequences."""
    a = normalize_strokes(strokes_1)
    b = normalize_strokes(strokes_2)
    interleaved = tuple(interleave(a, b, start_with_second))
    rows = build_ladder(interleaved)
    return CompatibilityResult(
        strokes_1=a,
        strokes_2=b,
        interleaved=interleaved,
        rows=rows,
        score=score_ladder(rows),
        start_with_second=start_with_second,
    )


def compute_compatibility(name_1: str, name_2: str) -> CompatibilityResult:
    """Compatibility score of two Hangul names with the full calculation trace.

    Performs no validation: syllables that cannot be decomposed are dropped
    rather than raising.
    """
    return calculate_from_strokes(
        name_strokes(name_1),
        name_strokes(name_2),
        start_with_second=starts_with_second(name_1, name_2),
    )
