"""Hangul syllable decomposition and stroke-count lookup. No external dependencies."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache


# ── Unicode composition constants ────────────────────────────────────

HANGUL_BASE = 0xAC00

INITIAL_COUNT = 19
VOWEL_COUNT = 21
FINAL_COUNT = 28  # slot 0 is "no final consonant"

HANGUL_LAST = HANGUL_BASE + INITIAL_COUNT * VOWEL_COUNT * FINAL_COUNT - 1  # U+D7A3 힣

SENTINEL_INDICES: tuple[int, int, int] = (-1, -1, -1)


# ── Stroke tables ────────────────────────────────────────────────────

# ㄱ ㄲ ㄴ ㄷ ㄸ ㄹ ㅁ ㅂ ㅃ ㅅ ㅆ ㅇ ㅈ ㅉ ㅊ ㅋ ㅌ ㅍ ㅎ
INITIAL_STROKES: tuple[int, ...] = (1, 2, 1, 2, 4, 3, 3, 4, 8, 2, 4, 1, 2, 4, 3, 2, 3, 4, 3)

# ㅏ ㅐ ㅑ ㅒ ㅓ ㅔ ㅕ ㅖ ㅗ ㅘ ㅙ ㅚ ㅛ ㅜ ㅝ ㅞ ㅟ ㅠ ㅡ ㅢ ㅣ
VOWEL_STROKES: tuple[int, ...] = (2, 3, 3, 4, 2, 3, 3, 4, 2, 4, 5, 3, 3, 2, 4, 5, 3, 3, 1, 2, 1)

# (none) ㄱ ㄲ ㄳ ㄴ ㄵ ㄶ ㄷ ㄹ ㄺ ㄻ ㄼ ㄽ ㄾ ㄿ ㅀ ㅁ ㅂ ㅄ ㅅ ㅆ ㅇ ㅈ ㅊ ㅋ ㅌ ㅍ
# Final ㅎ (slot 27) has no entry: syllables ending in it get no stroke total.
FINAL_STROKES: tuple[int, ...] = (
    0, 1, 2, 3, 1, 3, 4, 2, 3, 4, 7, 5, 6, 7, 6, 3, 4, 6, 2, 4, 1, 2, 3, 2, 3, 4, 3,
)


class ComponentKind(str, Enum):
    INITIAL = "initial"
    VOWEL = "vowel"
    FINAL = "final"


_TABLES: dict[ComponentKind, tuple[int, ...]] = {
    ComponentKind.INITIAL: INITIAL_STROKES,
    ComponentKind.VOWEL: VOWEL_STROKES,
    ComponentKind.FINAL: FINAL_STROKES,
}


def stroke_count(kind: ComponentKind, index: int) -> int | None:
    """Return the stroke count at ``index`` of the table for ``kind``, or None if there is no entry."""
    table = _TABLES[kind]
    if 0 <= index < len(table):
        return table[index]
    return None


# ── Decomposition ────────────────────────────────────────────────────

@dataclass(frozen=True)
class SyllableComponents:
    initial: int
    vowel: int
    final: int

    @property
    def indices(self) -> tuple[int, int, int]:
        return (self.initial, self.vowel, self.final)


@dataclass(frozen=True)
class InvalidSyllable:
    """Marks input that is not a single composed Hangul syllable."""

    @property
    def indices(self) -> tuple[int, int, int]:
        return SENTINEL_INDICES


Decomposition = SyllableComponents | InvalidSyllable


def is_composed_syllable(char: str) -> bool:
    return len(char) == 1 and HANGUL_BASE <= ord(char) <= HANGUL_LAST


@lru_cache(maxsize=4096)
def decompose_syllable(syllable: str) -> Decomposition:
    """Split one composed syllable into (initial, vowel, final) table indices.

    Anything other than a single character in U+AC00..U+D7A3 yields
    ``InvalidSyllable()``; this function never raises.
    """
    if not is_composed_syllable(syllable):
        return InvalidSyllable()
    offset = ord(syllable) - HANGUL_BASE
    block = VOWEL_COUNT * FINAL_COUNT
    return SyllableComponents(
        initial=offset // block,
        vowel=(offset % block) // FINAL_COUNT,
        final=offset % FINAL_COUNT,
    )


def component_strokes(decomposition: Decomposition) -> tuple[int | None, int | None, int | None]:
    initial, vowel, final = decomposition.indices
    return (
        stroke_count(ComponentKind.INITIAL, initial),
        stroke_count(ComponentKind.VOWEL, vowel),
        stroke_count(ComponentKind.FINAL, final),
    )


def syllable_stroke_total(syllable: str) -> int | None:
    """Total strokes of one syllable, or None when any component has no table entry."""
    decomposition = decompose_syllable(syllable)
    if isinstance(decomposition, InvalidSyllable):
        return None
    counts = component_strokes(decomposition)
    if any(c is None for c in counts):
        return None
    return sum(counts)


def name_strokes(name: str) -> list[int | None]:
    """Raw per-syllable stroke totals. Not reduced modulo 10."""
    return [syllable_stroke_total(ch) for ch in name]


# ── Display breakdown ────────────────────────────────────────────────

@dataclass(frozen=True)
class SyllableBreakdown:
    syllable: str
    initial_index: int
    vowel_index: int
    final_index: int
    initial_strokes: int | None
    vowel_strokes: int | None
    final_strokes: int | None
    total_strokes: int | None

    def to_dict(self) -> dict[str, str | int | None]:
        return {
            "syllable": self.syllable,
            "initial_index": self.initial_index,
            "vowel_index": self.vowel_index,
            "final_index": self.final_index,
            "initial_strokes": self.initial_strokes,
            "vowel_strokes": self.vowel_strokes,
            "final_strokes": self.final_strokes,
            "total_strokes": self.total_strokes,
        }


def decompose_for_display(name: str) -> list[SyllableBreakdown]:
    """Per-syllable decomposition table, built from the same lookups as the score."""
    rows: list[SyllableBreakdown] = []
    for ch in name:
        decomposition = decompose_syllable(ch)
        initial, vowel, final = decomposition.indices
        initial_strokes, vowel_strokes, final_strokes = component_strokes(decomposition)
        rows.append(
            SyllableBreakdown(
                syllable=ch,
                initial_index=initial,
                vowel_index=vowel,
                final_index=final,
                initial_strokes=initial_strokes,
                vowel_strokes=vowel_strokes,
                final_strokes=final_strokes,
                total_strokes=syllable_stroke_total(ch),
            )
        )
    return rows
