"""Unit tests for the pure Python compatibility engine."""
import pytest

from gunghap.compat_engine import (
    CompatibilityResult,
    build_ladder,
    calculate_from_strokes,
    compute_compatibility,
    interleave,
    normalize_strokes,
    score_ladder,
    starts_with_second,
)


# ── interleave ───────────────────────────────────────────────────────

def test_interleave_first_leads():
    assert interleave([1, 2, 3], [4, 5]) == [1, 4, 2, 5, 3]


def test_interleave_second_leads():
    assert interleave([1, 2, 3], [4, 5], start_with_second=True) == [4, 1, 5, 2, 3]


def test_interleave_length_is_sum():
    assert len(interleave([1], [2, 3, 4, 5])) == 5
    assert interleave([1], [2, 3, 4, 5]) == [1, 2, 3, 4, 5]


def test_interleave_empty():
    assert interleave([], []) == []
    assert interleave([7, 8], []) == [7, 8]


def test_interleave_syllables():
    assert interleave(list("이영"), list("김철수"), True) == ["김", "이", "철", "영", "수"]


def test_longer_name_leads():
    assert starts_with_second("이영", "김철수") is True
    assert starts_with_second("김철수", "이영") is False
    assert starts_with_second("김철수", "이영희") is False


# ── normalize_strokes ────────────────────────────────────────────────

def test_normalize_takes_mod_10():
    assert normalize_strokes([17, 3, 10]) == (7, 3, 0)


def test_normalize_drops_invalid_entries():
    # The sequence shrinks rather than keeping a placeholder
    assert normalize_strokes([6, None, -1, "x", 4, True]) == (6, 4)


# ── build_ladder ─────────────────────────────────────────────────────

def test_ladder_example():
    assert build_ladder((1, 4, 2, 5, 3)) == (
        (1, 4, 2, 5, 3),
        (5, 6, 7, 8),
        (1, 3, 5),
        (4, 8),
    )


def test_ladder_rows_shrink_by_one():
    rows = build_ladder((9, 8, 7, 6, 5, 4, 3, 2, 1))
    for prev, nxt in zip(rows, rows[1:]):
        assert len(nxt) == len(prev) - 1
    assert len(rows[-1]) == 2


def test_ladder_four_digits_has_three_rows():
    assert [len(r) for r in build_ladder((5, 3, 4, 3))] == [4, 3, 2]


def test_ladder_two_digits_is_single_row():
    assert build_ladder((3, 3)) == ((3, 3),)


@pytest.mark.parametrize("digits", [(), (4,)])
def test_ladder_too_short_is_empty(digits):
    assert build_ladder(digits) == ()


# ── score_ladder ─────────────────────────────────────────────────────

def test_score_from_last_row():
    assert score_ladder(((1, 4, 2, 5, 3), (5, 6, 7, 8), (1, 3, 5), (4, 8))) == 48


def test_score_empty_ladder_is_zero():
    assert score_ladder(()) == 0


def test_score_missing_second_digit():
    assert score_ladder(((7,),)) == 70


def test_score_capped_at_100():
    assert score_ladder(((10, 5),)) == 100


def test_score_always_in_range():
    for a in range(10):
        for b in range(10):
            assert 0 <= score_ladder(((a, b),)) <= 100


# ── compute_compatibility ────────────────────────────────────────────

def test_compute_equal_lengths():
    # 김철수 = 6 8 4, 이영희 = 2 6 5
    # 6 2 8 6 4 5 → 8 0 4 0 9 → 8 4 4 9 → 2 8 3 → 0 1
    result = compute_compatibility("김철수", "이영희")
    assert result.strokes_1 == (6, 8, 4)
    assert result.strokes_2 == (2, 6, 5)
    assert result.interleaved == (6, 2, 8, 6, 4, 5)
    assert result.rows[-1] == (0, 1)
    assert len(result.rows) == 5
    assert result.score == 1
    assert result.start_with_second is False


def test_compute_second_name_longer():
    # 김 6 이 2 철 8 영 6 수 4 → 8 0 4 0 → 8 4 4 → 2 8
    result = compute_compatibility("이영", "김철수")
    assert result.start_with_second is True
    assert result.interleaved == (6, 2, 8, 6, 4)
    assert result.rows == ((6, 2, 8, 6, 4), (8, 0, 4, 0), (8, 4, 4), (2, 8))
    assert result.score == 28


def test_compute_two_by_two():
    # 민수 = 5 4, 지은 = 3 3 → 5 3 4 3 → 8 7 7 → 5 4
    result = compute_compatibility("민수", "지은")
    assert [len(r) for r in result.rows] == [4, 3, 2]
    assert result.score == 54


def test_compute_is_idempotent():
    assert compute_compatibility("김철수", "이영희") == compute_compatibility("김철수", "이영희")


def test_compute_order_matters():
    assert compute_compatibility("민수", "지은").interleaved == (5, 3, 4, 3)
    assert compute_compatibility("지은", "민수").interleaved == (3, 5, 3, 4)


def test_compute_drops_undecomposable_syllables():
    # 김a수 → 6 4; 6 2 4 6 5 → 8 6 0 1 → 4 6 1 → 0 7
    result = compute_compatibility("김a수", "이영희")
    assert result.strokes_1 == (6, 4)
    assert len(result.interleaved) == 5
    assert result.score == 7


def test_compute_drops_syllables_with_final_hieut():
    # 좋 has no stroke total, 아 = 3; 민수 = 5 4 → 3 5 4 → 8 9
    result = compute_compatibility("좋아", "민수")
    assert result.strokes_1 == (3,)
    assert result.interleaved == (3, 5, 4)
    assert result.rows == ((3, 5, 4), (8, 9))
    assert result.score == 89


def test_compute_empty_names():
    result = compute_compatibility("", "")
    assert result.interleaved == ()
    assert result.rows == ()
    assert result.score == 0


def test_compute_single_digit_sequence_scores_zero():
    result = compute_compatibility("가", "")
    assert result.interleaved == (3,)
    assert result.rows == ()
    assert result.score == 0


def test_calculate_from_strokes_reduces_mod_10():
    result = calculate_from_strokes([17, 12], [3, 25])
    assert result.interleaved == (7, 3, 2, 5)


def test_result_to_dict():
    d = compute_compatibility("민수", "지은").to_dict()
    assert d == {
        "strokes_1": [5, 4],
        "strokes_2": [3, 3],
        "interleaved": [5, 3, 4, 3],
        "rows": [[5, 3, 4, 3], [8, 7, 7], [5, 4]],
        "score": 54,
    }


def test_result_is_frozen():
    result = compute_compatibility("민수", "지은")
    assert isinstance(result, CompatibilityResult)
    with pytest.raises(AttributeError):
        result.score = 100
