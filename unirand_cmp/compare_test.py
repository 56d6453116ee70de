"""Pytest integration for reference parity checks."""

import pytest

from .compare import PARITY_SCENARIOS, compare_words, key_to_int, run_parity


@pytest.mark.parametrize(
    "scenario", PARITY_SCENARIOS, ids=[s.name for s in PARITY_SCENARIOS]
)
def test_parity(scenario):
    """Our generator and the reference produce identical state and words."""
    success, diffs, _ = run_parity(scenario, verbose=True)

    if not success:
        error_msg = f"Outputs differ from {scenario.reference()}:\n"
        for diff in diffs:
            error_msg += f"  - {diff}\n"
        pytest.fail(error_msg)


def test_key_to_int():
    assert key_to_int([0]) == 0
    assert key_to_int([5]) == 5
    assert key_to_int([1, 2]) == (2 << 32) | 1


def test_key_to_int_rejects_trailing_zero():
    with pytest.raises(ValueError):
        key_to_int([1, 0])
    with pytest.raises(ValueError):
        key_to_int([])


def test_compare_words_reports_mismatches():
    diffs = compare_words([1, 2, 3], [1, 5, 3], "draw")
    assert diffs == ["draw[1]: 2 vs 5"]
    assert compare_words([1], [1, 2], "state") == ["state: length 1 vs 2"]
    assert compare_words([1, 2], [1, 2], "state") == []
