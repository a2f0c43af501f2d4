"""
Tests for role counts and role/word assignment.
"""

import random
from collections import Counter

import pytest

from mrwhite.core import (
    InvalidConfiguration, Role, Team, assign_roles, clamp_role_counts, max_impostors,
    resolve_role_counts, role_count_limits,
)
from mrwhite.core.roles import random_undercover_range, random_mr_white_range


NAMES = ["Ana", "Ben", "Cleo", "Dev", "Emil", "Fay", "Gus", "Hana", "Ivo", "Jo"]


@pytest.mark.parametrize("total,undercovers,mr_whites", [
    (4, 1, 1),
    (6, 2, 1),
    (7, 3, 2),
    (10, 3, 1),
    (10, 4, 2),
])
def test_role_counts_invariant(total, undercovers, mr_whites):
    """Explicit counts are honored exactly."""
    roster = assign_roles(NAMES[:total], ("Coffee", "Tea"), undercovers, mr_whites)
    counts = Counter(p.role for p in roster)

    assert counts[Role.UNDERCOVER] == undercovers
    assert counts[Role.MR_WHITE] == mr_whites
    assert counts[Role.CIVILIAN] == total - undercovers - mr_whites
    assert counts[Role.CIVILIAN] >= 2


def test_every_name_appears_once():
    roster = assign_roles(NAMES[:8], ("Lion", "Tiger"), 2, 1)
    assert [p.name for p in roster] == NAMES[:8]


def test_word_consistency():
    """Civilians share one word, undercovers share the other, Mr. White has none."""
    roster = assign_roles(NAMES, ("Coffee", "Tea"), 3, 2)
    civilian_words = {p.word for p in roster if p.role is Role.CIVILIAN}
    undercover_words = {p.word for p in roster if p.role is Role.UNDERCOVER}
    mr_white_words = {p.word for p in roster if p.role is Role.MR_WHITE}

    assert len(civilian_words) == 1
    assert len(undercover_words) == 1
    assert civilian_words != undercover_words
    assert civilian_words | undercover_words == {"Coffee", "Tea"}
    assert mr_white_words == {""}


def test_mr_white_masked_word_matches_civilian_length():
    roster = assign_roles(NAMES[:6], ("Pancake", "Waffle"), 1, 1)
    civilian_word = next(p.word for p in roster if p.role is Role.CIVILIAN)
    mr_white = next(p for p in roster if p.role is Role.MR_WHITE)

    assert mr_white.word == ""
    assert mr_white.masked_word == "?" * len(civilian_word)
    assert mr_white.display_word == mr_white.masked_word


def test_orientation_is_random():
    """Over many matches, both words end up as the civilian word."""
    civilian_words = set()
    for _ in range(200):
        roster = assign_roles(NAMES[:5], ("Coffee", "Tea"), 1, 1)
        civilian_words.add(next(p.word for p in roster if p.role is Role.CIVILIAN))
        if len(civilian_words) == 2:
            break
    assert civilian_words == {"Coffee", "Tea"}


def test_roles_move_between_seats():
    """Mr. White is not tied to a position."""
    seats = set()
    for _ in range(200):
        roster = assign_roles(NAMES[:4], ("Coffee", "Tea"), 1, 1)
        seats.add(next(i for i, p in enumerate(roster) if p.role is Role.MR_WHITE))
    assert seats == {0, 1, 2, 3}


@pytest.mark.parametrize("total", range(4, 21))
def test_random_counts_stay_within_bounds(total):
    rng = random.Random(total)
    low, high = random_undercover_range(total)
    for _ in range(50):
        counts = resolve_role_counts(total, 0, 0, rng=rng)
        assert low <= counts.undercover_count <= high
        mw_low, mw_high = random_mr_white_range(counts.undercover_count)
        assert mw_low <= counts.mr_white_count <= mw_high
        assert counts.civilian_count >= 2


def test_random_undercover_range_values():
    assert random_undercover_range(4) == (1, 1)
    assert random_undercover_range(10) == (1, 4)
    assert random_undercover_range(20) == (2, 9)


def test_random_mr_white_range_values():
    assert random_mr_white_range(1) == (1, 1)
    assert random_mr_white_range(6) == (1, 2)


def test_explicit_undercovers_with_random_mr_white():
    counts = resolve_role_counts(12, 6, 0, rng=random.Random(3))
    assert counts.undercover_count == 6
    assert 1 <= counts.mr_white_count <= 2


def test_max_impostors():
    assert max_impostors(4) == 1
    assert max_impostors(5) == 1
    assert max_impostors(7) == 2
    assert max_impostors(9) == 3
    assert max_impostors(10) == 4


def test_role_count_limits_assume_one_of_a_random_role():
    assert role_count_limits(6) == (2, 2)
    assert role_count_limits(6, mr_white_count=2) == (1, 2)
    assert role_count_limits(9, undercover_count=3) == (3, 1)


def test_clamp_role_counts():
    assert clamp_role_counts(8, 2, 1) == (2, 1)
    assert clamp_role_counts(6, 5, 3) == (0, 2)
    assert clamp_role_counts(10, 9, 0) == (4, 0)
    assert clamp_role_counts(4, 0, 0) == (0, 0)


def test_min_players_can_be_raised():
    with pytest.raises(InvalidConfiguration, match="at least 5"):
        assign_roles(NAMES[:4], ("Coffee", "Tea"), min_players=5)
    assert len(assign_roles(NAMES[:5], ("Coffee", "Tea"), min_players=5)) == 5


def test_min_players_never_below_four():
    with pytest.raises(InvalidConfiguration, match="at least 4"):
        resolve_role_counts(3, min_players=2)


def test_role_teams():
    assert Role.CIVILIAN.team is Team.CIVILIANS
    assert not Role.CIVILIAN.is_impostor
    assert Role.UNDERCOVER.is_impostor and Role.UNDERCOVER.has_word
    assert Role.MR_WHITE.is_impostor and not Role.MR_WHITE.has_word


def test_too_few_players():
    with pytest.raises(InvalidConfiguration):
        assign_roles(NAMES[:3], ("Coffee", "Tea"))


def test_duplicate_names_case_insensitive():
    with pytest.raises(InvalidConfiguration, match="Duplicate"):
        assign_roles(["Ana", "Ben", "ana", "Cleo"], ("Coffee", "Tea"))


def test_empty_name_rejected():
    with pytest.raises(InvalidConfiguration):
        assign_roles(["Ana", "Ben", "  ", "Cleo"], ("Coffee", "Tea"))


def test_too_many_impostors():
    with pytest.raises(InvalidConfiguration, match="civilian"):
        assign_roles(NAMES[:5], ("Coffee", "Tea"), 2, 2)


def test_negative_counts_rejected():
    with pytest.raises(InvalidConfiguration):
        resolve_role_counts(6, -1, 1)


def test_names_are_stripped():
    roster = assign_roles([" Ana ", "Ben", "Cleo", "Dev"], ("Coffee", "Tea"), 1, 1)
    assert roster[0].name == "Ana"
