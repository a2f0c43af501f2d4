"""
Tests for the Judge and the match phase machine.
"""

import pytest

from mrwhite.core import (
    AlreadyEliminated, Announce, Cancelled, GameOver, GamePhase, Guess, IllegalTransition,
    Judge, Outcome, Result, Reveal, Role, UnknownPlayer, Vote,
)
from mrwhite.config.game_config import GameConfig


C, U, W = Role.CIVILIAN, Role.UNDERCOVER, Role.MR_WHITE


def test_reveal_walks_speaking_order(judge, match_state):
    judge.start_reveal()
    seen = []
    while isinstance(judge.phase, Reveal):
        seen.append(judge.current_revealer().name)
        judge.next_reveal()

    assert seen == [p.name for p in match_state.speaking_order]
    assert judge.phase == Announce(starter=match_state.speaking_order[0])


def test_start_vote_after_announce(judge, advance_to_vote):
    advance_to_vote(judge)
    assert judge.phase == Vote(round_number=1)


def test_cannot_vote_before_reveal(judge, match_state):
    with pytest.raises(IllegalTransition):
        judge.eliminate(match_state.roster[0])


def test_cannot_guess_during_vote(judge, advance_to_vote):
    advance_to_vote(judge)
    with pytest.raises(IllegalTransition):
        judge.submit_guess("Coffee")


def test_eliminate_records_history(make_match, advance_to_vote):
    state = make_match([C, C, C, U, W])
    judge = Judge(state, GameConfig())
    advance_to_vote(judge)

    result = judge.eliminate("p4")

    assert isinstance(result, Result)
    assert result.eliminated.name == "P4"
    assert state.eliminated_names == ["P4"]
    assert state.last_eliminated.name == "P4"
    assert [p.name for p in state.get_alive_players()] == ["P1", "P2", "P3", "P5"]


def test_eliminate_unknown_player(make_match, advance_to_vote):
    judge = Judge(make_match([C, C, C, U, W]), GameConfig())
    advance_to_vote(judge)
    with pytest.raises(UnknownPlayer):
        judge.eliminate("Nobody")


def test_already_eliminated(make_match):
    state = make_match([C, C, C, U, W])
    state.eliminate_player(state.roster[0])
    with pytest.raises(AlreadyEliminated):
        state.eliminate_player(state.roster[0])
    assert state.eliminated_names == ["P1"]


def test_undercover_out_continues(make_match, advance_to_vote):
    state = make_match([C, C, C, C, U, W])
    judge = Judge(state, GameConfig())
    advance_to_vote(judge)

    judge.eliminate("P5")
    phase = judge.resolve_result()

    assert phase == Vote(round_number=2)
    assert state.round_number == 2


def test_impostors_win_by_parity(make_match, advance_to_vote):
    state = make_match([C, C, U, W])
    judge = Judge(state, GameConfig())
    advance_to_vote(judge)

    judge.eliminate("P1")
    judge.resolve_result()

    assert state.outcome == Outcome.IMPOSTORS_WIN
    assert state.is_over


def test_mr_white_wins_final_two(make_match, advance_to_vote):
    # P3 is the only undercover: two civilians and Mr. White remain
    state = make_match([C, C, U, W])
    judge = Judge(state, GameConfig())
    advance_to_vote(judge)
    judge.eliminate("P3")
    assert judge.resolve_result() == Vote(round_number=2)
    judge.eliminate("P1")
    assert judge.resolve_result() == GameOver(Outcome.MR_WHITE_WINS)


def test_mr_white_elimination_goes_to_guess(make_match, advance_to_vote):
    state = make_match([C, C, C, U, W])
    judge = Judge(state, GameConfig())
    advance_to_vote(judge)

    judge.eliminate("P5")
    phase = judge.resolve_result()

    assert isinstance(phase, Guess)
    assert phase.guesser.name == "P5"
    assert not state.is_over


@pytest.mark.parametrize("guess,outcome", [
    ("Café", Outcome.MR_WHITE_WINS),
    (" TEA ", Outcome.UNDERCOVERS_WIN),
    ("soda", Outcome.CIVILIANS_WIN),
])
def test_guess_outcomes_single_mr_white(make_match, advance_to_vote, guess, outcome):
    state = make_match([C, C, C, U, W])
    judge = Judge(state, GameConfig())
    advance_to_vote(judge)
    judge.eliminate("P5")
    judge.resolve_result()

    phase = judge.submit_guess(guess)

    assert phase == GameOver(outcome)
    assert state.outcome == outcome


def test_wrong_guess_with_other_mr_white_alive(make_match, advance_to_vote):
    state = make_match([C, C, C, C, U, W, W])
    judge = Judge(state, GameConfig())
    advance_to_vote(judge)
    judge.eliminate("P6")
    judge.resolve_result()

    phase = judge.submit_guess("soda")
    assert phase == Vote(round_number=2)

    # The second Mr. White gets their own guess
    judge.eliminate("P7")
    assert isinstance(judge.resolve_result(), Guess)
    assert judge.submit_guess("nope") == GameOver(Outcome.CIVILIANS_WIN)


def test_guess_allowed_only_once(make_match, advance_to_vote):
    state = make_match([C, C, C, U, W])
    judge = Judge(state, GameConfig())
    advance_to_vote(judge)
    judge.eliminate("P5")
    judge.resolve_result()
    judge.submit_guess("soda")

    with pytest.raises(IllegalTransition):
        judge.submit_guess("cafe")


def test_cancel(judge, advance_to_vote):
    advance_to_vote(judge)
    assert judge.cancel() == Cancelled()
    assert judge.match_state.is_over
    with pytest.raises(IllegalTransition):
        judge.cancel()


def test_announcements(judge, advance_to_vote):
    advance_to_vote(judge)
    assert any("starts the discussion" in a for a in judge.announcements)


def test_announcements_disabled(match_state, advance_to_vote):
    judge = Judge(match_state, GameConfig(use_judge_announcements=False))
    advance_to_vote(judge)
    assert judge.announcements == []


def test_events_recorded(judge, match_state, event_emitter, advance_to_vote):
    advance_to_vote(judge)
    target = match_state.speaking_order[-1]
    judge.eliminate(target)

    assert event_emitter.events_of_type("match_start")
    eliminations = event_emitter.events_of_type("elimination")
    assert [e["data"]["player_name"] for e in eliminations] == [target.name]
    phases = [e["data"]["phase"] for e in event_emitter.events_of_type("phase_change")]
    assert phases[:1] == [GamePhase.REVEAL.value]
    assert phases[-1] == GamePhase.RESULT.value


def test_subscriber_sees_later_events(judge, match_state, event_emitter, advance_to_vote):
    received = []
    event_emitter.subscribe(received.append)
    advance_to_vote(judge)
    judge.eliminate(match_state.speaking_order[0])

    assert "match_start" not in [e["event_type"] for e in received]
    assert received[-1] is event_emitter.events[-1]
    assert [e["event_type"] for e in received].count("elimination") == 1


def test_match_summary(make_match):
    state = make_match([C, C, C, U, W])
    state.eliminate_player(state.roster[3])
    summary = state.get_match_summary()
    assert summary["alive_players"] == 4
    assert summary["alive_undercovers"] == 0
    assert summary["eliminated"] == ["P4"]
    assert summary["outcome"] is None
