"""
Judge/Moderator that walks a match through its phases.
"""

import logging
from typing import List, Optional, Union, TYPE_CHECKING

from .exceptions import IllegalTransition, UnknownPlayer
from .game_engine import MatchState
from .guess import GuessResult, resolve_guess
from .phases import (
    GamePhase, Reveal, Announce, Vote, Result, Guess, GameOver, Cancelled, Outcome,
)
from .player import Player
from .win_evaluator import evaluate_elimination, evaluate_wrong_guess
from ..config.game_config import GameConfig, default_config

if TYPE_CHECKING:
    from ..events.event_emitter import EventEmitter

logger = logging.getLogger(__name__)

GUESS_OUTCOMES = {
    GuessResult.CIVILIAN_WORD: Outcome.MR_WHITE_WINS,
    GuessResult.UNDERCOVER_WORD: Outcome.UNDERCOVERS_WIN,
}


class Judge:
    """Judge/Moderator that enforces the phase order and decides outcomes."""

    def __init__(self, match_state: MatchState, config: GameConfig = default_config,
                 event_emitter: Optional['EventEmitter'] = None):
        self.match_state = match_state
        self.config = config
        self.event_emitter = event_emitter or match_state.event_emitter
        self.announcements: List[str] = []

    @property
    def phase(self):
        return self.match_state.phase

    def announce(self, message: str) -> None:
        """Make a judge announcement."""
        if not self.config.use_judge_announcements:
            return
        self.announcements.append(message)
        logger.info("[JUDGE] %s", message)
        if self.event_emitter:
            self.event_emitter.emit_announcement(
                message,
                self.phase.kind.value,
                self.match_state.round_number,
            )

    def _require(self, kind: GamePhase, action: str) -> None:
        if self.phase.kind != kind:
            raise IllegalTransition(self.phase.kind.value, action)

    def start_reveal(self) -> Reveal:
        """Hand the device to the first speaker to see their word."""
        self._require(GamePhase.SETUP, "start the reveal")
        phase = Reveal(index=0)
        self.match_state.set_phase(phase)
        self.announce(f"Pass the device to {self.current_revealer().name}.")
        return phase

    def current_revealer(self) -> Player:
        """Player whose turn it is to view their word."""
        self._require(GamePhase.REVEAL, "look up the current revealer")
        return self.match_state.get_alive_speaking_order()[self.phase.index]

    def next_reveal(self) -> Union[Reveal, Announce]:
        """Move on to the next player, or announce the first speaker after the last one."""
        self._require(GamePhase.REVEAL, "advance the reveal")
        next_index = self.phase.index + 1
        if next_index < len(self.match_state.get_alive_speaking_order()):
            phase = Reveal(index=next_index)
            self.match_state.set_phase(phase)
            self.announce(f"Pass the device to {self.current_revealer().name}.")
            return phase

        starter = self.match_state.first_speaker
        phase = Announce(starter=starter)
        self.match_state.set_phase(phase)
        self.announce(f"{starter.name} starts the discussion.")
        return phase

    def start_vote(self) -> Vote:
        """Open the first vote after the starter has been named."""
        self._require(GamePhase.ANNOUNCE, "start voting")
        phase = Vote(round_number=self.match_state.round_number)
        self.match_state.set_phase(phase)
        self.announce("Discuss, then pick the player with the most votes.")
        return phase

    def eliminate(self, target: Union[str, Player]) -> Result:
        """
        Vote a player out of play.

        Raises:
            IllegalTransition: not in the vote phase.
            UnknownPlayer: no such player in the match.
            AlreadyEliminated: the player is already out.
        """
        self._require(GamePhase.VOTE, "eliminate a player")
        if isinstance(target, str):
            player = self.match_state.get_player(target)
            if player is None:
                raise UnknownPlayer(target)
        else:
            player = target

        self.match_state.eliminate_player(player)
        phase = Result(eliminated=player)
        self.match_state.set_phase(phase)
        self.announce(f"{player.name} was eliminated. They were {player.role.display_name}.")
        return phase

    def resolve_result(self):
        """
        Decide what follows the elimination just revealed.

        Returns:
            The new phase: Guess, Vote or GameOver.
        """
        self._require(GamePhase.RESULT, "resolve the vote result")
        state = self.match_state
        eliminated = self.phase.eliminated

        phase = evaluate_elimination(state.alive_counts(), eliminated, next_round=state.round_number + 1)
        if isinstance(phase, Guess):
            state.set_phase(phase)
            self.announce(f"{eliminated.name}, this is your last chance: guess the civilian word.")
        elif isinstance(phase, GameOver):
            self._end_match(phase, reason="vote")
        else:
            self._next_round()
        return self.phase

    def submit_guess(self, guess_text: str):
        """
        Resolve the eliminated Mr. White's single guess.

        Returns:
            The new phase: GameOver or Vote.
        """
        self._require(GamePhase.GUESS, "submit a guess")
        state = self.match_state
        guesser = self.phase.guesser

        result = resolve_guess(guess_text, state.civilian_word, state.undercover_word)
        logger.debug("%s guessed %r: %s", guesser.name, guess_text, result.value)
        state._log_action("mr_white_guess", {"player": guesser.name, "result": result.value})
        if self.event_emitter:
            self.event_emitter.emit_guess(guesser.name, guess_text, result.value)

        if result in GUESS_OUTCOMES:
            self._end_match(GameOver(GUESS_OUTCOMES[result]), reason="guess")
            return self.phase

        self.announce(f"Wrong guess, {guesser.name}.")
        phase = evaluate_wrong_guess(state.alive_counts(), next_round=state.round_number + 1)
        if isinstance(phase, GameOver):
            self._end_match(phase, reason="guess")
        else:
            self._next_round()
        return self.phase

    def cancel(self) -> Cancelled:
        """Abandon the match."""
        if self.match_state.is_over:
            raise IllegalTransition(self.phase.kind.value, "cancel the match")
        phase = Cancelled()
        self.match_state.set_phase(phase)
        if self.event_emitter:
            self.event_emitter.emit_game_over(None, "cancelled", self.match_state.round_number)
        logger.info("Match cancelled in round %d", self.match_state.round_number)
        return phase

    def _next_round(self) -> None:
        self.match_state.round_number += 1
        self.match_state.set_phase(Vote(round_number=self.match_state.round_number))
        alive = [p.name for p in self.match_state.get_alive_speaking_order()]
        self.announce(f"Round {self.match_state.round_number}. Players still in: {', '.join(alive)}")

    def _end_match(self, phase: GameOver, reason: str) -> None:
        self.match_state.set_phase(phase)
        self.match_state._log_action("game_over", {
            "outcome": phase.outcome.value,
            "reason": reason,
        })
        if self.event_emitter:
            self.event_emitter.emit_game_over(phase.outcome.value, reason, self.match_state.round_number)
        self.announce(f"Game over: {phase.outcome.value}!")
