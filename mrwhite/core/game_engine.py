"""
Match state and match creation.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, TYPE_CHECKING

from .exceptions import AlreadyEliminated, UnknownPlayer
from .phases import Phase, Setup, GameOver, Outcome, TERMINAL_PHASES
from .player import Player
from .randomness import secure_random
from .role_assigner import WordPair, assign_roles
from .roles import MIN_PLAYERS, Role
from .speaking_order import SpeakingOrderSelector, POLICY_FIRST_ONLY
from .win_evaluator import AliveCounts
from ..storage.preferences import PreferenceStore

if TYPE_CHECKING:
    from ..events.event_emitter import EventEmitter

logger = logging.getLogger(__name__)


@dataclass
class MatchState:
    """Everything about a running match."""
    roster: List[Player]
    speaking_order: List[Player]
    civilian_word: str
    undercover_word: str
    phase: Phase = field(default_factory=Setup)
    round_number: int = 1

    # Elimination history, in elimination order
    eliminated_names: List[str] = field(default_factory=list)
    last_eliminated: Optional[Player] = None

    action_log: List[Dict[str, Any]] = field(default_factory=list)
    event_emitter: Optional['EventEmitter'] = None

    def get_player(self, name: str) -> Optional[Player]:
        """Get roster player by name (case-insensitive)."""
        for player in self.roster:
            if player.matches_name(name):
                return player
        return None

    def is_eliminated(self, player: Player) -> bool:
        return player.name in self.eliminated_names

    def get_alive_players(self) -> List[Player]:
        """Players still in play, in roster order."""
        return [p for p in self.roster if not self.is_eliminated(p)]

    def get_alive_speaking_order(self) -> List[Player]:
        """Players still in play, in speaking order."""
        return [p for p in self.speaking_order if not self.is_eliminated(p)]

    def get_eliminated_players(self) -> List[Player]:
        """Eliminated players in the order they went out."""
        return [self.get_player(name) for name in self.eliminated_names]

    def alive_counts(self) -> AliveCounts:
        return AliveCounts.from_players(self.get_alive_players())

    @property
    def is_over(self) -> bool:
        return self.phase.kind in TERMINAL_PHASES

    @property
    def outcome(self) -> Optional[Outcome]:
        if isinstance(self.phase, GameOver):
            return self.phase.outcome
        return None

    @property
    def first_speaker(self) -> Player:
        return self.speaking_order[0]

    def eliminate_player(self, chosen: Player) -> 'MatchState':
        """
        Record the player voted out this round.

        Pure bookkeeping: the winner is decided elsewhere.

        Raises:
            UnknownPlayer: the player is not in this match.
            AlreadyEliminated: the player is already out of play.
        """
        if chosen not in self.roster:
            raise UnknownPlayer(chosen.name)
        if self.is_eliminated(chosen):
            raise AlreadyEliminated(chosen.name)

        self.eliminated_names.append(chosen.name)
        self.last_eliminated = chosen
        self._log_action("player_eliminated", {
            "player": chosen.name,
            "role": chosen.role.value,
        })
        if self.event_emitter:
            self.event_emitter.emit_elimination(chosen.name, chosen.role.value, self.round_number)
        return self

    def set_phase(self, phase: Phase) -> None:
        """Move to a new phase."""
        self.phase = phase
        self._log_action("phase_change", {"phase": phase.kind.value})
        if self.event_emitter:
            self.event_emitter.emit_phase_change(phase.kind.value, self.round_number)

    def _log_action(self, action_type: str, data: Dict[str, Any]) -> None:
        """Log a match action."""
        self.action_log.append({
            "type": action_type,
            "phase": self.phase.kind.value,
            "round": self.round_number,
            "data": data,
        })

    def get_match_summary(self) -> Dict[str, Any]:
        """Get a summary of the current match state."""
        counts = self.alive_counts()
        return {
            "phase": self.phase.kind.value,
            "round": self.round_number,
            "alive_players": counts.total,
            "alive_civilians": counts.civilians,
            "alive_undercovers": counts.undercovers,
            "alive_mr_whites": counts.mr_whites,
            "eliminated": list(self.eliminated_names),
            "outcome": self.outcome.value if self.outcome else None,
        }


def create_match(
    player_names: Sequence[str],
    word_pair: WordPair,
    preferences: PreferenceStore,
    undercover_count: int = 0,
    mr_white_count: int = 0,
    speaking_order_policy: str = POLICY_FIRST_ONLY,
    rng: random.Random = secure_random,
    event_emitter: Optional['EventEmitter'] = None,
    min_players: int = MIN_PLAYERS,
) -> MatchState:
    """
    Deal roles and words, pick the speaking order and return a new match.

    Callers must not create two matches at once against the same
    preference store, since the last starter is read and rewritten here.

    Raises:
        InvalidConfiguration: bad names, player count or role counts.
    """
    roster = assign_roles(
        player_names, word_pair, undercover_count, mr_white_count,
        rng=rng, min_players=min_players,
    )
    civilian_word = next(p.word for p in roster if p.role is Role.CIVILIAN)
    undercover_word = word_pair[1] if civilian_word == word_pair[0] else word_pair[0]
    counts = AliveCounts.from_players(roster)

    selector = SpeakingOrderSelector(preferences, policy=speaking_order_policy, rng=rng)
    speaking_order = selector.order(roster)

    state = MatchState(
        roster=roster,
        speaking_order=speaking_order,
        civilian_word=civilian_word,
        undercover_word=undercover_word,
        event_emitter=event_emitter,
    )
    state._log_action("match_start", {
        "players": len(roster),
        "undercovers": counts.undercovers,
        "mr_whites": counts.mr_whites,
    })
    logger.info(
        "New match: %d players, %d undercover(s), %d Mr. White(s), %s starts",
        len(roster), counts.undercovers, counts.mr_whites, speaking_order[0].name,
    )
    logger.debug("Words: civilian=%r undercover=%r", civilian_word, undercover_word)

    if event_emitter:
        event_emitter.emit_match_start(
            [{"name": p.name, "role": p.role.value, "word": p.word} for p in roster],
            [p.name for p in speaking_order],
            counts.undercovers,
            counts.mr_whites,
        )
    return state
