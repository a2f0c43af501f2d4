"""
Console pass-and-play driver for Mr. White.
"""

import argparse
import logging
import os
import random
from dataclasses import replace
from typing import Callable, List, Optional

from dotenv import load_dotenv

from .core import (
    GamePhase, Guess, InvalidConfiguration, Judge, MatchError, MatchState,
    clamp_role_counts, create_match,
)
from .core.randomness import secure_random
from .core.role_assigner import WordPair, normalize_player_names
from .config import GameConfig, default_config, load_config, validate_config
from .events import EventEmitter
from .storage import PreferenceStore, InMemoryPreferenceStore, JsonPreferenceStore
from .words import WordSource, pick_pair

logger = logging.getLogger(__name__)

QUIT_COMMANDS = ("quit", "exit")
SCREEN_CLEAR_LINES = 40


class _CancelRequested(Exception):
    """A player typed quit at a prompt."""


class MrWhiteGame:
    """Main match controller."""

    def __init__(self, config: Optional[GameConfig] = None,
                 preferences: Optional[PreferenceStore] = None,
                 word_source: Optional[WordSource] = None,
                 input_func: Callable[[str], str] = input,
                 output_func: Callable[[str], None] = print,
                 rng: random.Random = secure_random):
        self.config = config or default_config
        self.preferences = preferences or InMemoryPreferenceStore()
        self.word_source = word_source or WordSource(timeout=self.config.fetch_timeout)
        self.input = input_func
        self.output = output_func
        self.rng = rng

        self.event_emitter = EventEmitter()
        self.match_state: Optional[MatchState] = None
        self.judge: Optional[Judge] = None

    def setup(self, player_names: Optional[List[str]] = None) -> Optional[MatchState]:
        """
        Create a match from the given names, the names saved last time, or
        names typed in at the console when there are neither.

        Returns:
            The new match, or None if the table quit while entering names.

        Raises:
            InvalidConfiguration: bad given or saved names, or bad role counts.
        """
        names = player_names if player_names is not None else self.preferences.get_player_names()
        locator = self.config.word_locator or self.preferences.get_word_locator()

        pairs = self.word_source.load_or_default(locator)
        word_pair = pick_pair(pairs, self.rng)

        if names:
            match_state = self._create_match(names, word_pair)
        else:
            match_state = self._enter_players(word_pair)
            if match_state is None:
                return None

        self.match_state = match_state
        self.judge = Judge(self.match_state, self.config, event_emitter=self.event_emitter)

        # Remember the table only once it produced a valid match
        self.preferences.set_player_names([p.name for p in self.match_state.roster])
        if locator:
            self.preferences.set_word_locator(locator)
        return self.match_state

    def _create_match(self, names: List[str], word_pair: WordPair) -> MatchState:
        total = len(normalize_player_names(names))
        requested = (self.config.undercover_count, self.config.mr_white_count)
        undercovers, mr_whites = clamp_role_counts(total, *requested)
        if (undercovers, mr_whites) != requested:
            logger.warning(
                "Too many impostors for %d players: using %d undercover(s) and %d Mr. White(s) "
                "(0 = random) instead of %d and %d",
                total, undercovers, mr_whites, *requested,
            )

        return create_match(
            names,
            word_pair,
            self.preferences,
            undercover_count=undercovers,
            mr_white_count=mr_whites,
            speaking_order_policy=self.config.speaking_order_policy,
            rng=self.rng,
            event_emitter=self.event_emitter,
            min_players=self.config.min_players,
        )

    def _enter_players(self, word_pair: WordPair) -> Optional[MatchState]:
        """Ask for names one per line until the table forms a valid match."""
        self.output(f"Enter at least {self.config.min_players} player names. "
                    "Leave a name blank when everyone is in.")
        try:
            while True:
                names = []
                while True:
                    name = self._ask(f"Player {len(names) + 1} name: ")
                    if not name:
                        break
                    names.append(name)
                try:
                    return self._create_match(names, word_pair)
                except InvalidConfiguration as e:
                    self.output(f"{e}. Please enter the players again.")
        except _CancelRequested:
            self.output("\nGame cancelled.")
            return None

    def run_game(self) -> str:
        """
        Play the match until someone wins or it is cancelled.
        Returns the outcome text.
        """
        if self.match_state is None and self.setup() is None:
            return "Cancelled"

        self.output("=" * 60)
        self.output("MR. WHITE - Starting")
        self.output("=" * 60)
        self.output(f"Players: {', '.join(p.name for p in self.match_state.roster)}")
        self.output("Type 'quit' at any prompt to cancel the game.")

        try:
            self._run_reveal()
            self._run_announcement()
            while not self.match_state.is_over:
                if self.match_state.phase.kind == GamePhase.VOTE:
                    self._run_vote()
                elif self.match_state.phase.kind == GamePhase.GUESS:
                    self._run_guess(self.match_state.phase)
        except _CancelRequested:
            self.judge.cancel()
            self.output("\nGame cancelled.")
            return "Cancelled"

        outcome = self.match_state.outcome
        self.output("\n" + "=" * 60)
        self.output(f"GAME OVER - {outcome.value}!")
        self.output("=" * 60)
        self._print_game_summary()
        return outcome.value

    def _ask(self, prompt: str) -> str:
        answer = self.input(prompt).strip()
        if answer.lower() in QUIT_COMMANDS:
            raise _CancelRequested()
        return answer

    def _hide_screen(self) -> None:
        self.output("\n" * SCREEN_CLEAR_LINES)

    def _run_reveal(self) -> None:
        self.judge.start_reveal()
        while self.match_state.phase.kind == GamePhase.REVEAL:
            player = self.judge.current_revealer()
            self._ask(f"\nPass the device to {player.name}. Press Enter to see your word...")
            if player.is_mr_white:
                self.output("You are MR. WHITE")
            self.output(f"Your word: {player.display_word}")
            self._ask("Memorize it, then press Enter to hide it...")
            self._hide_screen()
            self.judge.next_reveal()

    def _run_announcement(self) -> None:
        self.output("All players have seen their words!")
        self.output(f"{self.match_state.phase.starter.name} starts the discussion.")
        self._ask("Press Enter to start voting...")
        self.judge.start_vote()

    def _run_vote(self) -> None:
        alive = self.match_state.get_alive_speaking_order()
        self.output(f"\n--- VOTE (Round {self.match_state.round_number}) ---")
        self.output(f"Still in play: {', '.join(p.name for p in alive)}")

        while True:
            name = self._ask("Who has the most votes? ")
            try:
                result = self.judge.eliminate(name)
                break
            except MatchError as e:
                self.output(str(e))

        eliminated = result.eliminated
        self.output(f"ELIMINATED: {eliminated.name} was {eliminated.role.display_name}")
        self.judge.resolve_result()

    def _run_guess(self, phase: Guess) -> None:
        self.output(f"\nMR. WHITE'S LAST CHANCE, {phase.guesser.name}!")
        self.output("Guess the Civilian word to win! (Guessing the Undercover word helps them instead)")
        guess = ""
        while not guess:
            guess = self._ask("Your guess: ")
        self.judge.submit_guess(guess)

    def _print_game_summary(self) -> None:
        """Print every player's role and word."""
        self.output("\nAll Roles Revealed:")
        self.output("-" * 60)
        for player in self.match_state.roster:
            status = "out" if self.match_state.is_eliminated(player) else "in"
            line = f"  • {player.name}: {player.role.display_name} ({status})"
            if not player.is_mr_white:
                line += f" - Word: {player.word}"
            self.output(line)
        self.output(f"Rounds played: {self.match_state.round_number}")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Mr. White on one shared terminal")
    parser.add_argument("--config", type=str, default=None,
                        help="Path to YAML config file")
    parser.add_argument("--players", type=str, default=None,
                        help="Comma-separated player names (defaults to last game's players)")
    parser.add_argument("--words", type=str, default=None,
                        help="URL of a custom 'word,word' list")
    parser.add_argument("--undercovers", type=int, default=None,
                        help="Number of undercovers (0 = random)")
    parser.add_argument("--mr-whites", type=int, default=None,
                        help="Number of Mr. Whites (0 = random)")
    parser.add_argument("--min-players", type=int, default=None,
                        help="Smallest table allowed (at least 4)")
    parser.add_argument("--prefs", type=str, default=None,
                        help="Path to the preferences JSON file")
    parser.add_argument("--log-level", type=str, default=None,
                        help="Logging level (DEBUG shows secret words)")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> GameConfig:
    """Load the YAML config and apply command line and environment overrides."""
    config = replace(load_config(args.config))
    if args.words is not None:
        config.word_locator = args.words
    elif not config.word_locator:
        config.word_locator = os.getenv("MRWHITE_WORD_URL", "")
    if args.undercovers is not None:
        config.undercover_count = args.undercovers
    if args.mr_whites is not None:
        config.mr_white_count = args.mr_whites
    if args.min_players is not None:
        config.min_players = args.min_players
    if args.prefs is not None:
        config.preferences_path = args.prefs
    if args.log_level is not None:
        config.log_level = args.log_level
    return validate_config(config)


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    try:
        config = build_config(args)
    except MatchError as e:
        logging.basicConfig()
        logger.error("Invalid configuration: %s", e)
        return 2

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    preferences = JsonPreferenceStore(config.preferences_path)
    game = MrWhiteGame(config, preferences=preferences)

    names = [n for n in args.players.split(",") if n.strip()] if args.players else None
    try:
        if game.setup(names) is None:
            return 0
    except MatchError as e:
        logger.error("Cannot start game: %s", e)
        return 2

    game.run_game()
    return 0

