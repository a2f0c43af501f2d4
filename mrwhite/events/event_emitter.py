"""
Event emitter keeping an in-memory audit log of a match.
"""

import logging
from datetime import datetime
from threading import Lock
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

Listener = Callable[[Dict[str, Any]], None]


class EventEmitter:
    """
    Records match events in order so a finished match can be replayed.

    Nothing is written to disk; the log goes away with the match.
    """

    def __init__(self):
        self.events: List[Dict[str, Any]] = []
        self._listeners: List[Listener] = []
        self._lock = Lock()

    def subscribe(self, listener: Listener) -> None:
        """Call ``listener`` with every event recorded from now on."""
        self._listeners.append(listener)

    def _emit(self, event_type: str, data: Dict[str, Any]) -> None:
        with self._lock:
            event = {
                "timestamp": datetime.now().isoformat(),
                "event_type": event_type,
                "data": data,
                "sequence": len(self.events),
            }
            self.events.append(event)
        logger.debug("Event %s: %s", event_type, data)
        for listener in self._listeners:
            listener(event)

    def events_of_type(self, event_type: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e["event_type"] == event_type]

    def emit_match_start(self, players: List[Dict[str, str]], speaking_order: List[str],
                         undercover_count: int, mr_white_count: int) -> None:
        """Emit match start event with the full (secret) roster."""
        self._emit("match_start", {
            "players": players,
            "speaking_order": speaking_order,
            "undercover_count": undercover_count,
            "mr_white_count": mr_white_count,
        })

    def emit_phase_change(self, phase: str, round_number: int) -> None:
        self._emit("phase_change", {
            "phase": phase,
            "round_number": round_number,
        })

    def emit_announcement(self, message: str, phase: str, round_number: int) -> None:
        """Emit judge announcement event."""
        self._emit("announcement", {
            "message": message,
            "phase": phase,
            "round_number": round_number,
        })

    def emit_elimination(self, player_name: str, role: str, round_number: int) -> None:
        self._emit("elimination", {
            "player_name": player_name,
            "role": role,
            "round_number": round_number,
        })

    def emit_guess(self, player_name: str, guess: str, result: str) -> None:
        """Emit Mr. White guess event."""
        self._emit("guess", {
            "player_name": player_name,
            "guess": guess,
            "result": result,
        })

    def emit_game_over(self, outcome: Optional[str], reason: str, round_number: int) -> None:
        self._emit("game_over", {
            "outcome": outcome,
            "reason": reason,
            "round_number": round_number,
        })
