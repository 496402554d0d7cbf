"""
In-memory registry of running games
"""

import logging
import threading
import uuid
from collections import OrderedDict
from typing import Optional

from ..engine import GameState

logger = logging.getLogger(__name__)


class GameSession:
    """A game plus the lock that serialises calls into it"""

    def __init__(self, game_id: str, state: GameState):
        self.game_id = game_id
        self.state = state
        self.lock = threading.Lock()


class SessionManager:
    """
    Holds every live game. Games never share state; each one is only touched
    while its own lock is held.
    """

    def __init__(self, max_games: int = 1000):
        if max_games < 1:
            raise ValueError(f"max_games must be at least 1, got {max_games}")
        self.max_games = max_games
        self._sessions: "OrderedDict[str, GameSession]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self):
        return len(self._sessions)

    def create(self, state: GameState) -> GameSession:
        session = GameSession(uuid.uuid4().hex, state)
        with self._lock:
            while len(self._sessions) >= self.max_games:
                self._evict_one()
            self._sessions[session.game_id] = session
        logger.info("Created game %s", session.game_id)
        return session

    def _evict_one(self):
        """Drop the oldest finished game, or the oldest game if none has finished"""
        victim = next(
            (game_id for game_id, s in self._sessions.items() if s.state.game_over),
            None,
        )
        if victim is None:
            victim = next(iter(self._sessions))
        del self._sessions[victim]
        logger.info("Evicted game %s", victim)

    def get(self, game_id: str) -> Optional[GameSession]:
        return self._sessions.get(game_id)

    def delete(self, game_id: str) -> bool:
        with self._lock:
            if game_id in self._sessions:
                del self._sessions[game_id]
                logger.info("Deleted game %s", game_id)
                return True
        return False
