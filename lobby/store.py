"""Game storage.

The store owns the ordered list of games for the lifetime of the process.
Routes never touch it directly; they go through `lobby.services.games`.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from lobby.models import Game


class GameStore(ABC):

    @abstractmethod
    def list(self) -> List[Game]:
        """Return every game, oldest first."""

    @abstractmethod
    def append(self, game: Game) -> None:
        """Add a game to the end of the list. Ids are not checked."""

    @abstractmethod
    def remove_by_id(self, game_id: str) -> Optional[Game]:
        """Remove the first game with `game_id`; None when there is none."""

    def find(self, game_id: str) -> Optional[Game]:
        for game in self.list():
            if game.id == game_id:
                return game
        return None


class MemoryGameStore(GameStore):
    """List-backed store. Everything is lost when the process exits."""

    def __init__(self, games=None):
        self._games: List[Game] = list(games or [])

    def list(self) -> List[Game]:
        return list(self._games)

    def append(self, game: Game) -> None:
        self._games.append(game)

    def remove_by_id(self, game_id: str) -> Optional[Game]:
        for index, game in enumerate(self._games):
            if game.id == game_id:
                return self._games.pop(index)
        return None

    def __len__(self):
        return len(self._games)
