from typing import List

from flask import current_app

from lobby.errors import AuthorizationError, NotFoundError, ValidationError
from lobby.models import Game, generate_game_id
from lobby.store import GameStore


def get_game_store() -> GameStore:
    return current_app.extensions['game_store']


def _clean(value):
    if not isinstance(value, str):
        return ''
    return value.strip()


def list_games(store: GameStore) -> List[Game]:
    return store.list()


def create_game(store: GameStore, name, creator) -> Game:
    """Build a game owned by `creator` and append it to the store.

    The creator is the only initial player.
    """
    name, creator = _clean(name), _clean(creator)
    if not name or not creator:
        raise ValidationError('Game name and creator are required')
    game = Game(id=generate_game_id(store), name=name, creator=creator)
    store.append(game)
    return game


def delete_game(store: GameStore, game_id: str, username) -> Game:
    """Remove a game on behalf of `username`, who must be its creator."""
    game = store.find(game_id)
    if game is None:
        raise NotFoundError('Game not found')
    if game.creator != _clean(username):
        raise AuthorizationError('Only the creator can delete the game')
    store.remove_by_id(game_id)
    return game
