from flask import Blueprint, jsonify, current_app

from lobby.api import json_body
from lobby.errors import LobbyError
from lobby.services.games import (
    create_game as svc_create_game,
    delete_game as svc_delete_game,
    get_game_store,
    list_games as svc_list_games,
)


games = Blueprint('games', __name__)


def _failure(message, status=500):
    return jsonify({'success': False, 'message': message}), status


@games.route('', methods=['GET'])
def list_games():
    current_app.logger.info("[game-list] fetching all games")
    try:
        all_games = svc_list_games(get_game_store())
    except Exception:
        current_app.logger.exception("[game-list] error fetching games")
        return _failure('Failed to retrieve games')

    current_app.logger.info(f"[game-list] total={len(all_games)}")
    for index, game in enumerate(all_games, start=1):
        current_app.logger.debug(f"[game-list] game {index}: {game.to_dict()}")
    return jsonify([game.to_dict() for game in all_games])


@games.route('', methods=['POST'])
def create_game():
    data = json_body()
    name = data.get('name')
    creator = data.get('creator')
    current_app.logger.info(f"[game-create] name={name!r} creator={creator!r}")

    try:
        game = svc_create_game(get_game_store(), name, creator)
    except LobbyError as exc:
        current_app.logger.info(f"[game-create] rejected: {exc.message}")
        raise
    except Exception:
        current_app.logger.exception("[game-create] error creating game")
        return _failure('Failed to create game')

    current_app.logger.info(f"[game-create] created {game.to_dict()}")
    return jsonify({'success': True, 'game': game.to_dict()})


@games.route('/<string:game_id>', methods=['DELETE'])
def delete_game(game_id):
    data = json_body()
    username = data.get('username')
    current_app.logger.info(f"[game-delete] id={game_id} username={username!r}")

    try:
        deleted = svc_delete_game(get_game_store(), game_id, username)
    except LobbyError as exc:
        current_app.logger.info(f"[game-delete] rejected id={game_id}: {exc.message}")
        raise
    except Exception:
        current_app.logger.exception(f"[game-delete] error deleting game {game_id}")
        return _failure('Failed to delete game')

    current_app.logger.info(f"[game-delete] deleted {deleted.to_dict()}")
    return jsonify({'success': True})
