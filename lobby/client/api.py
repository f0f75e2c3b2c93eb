import logging
from typing import Any, Dict, List, Optional

import httpx

from lobby.errors import TransportError

logger = logging.getLogger(__name__)


class LobbyApi:
    """Thin JSON client for the lobby REST surface.

    Every failure, whether the connection broke or the server answered
    with an error status, is raised as `TransportError`.
    """

    def __init__(self, base_url: str, timeout: float = 5.0, transport: Optional[httpx.BaseTransport] = None):
        self._http = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    def _send(self, method: str, path: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        try:
            response = self._http.request(method, path, json=payload)
        except httpx.HTTPError as exc:
            logger.error("Request failed: %s %s: %s", method, path, exc)
            raise TransportError(f"Request failed: {exc}") from exc

        try:
            body = response.json()
        except ValueError:
            body = None

        if response.is_error:
            message = body.get('message') if isinstance(body, dict) else None
            logger.error("Request failed: %s %s -> %s", method, path, response.status_code)
            raise TransportError(
                message or f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
            )
        return body

    def get_games(self) -> List[Dict[str, Any]]:
        games = self._send('GET', '/game')
        if not isinstance(games, list):
            raise TransportError('Unexpected games payload')
        return games

    def create_game(self, name: str, creator: str) -> Dict[str, Any]:
        return self._send('POST', '/game', {'name': name, 'creator': creator})

    def delete_game(self, game_id: str, username: str) -> Dict[str, Any]:
        return self._send('DELETE', f'/game/{game_id}', {'username': username})

    def register(self, username: str, password: str) -> Dict[str, Any]:
        return self._send('POST', '/player/register', {'username': username, 'password': password})

    def login(self, username: str, password: str) -> Dict[str, Any]:
        return self._send('POST', '/player/login', {'username': username, 'password': password})

    def logout(self, username: str) -> Dict[str, Any]:
        return self._send('POST', '/player/logout', {'username': username})

    def close(self) -> None:
        self._http.close()
