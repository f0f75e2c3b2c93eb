import logging
from typing import Optional

from lobby.client.polling import GamePoller
from lobby.errors import TransportError

logger = logging.getLogger(__name__)


class LobbySession:
    """Client-side login state and screen gating.

    The session owns the poller, so every screen transition that leaves the
    lobby also tears down its timers.
    """

    def __init__(self, api, view, scheduler, username_store=None,
                 poll_interval: int = 30, error_display_sec: float = 3):
        self.api = api
        self.view = view
        self.scheduler = scheduler
        self.username_store = username_store
        self.error_display_sec = error_display_sec
        self.poller = GamePoller(api, view, scheduler, interval=poll_interval)
        self.username = ''
        self.screen = None
        self.current_game_id: Optional[str] = None
        self._error_timer = None
        self.show_screen('login')

    # ── screens ────────────────────────────────────────────────
    def show_screen(self, name: str) -> None:
        if name != 'lobby':
            self.poller.stop()
        self.screen = name
        self.view.show_screen(name)

    def show_error(self, message: str) -> None:
        self.scheduler.cancel(self._error_timer)
        self.view.show_error(message)
        self._error_timer = self.scheduler.call_later(self.error_display_sec, self._hide_error)

    def _hide_error(self) -> None:
        self._error_timer = None
        self.view.hide_error()

    def _enter_lobby(self) -> None:
        self.show_screen('lobby')
        self.poller.start(self.username)

    # ── account ────────────────────────────────────────────────
    def restore(self) -> Optional[str]:
        """Last username that logged in on this machine, if any."""
        if self.username_store is None:
            return None
        return self.username_store.load()

    def register(self, username: str, password: str, confirm: str) -> bool:
        username = (username or '').strip()
        if not username or not password:
            self.show_error('Please enter both username and password')
            return False
        if password != confirm:
            self.show_error('Passwords do not match')
            return False
        try:
            response = self.api.register(username, password)
        except TransportError as exc:
            logger.error("Registration failed for %s: %s", username, exc)
            self.show_error(exc.message if exc.status_code else 'Registration failed. Please try again.')
            return False
        if not (response or {}).get('success'):
            return False
        self.show_screen('login')
        return True

    def login(self, username: str, password: str) -> bool:
        username = (username or '').strip()
        if not username or not password:
            self.show_error('Please enter both username and password')
            return False
        try:
            response = self.api.login(username, password)
        except TransportError as exc:
            logger.error("Login failed for %s: %s", username, exc)
            self.show_error(exc.message if exc.status_code else 'Login failed. Please try again.')
            return False
        if not (response or {}).get('success'):
            return False
        self.username = username
        if self.username_store is not None:
            self.username_store.save(username)
        self._enter_lobby()
        return True

    def logout(self) -> bool:
        if not self.username:
            return False
        try:
            response = self.api.logout(self.username)
        except TransportError as exc:
            logger.error("Logout failed for %s: %s", self.username, exc)
            self.show_error('Logout failed. Please try again.')
            return False
        if not (response or {}).get('success'):
            return False
        self.username = ''
        self.current_game_id = None
        self.show_screen('login')
        return True

    def close(self) -> None:
        """Tear down before the client exits: log out and drop every timer."""
        try:
            if self.username:
                self.api.logout(self.username)
        except TransportError as exc:
            logger.warning("Logout on close failed: %s", exc)
        finally:
            self.poller.stop()
            self.scheduler.cancel(self._error_timer)
            self._error_timer = None

    # ── games ──────────────────────────────────────────────────
    def create_game(self, name: str) -> bool:
        name = (name or '').strip()
        if not name:
            self.show_error('Please enter a game name')
            return False
        try:
            response = self.api.create_game(name, self.username)
        except TransportError as exc:
            logger.error("Create game failed: %s", exc)
            self.show_error('Failed to create game. Please try again.')
            return False
        if not (response or {}).get('success'):
            return False
        self.poller.refresh()
        return True

    def delete_game(self, game_id: str) -> bool:
        try:
            response = self.api.delete_game(game_id, self.username)
        except TransportError as exc:
            logger.error("Delete game %s failed: %s", game_id, exc)
            self.show_error(exc.message if exc.status_code else 'Failed to delete game. Please try again.')
            return False
        if not (response or {}).get('success'):
            self.show_error((response or {}).get('message') or 'Failed to delete game')
            return False
        self.poller.refresh()
        return True

    def enter_game(self, game_id: str) -> None:
        self.current_game_id = game_id
        self.show_screen('game')

    def back_to_lobby(self) -> None:
        self.current_game_id = None
        if self.username:
            self._enter_lobby()
        else:
            self.show_screen('login')
