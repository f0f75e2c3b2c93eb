import logging

from lobby.errors import TransportError

logger = logging.getLogger(__name__)


class GamePoller:
    """Keeps the rendered game list in step with the server.

    While active, the list is fetched on every `interval` tick and a
    countdown to the next tick is rendered once a second. `stop()` must be
    called on every exit from the lobby screen.
    """

    def __init__(self, api, view, scheduler, interval: int = 30):
        if interval < 1:
            raise ValueError('poll interval must be at least one second')
        self.api = api
        self.view = view
        self.scheduler = scheduler
        self.interval = int(interval)
        self.username = ''
        self.seconds_left = self.interval
        self.active = False
        self._generation = 0
        self._poll_timer = None
        self._countdown_timer = None

    def start(self, username: str) -> None:
        self.stop()
        self.username = username
        self.active = True
        self._generation += 1
        self.refresh()
        self._poll_timer = self.scheduler.call_every(self.interval, self._scheduled_refresh)
        self.seconds_left = self.interval
        self._tick()
        self._countdown_timer = self.scheduler.call_every(1, self._tick)

    def stop(self) -> None:
        self.active = False
        self._generation += 1
        if self._poll_timer is not None:
            self.scheduler.cancel(self._poll_timer)
            self._poll_timer = None
        if self._countdown_timer is not None:
            self.scheduler.cancel(self._countdown_timer)
            self._countdown_timer = None

    def refresh(self) -> bool:
        """Fetch and render the list now. Returns True if it was rendered."""
        if not self.active:
            return False
        generation = self._generation
        try:
            games = self.api.get_games()
        except TransportError as exc:
            logger.error("Failed to update games list: %s", exc)
            return False
        if not self.active or generation != self._generation:
            # the lobby was left while the request was in flight
            logger.debug("Dropping games list fetched for a closed lobby")
            return False
        self.view.render_games(games, self.username)
        return True

    def _scheduled_refresh(self) -> None:
        if self.refresh():
            self.seconds_left = self.interval

    def _tick(self) -> None:
        self.view.render_countdown(self.seconds_left)
        self.seconds_left -= 1
        if self.seconds_left < 0:
            self.seconds_left = self.interval
