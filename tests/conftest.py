import os
import sys
import pytest
import httpx

# Ensure the project root (containing the `lobby` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from lobby import create_app, db
from lobby.client.api import LobbyApi
from lobby.client.scheduler import Scheduler
from lobby.client.view import LobbyView
from lobby.store import MemoryGameStore


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    BCRYPT_LOG_ROUNDS = 4
    CORS_ORIGINS = []


class FakeClock:
    """Monotonic clock that only moves when something sleeps."""

    def __init__(self):
        self.now = 0.0

    def time(self):
        return self.now

    def sleep(self, seconds):
        self.now += seconds


class RecordingView(LobbyView):
    def __init__(self):
        self.screens = []
        self.errors = []
        self.error_visible = False
        self.renders = []
        self.countdowns = []

    def show_screen(self, name):
        self.screens.append(name)

    def show_error(self, message):
        self.errors.append(message)
        self.error_visible = True

    def hide_error(self):
        self.error_visible = False

    def render_games(self, games, username):
        self.renders.append((games, username))

    def render_countdown(self, seconds):
        self.countdowns.append(seconds)


@pytest.fixture()
def store():
    return MemoryGameStore()


@pytest.fixture()
def flask_app(store):
    application = create_app(TestConfig, game_store=store)
    with application.app_context():
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def scheduler(clock):
    return Scheduler(timefunc=clock.time, delayfunc=clock.sleep)


@pytest.fixture()
def view():
    return RecordingView()


@pytest.fixture()
def api(flask_app):
    # Talks to the Flask app in-process through WSGI
    lobby_api = LobbyApi('http://testserver', transport=httpx.WSGITransport(app=flask_app))
    yield lobby_api
    lobby_api.close()


@pytest.fixture()
def register_user(client):
    def _register(username, password='password'):
        res = client.post('/player/register', json={'username': username, 'password': password})
        assert res.status_code == 201
        return res.get_json()['user']
    return _register
