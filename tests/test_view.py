import pytest
from click.testing import CliRunner

from lobby.client.cli import main
from lobby.client.storage import UsernameStore
from lobby.client.view import ConsoleView, format_countdown


class Collector:
    def __init__(self):
        self.lines = []

    def __call__(self, message, err=False):
        self.lines.append(message)


def test_countdown_text():
    assert format_countdown(30) == 'Next refresh in 30 seconds'
    assert format_countdown(1) == 'Next refresh in 1 second'
    assert format_countdown(0) == 'Next refresh in 0 seconds'


def test_console_renders_games():
    out = Collector()
    view = ConsoleView(echo=out)
    view.render_games([
        {'id': '1', 'name': 'Chess', 'creator': 'alice', 'players': ['alice']},
        {'id': '2', 'name': 'Go', 'creator': 'bob', 'players': ['bob']},
    ], 'alice')
    assert out.lines == [
        '1  Chess (Created by: alice, Players: 1)  [delete]',
        '2  Go (Created by: bob, Players: 1)',
    ]


def test_console_renders_empty_list():
    out = Collector()
    ConsoleView(echo=out).render_games([], 'alice')
    assert out.lines == ['No games available']


def test_console_rejects_unknown_screen():
    view = ConsoleView(echo=Collector())
    view.show_screen('lobby')
    assert view.screen == 'lobby'
    with pytest.raises(ValueError):
        view.show_screen('settings')


def test_username_store_roundtrip(tmp_path):
    store = UsernameStore(str(tmp_path / 'nested' / 'state.json'))
    assert store.load() is None
    store.save('alice')
    assert store.load() == 'alice'


def test_username_store_ignores_garbage(tmp_path):
    path = tmp_path / 'state.json'
    path.write_text('not json')
    assert UsernameStore(str(path)).load() is None


def test_cli_help():
    runner = CliRunner()
    result = runner.invoke(main, ['--help'])
    assert result.exit_code == 0
    for command in ('register', 'watch', 'create', 'delete'):
        assert command in result.output


def test_console_errors_stay_printed():
    out = Collector()
    view = ConsoleView(echo=out)
    view.show_error('Game not found')
    view.hide_error()
    assert len(out.lines) == 1
    assert 'Game not found' in out.lines[0]
