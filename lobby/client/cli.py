import logging

import click

from lobby.client.api import LobbyApi
from lobby.client.scheduler import Scheduler
from lobby.client.session import LobbySession
from lobby.client.storage import UsernameStore
from lobby.client.view import ConsoleView
from lobby.config import Config


def _build_session(ctx) -> LobbySession:
    opts = ctx.obj
    api = LobbyApi(opts['url'], timeout=Config.HTTP_TIMEOUT_SEC)
    ctx.call_on_close(api.close)
    return LobbySession(
        api,
        ConsoleView(),
        Scheduler(),
        username_store=UsernameStore(opts['state_file']),
        poll_interval=opts['interval'],
        error_display_sec=Config.ERROR_DISPLAY_SEC,
    )


def _login(session: LobbySession, username, password) -> None:
    if not username:
        username = click.prompt('Username', default=session.restore())
    if not password:
        password = click.prompt('Password', hide_input=True)
    if not session.login(username, password):
        raise click.ClickException('Login failed')


@click.group()
@click.option('--url', default=Config.LOBBY_URL, show_default=True, help='Lobby server base URL.')
@click.option('--interval', default=Config.POLL_INTERVAL_SEC, show_default=True, type=click.IntRange(min=1),
              help='Seconds between list refreshes.')
@click.option('--state-file', default=None, help='Where the last username is remembered.')
@click.option('-v', '--verbose', is_flag=True, help='Log requests and failed polls.')
@click.pass_context
def main(ctx, url, interval, state_file, verbose):
    """Polling client for the lobby server."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    ctx.obj = {'url': url, 'interval': interval, 'state_file': state_file}


@main.command()
@click.option('--username', prompt=True)
@click.password_option()
@click.pass_context
def register(ctx, username, password):
    """Create an account on the server."""
    session = _build_session(ctx)
    session.show_screen('register')
    if not session.register(username, password, password):
        raise click.ClickException('Registration failed')
    click.echo(f'Registered {username}. You can log in now.')


@main.command()
@click.option('--username', default=None)
@click.option('--password', default=None)
@click.pass_context
def watch(ctx, username, password):
    """Log in and keep the game list on screen until interrupted."""
    session = _build_session(ctx)
    _login(session, username, password)
    try:
        session.scheduler.run_forever()
    except KeyboardInterrupt:
        pass
    finally:
        session.close()


@main.command()
@click.argument('name')
@click.option('--username', default=None)
@click.option('--password', default=None)
@click.pass_context
def create(ctx, name, username, password):
    """Create a game owned by the logged in user."""
    session = _build_session(ctx)
    _login(session, username, password)
    try:
        if not session.create_game(name):
            raise click.ClickException('Could not create game')
    finally:
        session.close()


@main.command()
@click.argument('game_id')
@click.option('--username', default=None)
@click.option('--password', default=None)
@click.pass_context
def delete(ctx, game_id, username, password):
    """Delete a game you created."""
    session = _build_session(ctx)
    _login(session, username, password)
    try:
        if not session.delete_game(game_id):
            raise click.ClickException('Could not delete game')
    finally:
        session.close()
