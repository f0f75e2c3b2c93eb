from typing import Any, Dict, List

import click

SCREENS = ('login', 'register', 'lobby', 'game')


class LobbyView:
    """Rendering collaborator. The base class renders nothing."""

    def show_screen(self, name: str) -> None:
        pass

    def show_error(self, message: str) -> None:
        pass

    def hide_error(self) -> None:
        pass

    def render_games(self, games: List[Dict[str, Any]], username: str) -> None:
        pass

    def render_countdown(self, seconds: int) -> None:
        pass


def format_countdown(seconds: int) -> str:
    return f"Next refresh in {seconds} second{'' if seconds == 1 else 's'}"


def format_game(game: Dict[str, Any], username: str) -> str:
    line = f"{game['id']}  {game['name']} (Created by: {game['creator']}, Players: {len(game.get('players') or [])})"
    if game.get('creator') == username:
        line += '  [delete]'
    return line


class ConsoleView(LobbyView):
    """Prints to the terminal. Printed errors stay on screen; hiding one is a no-op."""

    def __init__(self, echo=click.echo):
        self.echo = echo
        self.screen = None

    def show_screen(self, name):
        if name not in SCREENS:
            raise ValueError(f'Unknown screen: {name}')
        self.screen = name
        self.echo(f'== {name} ==')

    def show_error(self, message):
        self.echo(click.style(f'! {message}', fg='red'), err=True)

    def hide_error(self):
        # lines already written to a terminal cannot be taken back
        pass

    def render_games(self, games, username):
        if not games:
            self.echo('No games available')
            return
        for game in games:
            self.echo(format_game(game, username))

    def render_countdown(self, seconds):
        self.echo(format_countdown(seconds))
