import json
import os
from typing import Optional

import click


def default_state_path() -> str:
    return os.path.join(click.get_app_dir('lobby'), 'state.json')


class UsernameStore:
    """Remembers the last username that logged in successfully."""

    def __init__(self, path: Optional[str] = None):
        self.path = path or default_state_path()

    def load(self) -> Optional[str]:
        try:
            with open(self.path, encoding='utf-8') as fh:
                data = json.load(fh)
        except (OSError, ValueError):
            return None
        username = data.get('username') if isinstance(data, dict) else None
        return username or None

    def save(self, username: str) -> None:
        os.makedirs(os.path.dirname(self.path) or '.', exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as fh:
            json.dump({'username': username}, fh)
