from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List
import time

from flask_login import UserMixin

from lobby import db, bcrypt


class User(UserMixin, db.Model):
    __tablename__ = 'user'
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(64), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(256), nullable=False)

    def set_password(self, password):
        self.password_hash = bcrypt.generate_password_hash(password).decode('utf-8')

    def check_password(self, password):
        return bcrypt.check_password_hash(self.password_hash, password)

    def to_dict(self):
        return {
            'id': self.id,
            'username': self.username,
        }


def _utc_timestamp() -> str:
    # e.g. 2024-05-01T12:00:00.123Z
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def generate_game_id(store=None) -> str:
    """Generate a time-based game id not already used in `store`."""
    while True:
        game_id = str(time.time_ns() // 1_000_000)
        if store is None or store.find(game_id) is None:
            return game_id
        time.sleep(0.001)


@dataclass
class Game:
    """A named lobby entry owned by its creator. Not an active play session."""

    id: str
    name: str
    creator: str
    players: List[str] = field(default_factory=list)
    created: str = field(default_factory=_utc_timestamp)

    def __post_init__(self):
        if not self.players:
            self.players = [self.creator]

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'creator': self.creator,
            'players': list(self.players),
            'created': self.created,
        }
