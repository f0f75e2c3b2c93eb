from flask import Flask, jsonify
from flask_sqlalchemy import SQLAlchemy
from flask_bcrypt import Bcrypt
from flask_login import LoginManager
from flask_cors import CORS
import click
from lobby.config import Config

db = SQLAlchemy()
bcrypt = Bcrypt()
login_manager = LoginManager()


def create_app(config_class=Config, game_store=None):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    db.init_app(flask_app)
    bcrypt.init_app(flask_app)
    login_manager.init_app(flask_app)
    CORS(flask_app, supports_credentials=True, origins=flask_app.config.get('CORS_ORIGINS', []))

    # Games live in memory only; any GameStore implementation can be injected
    if game_store is None:
        from lobby.store import MemoryGameStore
        game_store = MemoryGameStore()
    flask_app.extensions['game_store'] = game_store

    from lobby.main import main
    flask_app.register_blueprint(main)

    from lobby.api.games import games
    flask_app.register_blueprint(games, url_prefix='/game')

    from lobby.api.players import players
    flask_app.register_blueprint(players, url_prefix='/player')

    from lobby.errors import LobbyError

    @flask_app.errorhandler(LobbyError)
    def handle_lobby_error(exc):
        return jsonify(exc.to_dict()), exc.status_code

    from lobby.models import User

    @login_manager.user_loader
    def load_user(user_id):
        return db.session.get(User, int(user_id))

    with flask_app.app_context():
        db.create_all()

    @click.command('db-reset')
    def db_reset_command():
        """Drops, recreates, and seeds the user table."""
        with flask_app.app_context():
            db.drop_all()
            db.create_all()

            # Seed users
            users = ['testuser1', 'testuser2', 'testuser3']
            for u in users:
                user = User(username=u)
                user.set_password('password')
                db.session.add(user)

            db.session.commit()
            click.echo('Database has been reset and seeded!')

    flask_app.cli.add_command(db_reset_command)

    return flask_app
