from flask import Blueprint, jsonify, current_app
from flask_login import login_user, logout_user, current_user

from lobby import db
from lobby.api import json_body
from lobby.errors import AuthenticationError, ValidationError
from lobby.models import User

players = Blueprint('players', __name__)


def _credentials(data, require_password=True):
    username = data.get('username')
    password = data.get('password')
    username = username.strip() if isinstance(username, str) else ''
    if not isinstance(password, str):
        password = ''
    if not username or (require_password and not password):
        if require_password:
            raise ValidationError('Username and password are required')
        raise ValidationError('Username is required')
    return username, password


@players.route('/register', methods=['POST'])
def register():
    data = json_body()
    username, password = _credentials(data)
    if User.query.filter_by(username=username).first():
        raise ValidationError('Username already exists')

    user = User(username=username)
    user.set_password(password)
    db.session.add(user)
    db.session.commit()
    current_app.logger.info(f"[player-register] username={username}")
    return jsonify({'success': True, 'user': user.to_dict()}), 201


@players.route('/login', methods=['POST'])
def login():
    data = json_body()
    username, password = _credentials(data)
    user = User.query.filter_by(username=username).first()
    if not user or not user.check_password(password):
        current_app.logger.info(f"[player-login] rejected username={username}")
        raise AuthenticationError('Invalid credentials')

    login_user(user, remember=True)
    current_app.logger.info(f"[player-login] username={username}")
    return jsonify({'success': True, 'user': user.to_dict()})


@players.route('/logout', methods=['POST'])
def logout():
    data = json_body()
    username, _ = _credentials(data, require_password=False)
    if current_user.is_authenticated:
        logout_user()
    current_app.logger.info(f"[player-logout] username={username}")
    return jsonify({'success': True})
