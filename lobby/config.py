import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///lobby.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    BCRYPT_LOG_ROUNDS = int(os.environ.get('BCRYPT_LOG_ROUNDS', '12'))
    # Comma separated list of front-end origins allowed to call the API
    CORS_ORIGINS = os.environ.get(
        'CORS_ORIGINS',
        'http://localhost:5173,http://127.0.0.1:5173',
    ).split(',')
    # Client side (lobby-client)
    LOBBY_URL = os.environ.get('LOBBY_URL', 'http://127.0.0.1:5000')
    POLL_INTERVAL_SEC = int(os.environ.get('POLL_INTERVAL_SEC', '30'))
    ERROR_DISPLAY_SEC = int(os.environ.get('ERROR_DISPLAY_SEC', '3'))
    HTTP_TIMEOUT_SEC = float(os.environ.get('HTTP_TIMEOUT_SEC', '5'))
