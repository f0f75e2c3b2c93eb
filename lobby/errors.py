"""Error taxonomy shared by the server routes and the polling client."""


class LobbyError(Exception):
    """Base for errors that map onto a JSON error envelope."""

    status_code = 400

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {'success': False, 'message': self.message}


class ValidationError(LobbyError):
    status_code = 400


class AuthenticationError(LobbyError):
    status_code = 401


class AuthorizationError(LobbyError):
    status_code = 403


class NotFoundError(LobbyError):
    status_code = 404


class TransportError(Exception):
    """Network or HTTP failure seen by the client.

    `status_code` is set when the server answered with an error status,
    and is None when the request never got a response.
    """

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
