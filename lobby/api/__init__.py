from flask import request

from lobby.errors import ValidationError


def json_body():
    """The request's JSON object; {} when there is no usable body."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    return data
