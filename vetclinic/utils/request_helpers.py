from flask import request

from vetclinic.exceptions import BadRequest


def json_body():
    """Parsed JSON object of the request, or BadRequest."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise BadRequest('Invalid JSON data')
    return data
