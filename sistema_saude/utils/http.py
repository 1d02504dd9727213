from flask import request

from sistema_saude.errors import ValidationError


def get_json_body():
    """Request body as a dict; anything else is a 400."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError('Corpo da requisição deve ser JSON')
    return data
