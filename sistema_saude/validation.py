from sistema_saude.errors import ValidationError


def check_text_fields(data, names):
    """Fields present in ``data`` must be strings (or null)."""
    for name in names:
        value = data.get(name)
        if value is not None and not isinstance(value, str):
            raise ValidationError(f'Campo "{name}" deve ser texto')
