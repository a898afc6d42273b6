"""Field validators shared by the domain entities"""
from todo_api.domain.errors import ValidationError


def validate_length(field: str, value, min_length: int, max_length: int) -> str:
    """Check that ``value`` is a string whose length is within bounds"""
    if not isinstance(value, str):
        raise ValidationError(field, "Must be a string")
    if len(value) < min_length:
        raise ValidationError(field, "Can not be empty")
    if len(value) > max_length:
        raise ValidationError(field, "Over text length")
    return value
