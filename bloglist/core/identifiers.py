import uuid

from bloglist.core.errors import ValidationError

def new_id() -> str:
    return str(uuid.uuid4())

def ensure_valid_id(value: str) -> str:
    """Raise ValidationError unless value is a well-formed record id"""
    try:
        uuid.UUID(str(value))
    except ValueError:
        raise ValidationError("malformatted id")
    return value
