"""Inbound event schema.

Each client event has one pydantic model. ``parse`` is the only entry point
used by the gateway; anything that does not fit the model surfaces as a
ValidationError naming the offending fields.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as SchemaError

from .errors import ValidationError


class _Message(BaseModel):
    model_config = ConfigDict(extra='ignore', str_strip_whitespace=True)


class CreateRoom(_Message):
    username: str = Field(..., min_length=1)


class JoinRoom(_Message):
    code: str = Field(..., min_length=1)
    username: str = Field(..., min_length=1)

    @field_validator('code')
    @classmethod
    def upper_code(cls, v: str) -> str:
        return v.upper()


class GameAction(_Message):
    # The term is relayed untouched; only its presence is required.
    term: Any = Field(...)


class LeaveRoom(_Message):
    pass


SCHEMAS = {
    'createRoom': CreateRoom,
    'joinRoom': JoinRoom,
    'gameAction': GameAction,
    'leaveRoom': LeaveRoom,
}


def parse(event: str, data):
    schema = SCHEMAS.get(event)
    if schema is None:
        raise ValidationError(f'unknown event: {event}')
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValidationError('invalid or missing fields: payload must be an object')
    try:
        return schema.model_validate(data)
    except SchemaError as exc:
        fields = sorted({'.'.join(str(p) for p in err['loc']) or 'payload' for err in exc.errors()})
        raise ValidationError(f"invalid or missing fields: {', '.join(fields)}") from exc
