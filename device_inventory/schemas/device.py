from typing import Optional
from pydantic import BaseModel, Field, ValidationError, field_validator
from ..exceptions import DeviceValidationError
from ..models.device import MAX_LABEL_LENGTH, DeviceInput, DevicePatch, DeviceState

# Unknown keys (a client-sent creation_time included) are ignored by pydantic.
class DeviceRequest(BaseModel):
    name: str = Field(max_length=MAX_LABEL_LENGTH)
    brand: str = Field(max_length=MAX_LABEL_LENGTH)
    state: DeviceState

    @field_validator('name', 'brand')
    @classmethod
    def not_blank(cls, v: str, info) -> str:
        if not v.strip():
            raise ValueError(f'{info.field_name} must not be blank')
        return v

    def to_input(self) -> DeviceInput:
        return DeviceInput(name=self.name, brand=self.brand, state=self.state)

class DevicePatchRequest(BaseModel):
    """PATCH body; ``null`` counts as not supplied."""
    name: Optional[str] = Field(default=None, max_length=MAX_LABEL_LENGTH)
    brand: Optional[str] = Field(default=None, max_length=MAX_LABEL_LENGTH)
    state: Optional[DeviceState] = None

    def to_patch(self) -> DevicePatch:
        return DevicePatch(name=self.name, brand=self.brand, state=self.state)

def _field_errors(exc: ValidationError) -> dict:
    errors = {}
    for err in exc.errors():
        field = '.'.join(str(part) for part in err['loc']) or 'body'
        errors[field] = err['msg']
    return errors

def parse_body(schema, data):
    if not isinstance(data, dict):
        raise DeviceValidationError('Request body must be a JSON object')
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise DeviceValidationError('Invalid request body', errors=_field_errors(exc)) from exc

def parse_state(value: str) -> DeviceState:
    try:
        return DeviceState(value)
    except ValueError:
        allowed = ', '.join(s.value for s in DeviceState)
        raise DeviceValidationError(f'Unknown device state {value!r}; expected one of: {allowed}') from None
