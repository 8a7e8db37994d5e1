from dataclasses import dataclass
from typing import Optional

from ..models.device import Device, DeviceInput, DevicePatch, DeviceState

IDENTITY_FROZEN = 'identity fields frozen while in use'
DELETE_IN_USE = 'in-use devices cannot be deleted'

@dataclass(frozen=True)
class Decision:
    approved: bool
    reason: Optional[str] = None

    def __bool__(self):
        return self.approved

APPROVED = Decision(True)

def rejected(reason: str) -> Decision:
    return Decision(False, reason)

def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()

def _check_identity(name: Optional[str], brand: Optional[str]) -> Decision:
    if _is_blank(name):
        return rejected('name must not be blank')
    if _is_blank(brand):
        return rejected('brand must not be blank')
    return APPROVED

def validate_create(proposed: DeviceInput) -> Decision:
    decision = _check_identity(proposed.name, proposed.brand)
    if not decision:
        return decision
    if not isinstance(proposed.state, DeviceState):
        return rejected('state must be one of: ' + ', '.join(s.value for s in DeviceState))
    return APPROVED

def validate_full_update(current: Device, proposed: DeviceInput) -> Decision:
    decision = validate_create(proposed)
    if not decision:
        return decision
    if current.state is DeviceState.IN_USE and (
            proposed.name != current.name or proposed.brand != current.brand):
        return rejected(IDENTITY_FROZEN)
    return APPROVED

def validate_partial_update(current: Device, patch: DevicePatch) -> Decision:
    in_use = current.state is DeviceState.IN_USE
    for field in ('name', 'brand'):
        value = getattr(patch, field)
        if value is None:
            continue
        if _is_blank(value):
            return rejected(f'{field} must not be blank')
        if in_use and value != getattr(current, field):
            return rejected(f'{field} cannot be changed while the device is in use')
    if patch.state is not None and not isinstance(patch.state, DeviceState):
        return rejected('state must be one of: ' + ', '.join(s.value for s in DeviceState))
    return APPROVED

def validate_delete(current: Device) -> Decision:
    if current.state is DeviceState.IN_USE:
        return rejected(DELETE_IN_USE)
    return APPROVED
