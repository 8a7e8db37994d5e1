import enum
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from . import db

MAX_LABEL_LENGTH = 255

class DeviceState(str, enum.Enum):
    AVAILABLE = 'AVAILABLE'
    IN_USE = 'IN_USE'
    INACTIVE = 'INACTIVE'

@dataclass
class Device:
    """A device as handed out by a store.

    ``id`` and ``creation_time`` stay ``None`` until the first save.
    """
    name: str
    brand: str
    state: DeviceState
    id: Any = None
    creation_time: Optional[datetime] = None

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'brand': self.brand,
            'state': self.state.value,
            'creation_time': self.creation_time.isoformat() if self.creation_time else None,
        }

@dataclass(frozen=True)
class DeviceInput:
    """Payload for create and full update: every field is replaced."""
    name: str
    brand: str
    state: Optional[DeviceState]

@dataclass(frozen=True)
class DevicePatch:
    """Payload for partial update.

    ``None`` means the field was not supplied. An empty string is a supplied
    value and goes through the same checks as any other.
    """
    name: Optional[str] = None
    brand: Optional[str] = None
    state: Optional[DeviceState] = None

class DeviceRecord(db.Model):
    __tablename__ = 'devices'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(MAX_LABEL_LENGTH), nullable=False)
    brand = db.Column(db.String(MAX_LABEL_LENGTH), nullable=False, index=True)
    state = db.Column(db.Enum(DeviceState, name='device_state'), nullable=False, index=True)
    creation_time = db.Column(db.DateTime, nullable=False)

    def to_device(self):
        return Device(
            id=self.id,
            name=self.name,
            brand=self.brand,
            state=self.state,
            creation_time=self.creation_time,
        )

    def apply(self, device):
        # creation_time is written once by the store and never copied back
        self.name = device.name
        self.brand = device.brand
        self.state = device.state
