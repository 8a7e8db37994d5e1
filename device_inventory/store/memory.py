import itertools
from dataclasses import replace
from datetime import datetime, timezone
from threading import Lock

from ..exceptions import StorageError

class InMemoryDeviceStore:
    """Keeps devices in a dict keyed by id.

    The lock covers single calls only. A fetch followed by a save from the
    manager is not atomic, so concurrent updates of one id can lose writes.
    """

    def __init__(self, clock=None):
        self._lock = Lock()
        self._devices = {}
        self._ids = itertools.count(1)
        self._clock = clock or (lambda: datetime.now(timezone.utc).replace(tzinfo=None))

    def save(self, device):
        with self._lock:
            if device.id is None:
                stored = replace(device, id=next(self._ids), creation_time=self._clock())
            else:
                existing = self._devices.get(device.id)
                if existing is None:
                    raise StorageError(f'cannot update unknown device {device.id}')
                stored = replace(device, creation_time=existing.creation_time)
            self._devices[stored.id] = stored
            return replace(stored)

    def find_by_id(self, device_id):
        with self._lock:
            device = self._devices.get(device_id)
            return replace(device) if device else None

    def find_all(self):
        with self._lock:
            return [replace(d) for d in self._devices.values()]

    def find_by_brand(self, brand):
        with self._lock:
            return [replace(d) for d in self._devices.values() if d.brand == brand]

    def find_by_state(self, state):
        with self._lock:
            return [replace(d) for d in self._devices.values() if d.state is state]

    def delete(self, device):
        with self._lock:
            if self._devices.pop(device.id, None) is None:
                raise StorageError(f'cannot delete unknown device {device.id}')

    def count(self):
        with self._lock:
            return len(self._devices)
