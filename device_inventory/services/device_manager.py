import logging
from dataclasses import replace

from ..exceptions import DeviceNotFoundError, DeviceValidationError
from ..models.device import Device
from ..store.base import DeviceStore
from . import lifecycle

logger = logging.getLogger(__name__)

class DeviceManager:
    """Runs each device operation as fetch, validate, persist.

    No locking happens here. Two concurrent updates of the same id race
    unless the store serialises them. Store failures are not caught.
    """

    def __init__(self, store: DeviceStore):
        self.store = store

    def _load(self, device_id):
        device = self.store.find_by_id(device_id)
        if device is None:
            raise DeviceNotFoundError(device_id)
        return device

    def _enforce(self, decision, action, device_id=None):
        if not decision:
            logger.warning('rejected %s of device %s: %s', action, device_id, decision.reason)
            raise DeviceValidationError(decision.reason)

    def create(self, data):
        self._enforce(lifecycle.validate_create(data), 'create')
        device = self.store.save(Device(name=data.name, brand=data.brand, state=data.state))
        logger.info('created device %s (%s)', device.id, device.state.value)
        return device

    def get_by_id(self, device_id):
        return self._load(device_id)

    def list_all(self):
        """Every device, in whatever order the store yields them."""
        return self.store.find_all()

    def list_by_brand(self, brand):
        return self.store.find_by_brand(brand)

    def list_by_state(self, state):
        return self.store.find_by_state(state)

    def full_update(self, device_id, data):
        current = self._load(device_id)
        self._enforce(lifecycle.validate_full_update(current, data), 'update', device_id)
        device = self.store.save(replace(current, name=data.name, brand=data.brand, state=data.state))
        logger.info('updated device %s (%s)', device.id, device.state.value)
        return device

    def partial_update(self, device_id, patch):
        current = self._load(device_id)
        self._enforce(lifecycle.validate_partial_update(current, patch), 'patch', device_id)
        changes = {field: getattr(patch, field) for field in ('name', 'brand', 'state')
                   if getattr(patch, field) is not None}
        device = self.store.save(replace(current, **changes))
        logger.info('patched device %s: %s', device.id, ', '.join(changes) or 'no fields')
        return device

    def delete(self, device_id):
        current = self._load(device_id)
        self._enforce(lifecycle.validate_delete(current), 'delete', device_id)
        self.store.delete(current)
        logger.info('deleted device %s', device_id)
