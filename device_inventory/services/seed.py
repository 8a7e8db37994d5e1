import logging

from ..models.device import Device, DeviceState

logger = logging.getLogger(__name__)

SAMPLE_DEVICES = (
    ('Smartphone Samsung', 'Samsung', DeviceState.AVAILABLE),
    ('Laptop Dell', 'Dell', DeviceState.IN_USE),
    ('Tablet iPad', 'Apple', DeviceState.INACTIVE),
)

def seed_devices(store):
    """Insert the sample devices when the store is empty. Returns how many were added."""
    if store.count() > 0:
        logger.info('device store not empty, skipping seed')
        return 0
    for name, brand, state in SAMPLE_DEVICES:
        store.save(Device(name=name, brand=brand, state=state))
    logger.info('seeded %d devices', len(SAMPLE_DEVICES))
    return len(SAMPLE_DEVICES)
