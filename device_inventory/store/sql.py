import logging
from datetime import datetime, timezone
from functools import wraps

from sqlalchemy.exc import SQLAlchemyError

from ..exceptions import StorageError
from ..models.device import DeviceRecord

logger = logging.getLogger(__name__)

def _storage_call(fn):
    @wraps(fn)
    def wrapper(self, *args, **kwargs):
        try:
            return fn(self, *args, **kwargs)
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error('device store %s failed: %s', fn.__name__, exc)
            raise StorageError(str(exc)) from exc
    return wrapper

class SqlDeviceStore:
    """Device store over a Flask-SQLAlchemy session.

    Every write commits on its own; there is no transaction spanning the
    manager's fetch and save.
    """

    def __init__(self, session):
        self.session = session

    @_storage_call
    def save(self, device):
        if device.id is None:
            record = DeviceRecord(creation_time=datetime.now(timezone.utc).replace(tzinfo=None))
            self.session.add(record)
        else:
            record = self.session.get(DeviceRecord, device.id)
            if record is None:
                raise StorageError(f'cannot update unknown device {device.id}')
        record.apply(device)
        self.session.commit()
        return record.to_device()

    @_storage_call
    def find_by_id(self, device_id):
        record = self.session.get(DeviceRecord, device_id)
        return record.to_device() if record else None

    @_storage_call
    def find_all(self):
        return [r.to_device() for r in DeviceRecord.query.all()]

    @_storage_call
    def find_by_brand(self, brand):
        # MySQL collations compare case-insensitively; keep exact matches only
        records = DeviceRecord.query.filter_by(brand=brand).all()
        return [r.to_device() for r in records if r.brand == brand]

    @_storage_call
    def find_by_state(self, state):
        return [r.to_device() for r in DeviceRecord.query.filter_by(state=state).all()]

    @_storage_call
    def delete(self, device):
        record = self.session.get(DeviceRecord, device.id)
        if record is None:
            raise StorageError(f'cannot delete unknown device {device.id}')
        self.session.delete(record)
        self.session.commit()

    @_storage_call
    def count(self):
        return DeviceRecord.query.count()
