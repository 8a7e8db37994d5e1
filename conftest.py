import pytest
from device_inventory import create_app
from device_inventory.config import TestingConfig
from device_inventory.models.device import DeviceInput, DeviceState
from device_inventory.services.device_manager import DeviceManager
from device_inventory.store.memory import InMemoryDeviceStore
from device_inventory.utils.db import db

@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()

@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client

@pytest.fixture
def store():
    return InMemoryDeviceStore()

@pytest.fixture
def manager(store):
    return DeviceManager(store)

@pytest.fixture
def make_device(manager):
    def make(name='Laptop', brand='Dell', state=DeviceState.AVAILABLE):
        return manager.create(DeviceInput(name=name, brand=brand, state=state))
    return make
