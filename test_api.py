
import pytest
from device_inventory.config import TestingConfig
from device_inventory import create_app, init_database
from device_inventory.models.device import Device, DeviceRecord, DeviceState
from device_inventory.services.seed import seed_devices
from device_inventory.store.sql import SqlDeviceStore
from device_inventory.utils.db import db

def create(client, name='Mouse', brand='Logitech', state='AVAILABLE', **extra):
    response = client.post('/devices', json={'name': name, 'brand': brand, 'state': state, **extra})
    assert response.status_code == 201
    return response.get_json()

def test_create_device(client):
    body = create(client, creation_time='1999-01-01T00:00:00')
    assert body['id'] is not None
    assert body['name'] == 'Mouse'
    assert body['brand'] == 'Logitech'
    assert body['state'] == 'AVAILABLE'
    assert not body['creation_time'].startswith('1999')

def test_create_then_get_round_trip(client):
    body = create(client)
    response = client.get(f"/devices/{body['id']}")
    assert response.status_code == 200
    assert response.get_json() == body

@pytest.mark.parametrize('payload', [
    {'brand': 'Logitech', 'state': 'AVAILABLE'},
    {'name': '', 'brand': 'Logitech', 'state': 'AVAILABLE'},
    {'name': 'Mouse', 'brand': '   ', 'state': 'AVAILABLE'},
    {'name': 'Mouse', 'brand': 'Logitech'},
    {'name': 'Mouse', 'brand': 'Logitech', 'state': 'BROKEN'},
])
def test_create_rejects_invalid_body(client, payload):
    response = client.post('/devices', json=payload)
    assert response.status_code == 400
    body = response.get_json()
    assert body['status'] == 400
    assert body['errors']

def test_create_rejects_non_json_body(client):
    response = client.post('/devices', data='not json', content_type='text/plain')
    assert response.status_code == 400

def test_get_missing_device(client):
    response = client.get('/devices/9999')
    assert response.status_code == 404
    assert response.get_json()['message'] == 'Device not found with id: 9999'

def test_list_devices(client):
    create(client, name='A', brand='Dell')
    create(client, name='B', brand='dell', state='IN_USE')
    response = client.get('/devices')
    assert response.status_code == 200
    assert {d['name'] for d in response.get_json()} == {'A', 'B'}

def test_list_by_brand_is_case_sensitive(client):
    create(client, name='A', brand='Dell')
    create(client, name='B', brand='dell')
    response = client.get('/devices/brand/Dell')
    assert response.status_code == 200
    assert [d['name'] for d in response.get_json()] == ['A']

def test_list_by_state(client):
    create(client, name='A', state='IN_USE')
    create(client, name='B', state='INACTIVE')
    response = client.get('/devices/state/IN_USE')
    assert response.status_code == 200
    assert [d['name'] for d in response.get_json()] == ['A']

def test_list_by_unknown_state(client):
    response = client.get('/devices/state/LOST')
    assert response.status_code == 400

def test_patch_state_only(client):
    device = create(client)
    response = client.patch(f"/devices/{device['id']}", json={'state': 'INACTIVE'})
    assert response.status_code == 200
    body = response.get_json()
    assert (body['name'], body['brand'], body['state']) == ('Mouse', 'Logitech', 'INACTIVE')
    assert body['creation_time'] == device['creation_time']

def test_patch_null_fields_are_ignored(client):
    device = create(client)
    response = client.patch(f"/devices/{device['id']}", json={'name': None, 'state': 'IN_USE'})
    assert response.status_code == 200
    assert response.get_json()['name'] == 'Mouse'

def test_patch_empty_name_is_rejected(client):
    device = create(client)
    response = client.patch(f"/devices/{device['id']}", json={'name': ''})
    assert response.status_code == 400

def test_in_use_device_is_frozen(client):
    device = create(client, name='A', state='IN_USE')
    url = f"/devices/{device['id']}"
    assert client.patch(url, json={'name': 'B'}).status_code == 400
    assert client.patch(url, json={'name': 'A'}).status_code == 200
    put = client.put(url, json={'name': 'A', 'brand': 'Other', 'state': 'IN_USE'})
    assert put.status_code == 400
    assert put.get_json()['message'] == 'identity fields frozen while in use'

def test_full_update_then_delete_blocked(client):
    device = create(client, name='Printer', brand='HP')
    url = f"/devices/{device['id']}"
    response = client.put(url, json={'name': 'Printer', 'brand': 'HP', 'state': 'IN_USE'})
    assert response.status_code == 200
    assert response.get_json()['creation_time'] == device['creation_time']
    response = client.delete(url)
    assert response.status_code == 400
    assert response.get_json()['message'] == 'in-use devices cannot be deleted'

def test_delete_device(client):
    device = create(client)
    url = f"/devices/{device['id']}"
    response = client.delete(url)
    assert response.status_code == 204
    assert client.get(url).status_code == 404
    assert client.delete(url).status_code == 404

def test_update_missing_device(client):
    assert client.put('/devices/9999', json={'name': 'A', 'brand': 'B', 'state': 'AVAILABLE'}).status_code == 404
    assert client.patch('/devices/9999', json={'state': 'AVAILABLE'}).status_code == 404

def test_unknown_route_returns_json(client):
    response = client.get('/nothing-here')
    assert response.status_code == 404
    assert response.get_json()['status'] == 404

def test_health(client):
    assert client.get('/health').get_json() == {'status': 'ok'}

def test_unhandled_error_is_generic(app, client, monkeypatch):
    def boom(self):
        raise RuntimeError('secret detail')
    monkeypatch.setattr(SqlDeviceStore, 'find_all', boom)
    app.config['PROPAGATE_EXCEPTIONS'] = False
    response = client.get('/devices')
    assert response.status_code == 500
    assert 'secret' not in response.get_json()['message']

def test_sql_store_brand_and_state_filters(app):
    store = SqlDeviceStore(db.session)
    assert seed_devices(store) == 3
    assert store.count() == 3
    assert [d.name for d in store.find_by_brand('Dell')] == ['Laptop Dell']
    assert [d.brand for d in store.find_by_state(DeviceState.INACTIVE)] == ['Apple']

def test_seed_command(app):
    result = app.test_cli_runner().invoke(args=['seed-devices'])
    assert '3 devices created' in result.output

def test_create_app_does_not_touch_database(tmp_path):
    db_file = tmp_path / 'devices.db'
    class SeededConfig(TestingConfig):
        SQLALCHEMY_DATABASE_URI = f'sqlite:///{db_file}'
        SEED_DATA = True
    app = create_app(SeededConfig)
    assert not db_file.exists()
    init_database(app)
    assert db_file.exists()
    with app.test_client() as client:
        assert len(client.get('/devices').get_json()) == 3
    init_database(app)
    with app.test_client() as client:
        assert len(client.get('/devices').get_json()) == 3

def test_init_database_without_seed(tmp_path):
    class PlainConfig(TestingConfig):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'devices.db'}"
    app = create_app(PlainConfig)
    init_database(app)
    with app.test_client() as client:
        assert client.get('/devices').get_json() == []

def test_overlong_name_is_rejected_on_every_write(client):
    device = create(client)
    url = f"/devices/{device['id']}"
    long_name = 'x' * 256
    post = client.post('/devices', json={'name': long_name, 'brand': 'Logitech', 'state': 'AVAILABLE'})
    put = client.put(url, json={'name': long_name, 'brand': 'Logitech', 'state': 'AVAILABLE'})
    patch = client.patch(url, json={'brand': long_name})
    assert [r.status_code for r in (post, put, patch)] == [400, 400, 400]
    assert 'name' in post.get_json()['errors']
    assert 'brand' in patch.get_json()['errors']
    assert client.get(url).get_json() == device

def test_max_length_name_is_accepted(client):
    body = create(client, name='x' * 255)
    assert client.get(f"/devices/{body['id']}").get_json()['name'] == 'x' * 255

def test_method_not_allowed_keeps_allow_header(client):
    response = client.delete('/devices')
    assert response.status_code == 405
    assert response.get_json()['status'] == 405
    assert 'GET' in response.headers['Allow']

def test_sql_store_brand_filter_drops_case_insensitive_matches(app, monkeypatch):
    store = SqlDeviceStore(db.session)
    store.save(Device(name='A', brand='Dell', state=DeviceState.AVAILABLE))
    store.save(Device(name='B', brand='dell', state=DeviceState.AVAILABLE))
    rows = DeviceRecord.query.all()
    # behaves like a MySQL collation that ignores case
    class CaseBlindQuery:
        def filter_by(self, brand):
            self.brand = brand
            return self
        def all(self):
            return [r for r in rows if r.brand.lower() == self.brand.lower()]
    monkeypatch.setattr(DeviceRecord, 'query', CaseBlindQuery())
    assert [d.name for d in store.find_by_brand('Dell')] == ['A']
    assert [d.name for d in store.find_by_brand('dell')] == ['B']

def test_json_log_formatter():
    import json, logging
    from device_inventory.utils.log import JSONFormatter
    record = logging.LogRecord('device_inventory', logging.INFO, __file__, 1, 'deleted device %s', (7,), None)
    line = json.loads(JSONFormatter().format(record))
    assert line['message'] == 'deleted device 7'
    assert line['level'] == 'INFO'
