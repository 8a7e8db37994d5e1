from flask import request, jsonify
from ..schemas.device import DeviceRequest, DevicePatchRequest, parse_body, parse_state
from ..services.device_manager import DeviceManager
from ..store.sql import SqlDeviceStore
from ..utils.db import db

def _manager():
    return DeviceManager(SqlDeviceStore(db.session))

def _body():
    return request.get_json(silent=True)

def create_device():
    data = parse_body(DeviceRequest, _body())
    device = _manager().create(data.to_input())
    return jsonify(device.to_dict()), 201

def get_device(device_id):
    return jsonify(_manager().get_by_id(device_id).to_dict())

def list_devices():
    return jsonify([d.to_dict() for d in _manager().list_all()])

def list_devices_by_brand(brand):
    return jsonify([d.to_dict() for d in _manager().list_by_brand(brand)])

def list_devices_by_state(state):
    devices = _manager().list_by_state(parse_state(state))
    return jsonify([d.to_dict() for d in devices])

def update_device(device_id):
    data = parse_body(DeviceRequest, _body())
    device = _manager().full_update(device_id, data.to_input())
    return jsonify(device.to_dict())

def patch_device(device_id):
    patch = parse_body(DevicePatchRequest, _body())
    device = _manager().partial_update(device_id, patch.to_patch())
    return jsonify(device.to_dict())

def delete_device(device_id):
    _manager().delete(device_id)
    return '', 204
