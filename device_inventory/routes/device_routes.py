from flask import Blueprint
from ..controllers.device_controller import (
    create_device, get_device, list_devices, list_devices_by_brand,
    list_devices_by_state, update_device, patch_device, delete_device,
)

device_bp = Blueprint('device_bp', __name__)
device_bp.route('', methods=['POST'])(create_device)
device_bp.route('', methods=['GET'])(list_devices)
device_bp.route('/<int:device_id>', methods=['GET'])(get_device)
device_bp.route('/brand/<brand>', methods=['GET'])(list_devices_by_brand)
device_bp.route('/state/<state>', methods=['GET'])(list_devices_by_state)
device_bp.route('/<int:device_id>', methods=['PUT'])(update_device)
device_bp.route('/<int:device_id>', methods=['PATCH'])(patch_device)
device_bp.route('/<int:device_id>', methods=['DELETE'])(delete_device)
