from ..utils.db import db
from .device import Device, DeviceInput, DevicePatch, DeviceRecord, DeviceState

__all__ = ['db', 'Device', 'DeviceInput', 'DevicePatch', 'DeviceRecord', 'DeviceState']
