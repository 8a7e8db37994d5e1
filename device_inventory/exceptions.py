class DeviceInventoryError(Exception):
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def public_message(self):
        return self.message

class DeviceNotFoundError(DeviceInventoryError):
    status_code = 404

    def __init__(self, device_id):
        super().__init__(f'Device not found with id: {device_id}')
        self.device_id = device_id

class DeviceValidationError(DeviceInventoryError):
    """Business-rule or input violation; ``errors`` maps fields to messages for bad request bodies."""
    status_code = 400

    def __init__(self, message, errors=None):
        super().__init__(message)
        self.errors = errors or {}

class StorageError(DeviceInventoryError):
    status_code = 500

    # detail stays in the logs
    def public_message(self):
        return 'An internal server error occurred'
