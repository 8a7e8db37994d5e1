from typing import Any, List, Optional, Protocol

from ..models.device import Device, DeviceState

class DeviceStore(Protocol):
    """Keyed storage for devices.

    ``save`` assigns ``id`` and ``creation_time`` when the device has no id
    yet and updates the stored record otherwise. Implementations return
    copies; mutating a returned device never touches stored state.
    Failures surface as :class:`~device_inventory.exceptions.StorageError`.
    """

    def save(self, device: Device) -> Device: ...

    def find_by_id(self, device_id: Any) -> Optional[Device]: ...

    def find_all(self) -> List[Device]: ...

    def find_by_brand(self, brand: str) -> List[Device]: ...

    def find_by_state(self, state: DeviceState) -> List[Device]: ...

    def delete(self, device: Device) -> None: ...

    def count(self) -> int: ...
