from emulated_devices.devices import DEVICES, Device
from emulated_devices.info import Info

__all__ = ["DEVICES", "Device", "Info"]
