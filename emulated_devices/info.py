from dataclasses import dataclass


@dataclass(frozen=True)
class Info:
    """Device information for use with the emulation helpers."""

    # Device name.
    name: str

    # Device user agent string.
    user_agent: str

    # Viewport size in CSS pixels.
    width: int
    height: int

    # Device viewport scale factor.
    scale: float

    # Whether the device is in landscape mode.
    landscape: bool

    # Whether it is a mobile device.
    mobile: bool

    # Whether the device has touch enabled.
    touch: bool

    def __str__(self):
        return self.name

    def device(self):
        return self
