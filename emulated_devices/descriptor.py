import json
import logging
from dataclasses import dataclass, field
from typing import List

from emulated_devices.errors import DecodeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Viewport:
    width: int = 0
    height: int = 0
    device_scale_factor: float = 0.0
    is_mobile: bool = False
    has_touch: bool = False
    is_landscape: bool = False


@dataclass(frozen=True)
class Descriptor:
    """One device's emulation parameters as published upstream."""

    name: str = ""
    user_agent: str = ""
    viewport: Viewport = field(default_factory=Viewport)

    @classmethod
    def reset(cls):
        return cls()


def _get(obj, key, types, default, where):
    value = obj.get(key, default)
    if value is None:
        return default
    # bool is an int subclass, keep it out of numeric fields
    if not isinstance(value, types) or (isinstance(value, bool) and bool not in types):
        raise DecodeError(f"{where}: field {key!r} has wrong type {type(value).__name__}")
    return value


def _viewport(obj, where) -> Viewport:
    if not isinstance(obj, dict):
        raise DecodeError(f"{where}: viewport must be an object")
    return Viewport(
        width=_get(obj, "width", (int,), 0, where),
        height=_get(obj, "height", (int,), 0, where),
        device_scale_factor=float(_get(obj, "deviceScaleFactor", (int, float), 0.0, where)),
        is_mobile=_get(obj, "isMobile", (bool,), False, where),
        has_touch=_get(obj, "hasTouch", (bool,), False, where),
        is_landscape=_get(obj, "isLandscape", (bool,), False, where),
    )


def _reject_constant(name):
    raise ValueError(f"non-finite number {name} is not allowed")


def decode(text: str) -> List[Descriptor]:
    """Decode normalized JSON into descriptors, keeping upstream order."""
    try:
        payload = json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        raise DecodeError(f"invalid descriptor JSON: {e}") from e

    if not isinstance(payload, list):
        raise DecodeError("descriptor JSON must be an array")

    descriptors = []
    for index, entry in enumerate(payload):
        where = f"descriptor {index}"
        if not isinstance(entry, dict):
            raise DecodeError(f"{where}: must be an object")
        descriptors.append(Descriptor(
            name=_get(entry, "name", (str,), "", where),
            user_agent=_get(entry, "userAgent", (str,), "", where),
            viewport=_viewport(_get(entry, "viewport", (dict,), {}, where), where),
        ))

    logger.info("decoded %d device descriptors", len(descriptors))
    return descriptors
