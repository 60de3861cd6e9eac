import io
import keyword
import logging
import re
from pathlib import Path

import black

from emulated_devices.config import DEVICE_DESCRIPTORS_URL
from emulated_devices.descriptor import Descriptor
from emulated_devices.errors import FormatError, WriteError

logger = logging.getLogger(__name__)

CLEAN_RE = re.compile(r"[^a-zA-Z0-9_]")

RESET = "Reset"

HEADER = '''\
# Device emulation definitions for use with emulated_devices.emulation.
#
# See: {url}
#
# Generated by gen.py. DO NOT EDIT.

from enum import IntEnum

from emulated_devices.info import Info


class Device(IntEnum):
    """Device provides the enumerated device type."""

    def __str__(self):
        return DEVICES[self].name

    def device(self) -> Info:
        return DEVICES[self]

'''


def member_name(name: str) -> str:
    name = CLEAN_RE.sub("", name)
    return name[:1].upper() + name[1:]


def _enum_reserved(ident):
    # _sunder_ and __dunder__ names are claimed by Enum itself
    return len(ident) > 2 and ident.startswith("_") and ident.endswith("_")


def member_names(descriptors):
    """Enum member names for the reset sentinel followed by every descriptor."""
    names = [RESET]
    for d in descriptors:
        ident = member_name(d.name)
        if not ident.isidentifier() or keyword.iskeyword(ident) or _enum_reserved(ident):
            raise FormatError(f"cannot derive a member name from device {d.name!r}")
        if ident in names:
            raise FormatError(f"device {d.name!r} collides with member {ident}")
        names.append(ident)
    return names


def render(descriptors) -> str:
    """Render the unformatted module source. The reset sentinel is prepended here."""
    descriptors = [Descriptor.reset()] + list(descriptors)
    names = member_names(descriptors[1:])

    buf = io.StringIO()
    buf.write(HEADER.format(url=DEVICE_DESCRIPTORS_URL))
    for i, (ident, d) in enumerate(zip(names, descriptors)):
        if i == 0:
            buf.write("    # Reset is the reset device.\n")
        else:
            buf.write(f"    # {ident} is the {d.name!r} device.\n")
        buf.write(f"    {ident} = {i}\n\n")

    buf.write("\n# DEVICES is the list of devices, indexed by Device.\n")
    buf.write("DEVICES = (\n")
    for d in descriptors:
        v = d.viewport
        buf.write(
            f"    Info({d.name!r}, {d.user_agent!r}, {v.width!r}, {v.height!r}, "
            f"{float(v.device_scale_factor)!r}, {v.is_landscape!r}, {v.is_mobile!r}, {v.has_touch!r}),\n"
        )
    buf.write(")\n")
    return buf.getvalue()


def format_source(src: str) -> str:
    try:
        return black.format_str(src, mode=black.Mode())
    except ValueError as e:
        raise FormatError(f"could not format generated source: {e}") from e


def write(path, src: str):
    path = Path(path)
    try:
        path.write_text(src, encoding="utf-8")
    except OSError as e:
        raise WriteError(f"could not write {path}: {e}") from e
    logger.info("wrote %s", path)


def emit(descriptors, path):
    src = format_source(render(descriptors))
    write(path, src)
    return src
