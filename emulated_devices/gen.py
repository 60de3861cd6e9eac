"""Generate emulated_devices/devices.py from puppeteer's device descriptors.

Usage::

    python -m emulated_devices.gen -out emulated_devices/devices.py
"""
import logging
import sys
from argparse import ArgumentParser

from emulated_devices.config import DEVICE_DESCRIPTORS_URL, load_settings
from emulated_devices.descriptor import decode
from emulated_devices.emit import emit
from emulated_devices.errors import GeneratorError
from emulated_devices.fetch import fetch
from emulated_devices.literal import extract, normalize

logger = logging.getLogger("emulated_devices")


def configure_logging(level):
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("[{levelname}] {name}: {message}", style="{"))
    logger.addHandler(handler)


def run(out, settings=None):
    settings = settings or load_settings()
    raw = fetch(DEVICE_DESCRIPTORS_URL, timeout=settings.timeout_s)
    descriptors = decode(normalize(extract(raw)))
    return emit(descriptors, out)


def main(argv=None):
    parser = ArgumentParser(
        description="Fetch puppeteer's device descriptors and generate the Device table"
    )
    parser.add_argument("-out", default="devices.py", help="destination file for the generated module")
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
        configure_logging(settings.log_level)
        run(args.out, settings)
    except GeneratorError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
