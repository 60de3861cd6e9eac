import logging

import requests

from emulated_devices.config import DEVICE_DESCRIPTORS_URL
from emulated_devices.errors import NetworkError, UnexpectedStatusError

logger = logging.getLogger(__name__)


def fetch(url=DEVICE_DESCRIPTORS_URL, timeout=60) -> bytes:
    """Download the descriptor source in a single GET. No retries."""
    logger.info("retrieving device descriptors from %s", url)
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise NetworkError(f"could not retrieve {url}: {e}") from e

    logger.info("GET %s -> %s", url, response.status_code)
    if response.status_code != 200:
        raise UnexpectedStatusError(response.status_code, url)

    return response.content
