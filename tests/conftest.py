import logging
from pathlib import Path

import pytest

DATA_DIR = Path(__file__).resolve().parent / "data"


class FakeResponse:
    def __init__(self, content=b"", status_code=200):
        self.content = content
        self.status_code = status_code


@pytest.fixture
def sample_source():
    return (DATA_DIR / "device_descriptors_sample.ts").read_bytes()


@pytest.fixture
def fake_get(monkeypatch):
    """Replace requests.get with a stub that records every call."""
    calls = []

    def install(content=b"", status_code=200, exc=None):
        def get(url, **kwargs):
            calls.append((url, kwargs))
            if exc is not None:
                raise exc
            return FakeResponse(content, status_code)

        monkeypatch.setattr("emulated_devices.fetch.requests.get", get)
        return calls

    return install


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("emulated_devices")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
