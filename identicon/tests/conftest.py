"""Pytest fixtures and config."""

import os

import pytest

from identicon.services.identicon_service import Identicon


@pytest.fixture(autouse=True)
def env_cleanup(monkeypatch):
    """Avoid picking up IDENTICON_* settings from the developer's shell."""
    for key in list(os.environ):
        if key.startswith("IDENTICON_"):
            monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture
def zero_source() -> bytes:
    return bytes(16)


@pytest.fixture
def counting_source() -> bytes:
    return bytes(range(16))


@pytest.fixture
def sample_sources() -> list[bytes]:
    """A spread of 16-byte sources, including edge bytes."""
    sources = [bytes(16), bytes([0xFF] * 16), bytes(range(16)), bytes(range(255, 239, -1))]
    sources += [bytes((i * 37 + k * 11) % 256 for k in range(16)) for i in range(12)]
    return sources


@pytest.fixture
def zero_identicon(zero_source) -> Identicon:
    return Identicon(zero_source)
