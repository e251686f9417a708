"""Shared fixtures: recorded HERE responses and offline adapters."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from here_geocoder.adapters.geocoding import HereGeocoderAdapter
from here_geocoder.adapters.http import StaticResponseTransport
from here_geocoder.config import HereConfig, reset_config

DATA_DIR = Path(__file__).resolve().parent / "data"


def load_response(name: str) -> str:
    return (DATA_DIR / name).read_text(encoding="utf-8")


@pytest.fixture(autouse=True)
def fresh_config():
    """Make sure no test sees configuration cached by another one."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def recorded() -> Callable[[str], str]:
    """Loader for the recorded responses in tests/data."""
    return load_response


@pytest.fixture
def here_config() -> HereConfig:
    return HereConfig(api_key=None)


@pytest.fixture
def transport() -> StaticResponseTransport:
    return StaticResponseTransport('{"items": []}')


@pytest.fixture
def make_adapter(here_config) -> Callable[..., tuple[HereGeocoderAdapter, StaticResponseTransport]]:
    """Build an adapter answering with a recorded response (or raw body)."""

    def factory(body: str = '{"items": []}', **kwargs):
        if body.endswith(".json"):
            body = load_response(body)
        transport = StaticResponseTransport(body, **kwargs)
        adapter = HereGeocoderAdapter(transport, api_key="api-key", config=here_config)
        return adapter, transport

    return factory
