"""Pytest fixtures for ipsec_algorithm tests."""

import os

import pytest

from ipsec_algorithm.config import get_settings

# Random key material; tests slice it to the length they need
KEY_MATERIAL = os.urandom(128)


def generate_key(key_len_bits: int) -> bytes:
    """Key of the given bit-length cut from KEY_MATERIAL."""
    return KEY_MATERIAL[: key_len_bits // 8]


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch, tmp_path):
    """Isolate tests from IPSEC_* environment variables and .env files."""
    for name in list(os.environ):
        if name.upper().startswith("IPSEC_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_key():
    """Factory for keys of a given bit-length."""
    return generate_key
