import pytest

from hexharmony import Color
from hexharmony.transforms import registry


@pytest.fixture
def red():
    return Color.from_hex("FF0000")


@pytest.fixture
def cyan():
    return Color.from_hex("00FFFF")


@pytest.fixture
def isolated_registry(monkeypatch):
    """Registry copy so tests can register transforms freely."""
    transforms = dict(registry.TRANSFORMS)
    monkeypatch.setattr(registry, "TRANSFORMS", transforms)
    return transforms
