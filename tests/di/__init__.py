"""Mock providers for testing."""

from .broadcast import MockBroadcastProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockBroadcastProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
