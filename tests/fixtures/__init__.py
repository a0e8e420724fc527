"""
Test Fixtures

Shared test data and mock responses.
"""

from .factories import (
    EpgItemFactory,
    GameRecordFactory,
)

__all__ = [
    "EpgItemFactory",
    "GameRecordFactory",
]
