"""Pytest configuration and fixtures."""

from dataclasses import dataclass
from typing import Any

import pytest


@dataclass
class Box:
    """Minimal live reference: exposes its current content as ``value``."""

    value: Any


@pytest.fixture
def box() -> type[Box]:
    """Factory for live references."""
    return Box
