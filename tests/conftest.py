"""
Pytest configuration and fixtures for dimline.

Provides:
- Variable store and resolver fixtures (metric, imperial, preset values)
- Builder and dimension factories
"""

from typing import Dict, Optional

import pytest

from dimline.dimensions.builder import DimensionBuilder
from dimline.dimensions.entity import Dimension
from dimline.dimensions.spec import DimensionSpec
from dimline.dimensions.style import INCHES, MILLIMETERS, InMemoryVariableStore, StyleResolver


# ============================================================================
# Variable Store Fixtures
# ============================================================================

@pytest.fixture
def store() -> InMemoryVariableStore:
    """Empty metric store (every variable falls back to its default)."""
    return InMemoryVariableStore(unit=MILLIMETERS)


@pytest.fixture
def inch_store() -> InMemoryVariableStore:
    """Empty imperial store."""
    return InMemoryVariableStore(unit=INCHES)


@pytest.fixture
def resolver(store: InMemoryVariableStore) -> StyleResolver:
    return StyleResolver(store)


# ============================================================================
# Builder Fixtures
# ============================================================================

@pytest.fixture
def builder(resolver: StyleResolver) -> DimensionBuilder:
    return DimensionBuilder(resolver)


@pytest.fixture
def make_builder():
    """Factory: builder over a metric store preloaded with values."""
    def _make(values: Optional[Dict[str, float]] = None) -> DimensionBuilder:
        return DimensionBuilder(StyleResolver(InMemoryVariableStore(values=values)))
    return _make


@pytest.fixture
def spec() -> DimensionSpec:
    return DimensionSpec()


@pytest.fixture
def dimension(builder: DimensionBuilder) -> Dimension:
    return Dimension(DimensionSpec(definition_point=(10.0, 20.0)), builder)
