"""
Shared pytest fixtures for the doctags test suite.

This module provides:
- Resolution contexts (global namespace, namespaced with aliases)
- The standard resolvers and description factory
- Mock collaborators for asserting how tag factories call them
- A StandardTagFactory instance

Fixture Naming Convention:
- *_context : Fixtures that provide Context instances
- mock_* : Fixtures that provide unittest.mock doubles
"""
from __future__ import annotations

from unittest.mock import Mock

import pytest

from doctags import (
    Context,
    Description,
    FqsenResolver,
    StandardDescriptionFactory,
    StandardTagFactory,
    StandardTypeResolver,
)


# =============================================================================
# Contexts
# =============================================================================

@pytest.fixture
def context() -> Context:
    """Context for the global namespace with no aliases."""
    return Context("")


@pytest.fixture
def app_context() -> Context:
    """
    Context for the ``App\\Models`` namespace.

    Aliases:
    - Carbon -> Carbon\\Carbon
    - Collection -> Illuminate\\Support\\Collection
    """
    return Context(
        "App\\Models",
        {
            "Carbon": "Carbon\\Carbon",
            "Collection": "\\Illuminate\\Support\\Collection",
        },
    )


# =============================================================================
# Collaborators
# =============================================================================

@pytest.fixture
def type_resolver() -> StandardTypeResolver:
    """The default type resolver."""
    return StandardTypeResolver()


@pytest.fixture
def reference_resolver() -> FqsenResolver:
    """The default reference resolver."""
    return FqsenResolver()


@pytest.fixture
def description_factory() -> StandardDescriptionFactory:
    """Description factory without inline tag support."""
    return StandardDescriptionFactory()


@pytest.fixture
def mock_description_factory() -> Mock:
    """
    Description factory double.

    Returns a plain Description of the text it receives, and records calls
    so tests can check exactly which text was handed over.
    """
    factory = Mock(spec=StandardDescriptionFactory)
    factory.create.side_effect = lambda text, context=None: Description(text)
    return factory


@pytest.fixture
def mock_reference_resolver() -> Mock:
    """Reference resolver double; tests set its return value."""
    return Mock(spec=FqsenResolver)


@pytest.fixture
def tag_factory() -> StandardTagFactory:
    """Factory with every built-in tag kind registered."""
    return StandardTagFactory()
