"""
Tests for doctags.fqsen module.

Coverage targets:
- Fqsen validation and the ``name`` attribute
- FqsenResolver against namespaces and aliases
- ReferenceResolutionError for invalid references
"""
from __future__ import annotations

import pytest

from doctags import Context, Fqsen, FqsenResolver, ReferenceResolutionError


# =============================================================================
# Fqsen Tests
# =============================================================================

class TestFqsen:
    """Tests for the Fqsen value."""

    @pytest.mark.parametrize(
        "text, name",
        [
            ("\\DateTime", "DateTime"),
            ("\\App\\User", "User"),
            ("\\App\\User::getName()", "getName"),
            ("\\App\\User::$email", "email"),
            ("\\App\\User::STATUS", "STATUS"),
            ("\\App\\helper()", "helper"),
            ("\\", ""),
        ],
    )
    def test_valid(self, text, name):
        fqsen = Fqsen(text)

        assert str(fqsen) == text
        assert fqsen.name == name

    @pytest.mark.parametrize("text", ["DateTime", "\\App\\", "\\App User", "\\1Up", "\\A::b::c"])
    def test_invalid(self, text):
        with pytest.raises(ReferenceResolutionError):
            Fqsen(text)

    def test_equality_by_value(self):
        assert Fqsen("\\DateTime") == Fqsen("\\DateTime")
        assert hash(Fqsen("\\DateTime")) == hash(Fqsen("\\DateTime"))


# =============================================================================
# FqsenResolver Tests
# =============================================================================

class TestFqsenResolver:
    """Tests for FqsenResolver.resolve()."""

    @pytest.fixture
    def resolver(self) -> FqsenResolver:
        return FqsenResolver()

    def test_fully_qualified_is_unchanged(self, resolver, app_context):
        assert str(resolver.resolve("\\DateTime", app_context)) == "\\DateTime"

    def test_global_namespace_without_context(self, resolver):
        assert resolver.resolve("DateTime") == Fqsen("\\DateTime")

    def test_relative_to_namespace(self, resolver, app_context):
        assert str(resolver.resolve("User", app_context)) == "\\App\\Models\\User"
        assert str(resolver.resolve("Sub\\User", app_context)) == "\\App\\Models\\Sub\\User"

    def test_alias_is_case_insensitive(self, resolver, app_context):
        """Import aliases match regardless of case."""
        resolved = resolver.resolve("carbon::now()", app_context)

        assert str(resolved) == "\\Carbon\\Carbon::now()"

    def test_alias_as_namespace_prefix(self, resolver):
        context = Context("App", {"Models": "App\\Models"})

        assert str(resolver.resolve("Models\\User::$name", context)) == "\\App\\Models\\User::$name"

    @pytest.mark.parametrize("text", ["", "  ", "::foo", "Foo Bar", "Foo::"])
    def test_invalid(self, resolver, text):
        with pytest.raises(ReferenceResolutionError):
            resolver.resolve(text)
