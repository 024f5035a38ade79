"""
Tests for doctags.tags.reference module.

This module tests the reference-style tags (@see, @covers, @uses):
- Tag name and accessors
- String and full-tag rendering
- The create() factory with mocked and real collaborators
- Argument validation (empty body, missing collaborators)
- URL references for @see

Coverage targets:
- ReferenceTag.create() splitting and delegation
- ReferenceTag.__str__() with and without description
- See URL handling
- Error propagation from the reference resolver
"""
from __future__ import annotations

import dataclasses

import pytest

from doctags import (
    ConfigurationError,
    Context,
    Covers,
    Description,
    EmptyBodyError,
    Fqsen,
    FqsenResolver,
    MalformedInputError,
    ReferenceResolutionError,
    See,
    StandardDescriptionFactory,
    Url,
    Uses,
)


# =============================================================================
# See Tests
# =============================================================================

class TestSee:
    """Tests for the @see tag."""

    def test_name(self):
        """get_name() should return the tag keyword."""
        fixture = See(Fqsen("\\DateTime"), Description("Description"))

        assert fixture.get_name() == "see"

    def test_string_representation(self):
        """
        str() should render the reference followed by the description.
        """
        fixture = See(Fqsen("\\DateTime"), Description("Description"))

        assert str(fixture) == "\\DateTime Description"

    def test_render_includes_tag_name(self):
        """render() should prefix the body with @name."""
        fixture = See(Fqsen("\\DateTime"), Description("Description"))

        assert fixture.render() == "@see \\DateTime Description"

    def test_has_reference(self):
        """get_reference() should return the reference it was built with."""
        expected = Fqsen("\\DateTime")

        fixture = See(expected)

        assert fixture.get_reference() is expected

    def test_has_description(self):
        """get_description() should return the description it was built with."""
        expected = Description("Description")

        fixture = See(Fqsen("\\DateTime"), expected)

        assert fixture.get_description() is expected

    def test_string_without_description_has_no_trailing_space(self):
        """
        An absent or empty description should not leave a dangling space.
        """
        assert str(See(Fqsen("\\DateTime"))) == "\\DateTime"
        assert str(See(Fqsen("\\DateTime"), Description(""))) == "\\DateTime"

    def test_factory_method(self, mock_reference_resolver, mock_description_factory, context):
        """
        create() should hand the first word to the reference resolver and
        the rest of the body to the description factory.
        """
        fqsen = Fqsen("\\DateTime")
        description = Description("My Description")
        mock_reference_resolver.resolve.return_value = fqsen
        mock_description_factory.create.side_effect = None
        mock_description_factory.create.return_value = description

        fixture = See.create(
            "DateTime My Description",
            mock_reference_resolver,
            mock_description_factory,
            context,
        )

        assert str(fixture) == "\\DateTime My Description"
        assert fixture.get_reference() is fqsen
        assert fixture.get_description() is description
        mock_reference_resolver.resolve.assert_called_once_with("DateTime", context)
        mock_description_factory.create.assert_called_once_with("My Description", context)

    def test_factory_method_without_description(self, reference_resolver, mock_description_factory):
        """A body with only a reference gets an empty description."""
        fixture = See.create("\\DateTime", reference_resolver, mock_description_factory)

        assert str(fixture) == "\\DateTime"
        mock_description_factory.create.assert_called_once_with("", None)

    def test_url_reference_skips_resolver(self, mock_reference_resolver, description_factory):
        """
        URLs are kept verbatim as Url references; the reference resolver
        is never consulted for them.
        """
        fixture = See.create(
            "https://example.com/docs More info",
            mock_reference_resolver,
            description_factory,
        )

        assert fixture.get_reference() == Url("https://example.com/docs")
        assert str(fixture) == "https://example.com/docs More info"
        mock_reference_resolver.resolve.assert_not_called()

    def test_factory_method_fails_if_body_is_not_a_string(self):
        """Non-string bodies are rejected."""
        with pytest.raises(EmptyBodyError):
            See.create([])

    def test_factory_method_fails_if_body_is_empty(self):
        """
        Empty bodies are rejected with an error that is also a ValueError.
        """
        with pytest.raises(EmptyBodyError):
            See.create("")
        with pytest.raises(ValueError):
            See.create("   ")

    def test_factory_method_fails_if_resolver_is_missing(self):
        """A missing reference resolver is a configuration error."""
        with pytest.raises(ConfigurationError, match="reference resolver"):
            See.create("body")

    def test_factory_method_fails_if_description_factory_is_missing(self):
        """A missing description factory is a configuration error."""
        with pytest.raises(ConfigurationError, match="description factory"):
            See.create("body", FqsenResolver())

    def test_resolution_error_propagates(self, reference_resolver, description_factory):
        """
        A reference the resolver cannot parse fails the whole creation;
        it is not turned into description text.
        """
        with pytest.raises(ReferenceResolutionError) as exc_info:
            See.create("Foo-Bar Some text", reference_resolver, description_factory)

        assert exc_info.value.expression == "\\Foo-Bar"

    def test_missing_reference_is_rejected(self):
        """Direct construction requires a reference."""
        with pytest.raises(MalformedInputError):
            See(None)

    def test_is_immutable(self):
        """Tags cannot be modified after construction."""
        fixture = See(Fqsen("\\DateTime"))

        with pytest.raises(dataclasses.FrozenInstanceError):
            fixture.reference = Fqsen("\\Other")


# =============================================================================
# Covers / Uses Tests
# =============================================================================

class TestCovers:
    """Tests for the @covers tag."""

    def test_name(self):
        assert Covers(Fqsen("\\App\\User")).get_name() == "covers"

    def test_create_resolves_against_context(self, reference_resolver, description_factory):
        """
        Aliases from the context apply to the reference, and member
        suffixes survive resolution.
        """
        context = Context("App", {"Dt": "\\DateTime"})

        fixture = Covers.create(
            "Dt::format() Covers formatting",
            reference_resolver,
            description_factory,
            context,
        )

        assert str(fixture.get_reference()) == "\\DateTime::format()"
        assert str(fixture) == "\\DateTime::format() Covers formatting"

    def test_roundtrip_of_resolved_form(self, reference_resolver, description_factory):
        """
        Parsing the string form of a parsed tag gives an equal tag.
        """
        context = Context("App\\Tests")
        first = Covers.create("UserTest The user", reference_resolver, description_factory, context)

        second = Covers.create(str(first), reference_resolver, description_factory, context)

        assert str(first) == "\\App\\Tests\\UserTest The user"
        assert second == first


class TestUses:
    """Tests for the @uses tag."""

    def test_create(self, reference_resolver):
        """@uses parses like the other reference tags."""
        fixture = Uses.create(
            "\\App\\Helper::format()",
            reference_resolver,
            StandardDescriptionFactory(),
        )

        assert fixture.get_name() == "uses"
        assert str(fixture) == "\\App\\Helper::format()"
