"""Tests for status name sanitization."""

import pytest

from ddderr.kinds import Kind
from ddderr.strings import sanitize_to_identifier, status_name


class TestSanitizeToIdentifier:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("", ""),
            ("-", ""),
            ("-e", "E"),
            ("foo", "Foo"),
            ("foo-bar-baz", "FooBarBaz"),
            ("foo#bar#baz", "FooBarBaz"),
            ("foo_bar-baz", "FooBarBaz"),
            ("__foo__bar", "FooBar"),
            ("user id", "UserId"),
            ("foo1bar", "FooBar"),
            ("https://foo.com", "HttpsFooCom"),
        ],
    )
    def test_sanitize(self, value, expected):
        assert sanitize_to_identifier(value) == expected

    def test_keeps_case_inside_a_run(self):
        assert sanitize_to_identifier("fooBAR") == "FooBAR"

    def test_letters_without_single_upper_case_are_kept(self):
        assert sanitize_to_identifier("-ß") == "ß"
        assert sanitize_to_identifier("straße-ßig") == "Straßeßig"

    def test_unicode_letters_are_kept(self):
        assert sanitize_to_identifier("éclair-au-café") == "ÉclairAuCafé"


class TestStatusName:
    def test_empty_property_yields_label_only(self):
        assert status_name("", Kind.NOT_FOUND) == "NotFound"

    def test_required_uses_is_required_label(self):
        assert status_name("user_id", Kind.REQUIRED) == "UserIdIsRequired"

    def test_custom_kind_labels_itself(self):
        assert status_name("foo", "Expired") == "FooExpired"

    def test_unknown_kinds(self):
        assert status_name("", Kind.UNKNOWN) == "UnknownDomain"
        assert status_name("db", Kind.UNKNOWN_INFRASTRUCTURE) == "DbUnknownInfrastructure"
