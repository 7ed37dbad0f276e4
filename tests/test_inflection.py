"""
Tests for name inflections.

Labels and DOM ids for every semantic field are derived from the field
name, so these conversions decide what users see by default.
"""

import pytest
from semantic_forms.inflection import humanize, sanitize_id, titleize, underscore


class TestTitleize:
    """Default label text."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("login", "Login"),
            ("user_name", "User Name"),
            ("is_admin", "Is Admin"),
            ("firstName", "First Name"),
            ("account_id", "Account"),
            ("user[login]", "User[Login]"),
        ],
    )
    def test_titleize(self, name, expected):
        assert titleize(name) == expected

    def test_accepts_non_string_names(self):
        """Names are stringified first."""
        assert titleize(42) == "42"

    def test_humanize_capitalizes_first_word_only(self):
        assert humanize("email_address") == "Email address"

    def test_underscore_splits_camel_case(self):
        assert underscore("HTMLParser") == "html_parser"


class TestSanitizeId:
    """DOM ids derived from bracketed names."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("login", "login"),
            ("user[login]", "user_login"),
            ("user[address][city]", "user_address_city"),
            ("tags[]", "tags"),
            ("first name", "first_name"),
        ],
    )
    def test_sanitize_id(self, name, expected):
        assert sanitize_id(name) == expected
