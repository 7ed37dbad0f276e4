"""
Tests for model-backed form construction (FormBuilder, form_for, ...).
"""

from dataclasses import dataclass
from typing import Optional

import pytest
from markupsafe import Markup

from semantic_forms.form_builder import (
    FORM_CONSTRUCTORS,
    FormBuilder,
    capture,
    fields_for,
    form_for,
    remote_form_for,
    remote_function,
)


@dataclass
class User:
    login: str = "bob"
    admin: bool = False
    bio: Optional[str] = None
    role: str = "editor"


class TestCapture:
    """Block output collection."""

    def test_none_is_empty(self):
        assert capture(lambda: None) == ""

    def test_string_is_trusted(self):
        assert capture(lambda: "<p>x</p>") == Markup("<p>x</p>")

    def test_iterable_is_joined(self):
        assert capture(lambda: ["<a>", None, Markup("<b>")]) == "<a><b>"

    def test_block_receives_arguments(self):
        assert capture(lambda x: x * 2, "ab") == "abab"


class TestFormBuilderFields:
    """Field methods read values from the record."""

    def test_names_and_ids(self):
        f = FormBuilder("user")
        assert f.field_name("login") == "user[login]"
        assert f.field_id("login") == "user_login"

    def test_value_from_object(self):
        assert FormBuilder("user", User()).value("login") == "bob"

    def test_value_from_mapping(self):
        assert FormBuilder("user", {"login": "amy"}).value("login") == "amy"

    def test_value_without_record(self):
        assert FormBuilder("user").value("login") is None

    def test_text_field(self):
        html = FormBuilder("user", User()).text_field("login")
        assert html == '<input type="text" name="user[login]" id="user_login" value="bob" />'

    def test_explicit_value_wins(self):
        assert 'value="x"' in FormBuilder("user", User()).text_field("login", value="x")

    def test_password_is_not_echoed(self):
        html = FormBuilder("user", {"password": "secret"}).password_field("password")
        assert "secret" not in html

    def test_text_area(self):
        html = FormBuilder("user", User(bio="Hi")).text_area("bio")
        assert html == '<textarea name="user[bio]" id="user_bio">Hi</textarea>'

    def test_hidden_field(self):
        assert 'type="hidden"' in FormBuilder("user", User()).hidden_field("login")

    def test_file_field(self):
        assert FormBuilder("user").file_field("avatar") == (
            '<input type="file" name="user[avatar]" id="user_avatar" />'
        )

    def test_check_box_unchecked(self):
        html = FormBuilder("user", User(admin=False)).check_box("admin")
        assert html == (
            '<input type="hidden" name="user[admin]" value="0" />'
            '<input type="checkbox" name="user[admin]" id="user_admin" value="1" />'
        )

    def test_check_box_checked(self):
        html = FormBuilder("user", User(admin=True)).check_box("admin")
        assert 'checked="checked"' in html

    def test_check_box_matching_string_value(self):
        html = FormBuilder("user", {"plan": "pro"}).check_box("plan", "pro", "free")
        assert 'checked="checked"' in html
        assert 'value="free"' in html

    def test_select_selects_record_value(self):
        html = FormBuilder("user", User()).select("role", ["admin", "editor"])
        assert '<option value="editor" selected="selected">editor</option>' in html
        assert html.startswith('<select name="user[role]" id="user_role">')

    def test_select_include_blank(self):
        html = FormBuilder("user").select("role", ["admin"], include_blank="Choose")
        assert '<option value="">Choose</option>' in html

    def test_label(self):
        assert FormBuilder("user").label("first_name") == (
            '<label for="user_first_name">First name</label>'
        )

    def test_submit(self):
        assert 'value="Save changes"' in FormBuilder("user").submit()


class TestFormFor:
    """form_for / fields_for / remote_form_for."""

    def test_form_for_wraps_block(self):
        html = form_for("user", User(), url="/users", block=lambda f: f.text_field("login"))
        assert html.startswith('<form action="/users" method="post"><input type="text" name="user[login]"')
        assert html.endswith("</form>")

    def test_html_options_reach_form_tag(self):
        html = form_for("user", url="/u", html={"id": "new_user", "class": "wide"}, block=lambda f: None)
        assert html == '<form action="/u" method="post" id="new_user" class="wide"></form>'

    def test_builder_option_selects_class(self):
        seen = []

        class RecordingBuilder(FormBuilder):
            pass

        form_for("user", block=lambda f: seen.append(f), builder=RecordingBuilder)
        assert isinstance(seen[0], RecordingBuilder)

    def test_extra_options_are_kept_on_builder(self):
        seen = []
        form_for("user", block=lambda f: seen.append(f), index=3)
        assert seen[0].options == {"index": 3}

    def test_caller_is_accepted_as_block(self):
        assert "<form" in form_for("user", caller=lambda f: "x")

    def test_missing_block_raises(self):
        with pytest.raises(TypeError):
            form_for("user")

    def test_fields_for_has_no_form(self):
        html = fields_for("address", {"city": "Oslo"}, block=lambda f: f.text_field("city"))
        assert html == '<input type="text" name="address[city]" id="address_city" value="Oslo" />'

    def test_nested_fields_for(self):
        record = {"address": {"city": "Oslo"}}
        html = form_for("user", record, block=lambda f: f.fields_for(
            "address", block=lambda a: a.text_field("city")
        ))
        assert 'name="user[address][city]"' in html
        assert 'id="user_address_city"' in html
        assert 'value="Oslo"' in html

    def test_remote_form_for_sets_onsubmit(self):
        html = remote_form_for("user", url="/users", complete="done()", block=lambda f: None)
        assert "onsubmit=" in html
        assert "new Ajax.Request(&#39;/users&#39;" in html
        assert "onComplete:function(request){done()}" in html

    def test_remote_options_do_not_reach_builder(self):
        seen = []
        remote_form_for("user", before="b()", complete="c()", index=1, block=lambda f: seen.append(f))
        assert seen[0].options == {"index": 1}

    def test_constructor_table(self):
        assert FORM_CONSTRUCTORS == {
            "form_for": form_for,
            "remote_form_for": remote_form_for,
            "fields_for": fields_for,
        }


class TestRemoteFunction:
    """Ajax.Request javascript."""

    def test_plain_request(self):
        assert remote_function("/x") == (
            "new Ajax.Request('/x', {asynchronous:true, evalScripts:true, "
            "parameters:Form.serialize(this)})"
        )

    def test_before_and_complete(self):
        js = remote_function("/x", before="b()", complete="c()")
        assert js.startswith("b(); new Ajax.Request('/x'")
        assert "onComplete:function(request){c()}" in js

    def test_quote_in_url_is_javascript_escaped(self):
        js = remote_function("/search?q=o'brien")
        assert js.startswith(r"new Ajax.Request('/search?q=o\'brien', {")

    def test_after_and_condition(self):
        js = remote_function("/x", after="a()", condition="ok()")
        assert js.startswith("if (ok()) { new Ajax.Request(")
        assert js.endswith("; a(); }")
