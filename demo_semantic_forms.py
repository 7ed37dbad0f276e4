#!/usr/bin/env python3
"""
Demo: Render standard forms with the semantic helpers.

Shows a plain (model-less) form, a model-backed form and an ajaxy form.
"""

from types import SimpleNamespace

from semantic_forms.helpers import (
    semantic_ajaxy_form_for,
    semantic_check_box_tag,
    semantic_fieldset_tag,
    semantic_form_for,
    semantic_password_field_tag,
    semantic_select_tag,
    semantic_submit_tag,
    semantic_submit_with_ajax_tag,
    semantic_text_field_tag,
)
from semantic_forms.tags import form_tag, options_for_select


def main():
    print("=" * 80)
    print("PLAIN FORM")
    print("=" * 80)
    fields = semantic_fieldset_tag("Name", block=lambda: [
        semantic_text_field_tag("username", label="Username"),
        semantic_password_field_tag("password", label="Password"),
        semantic_check_box_tag("is_admin", label="Administrator?"),
        semantic_select_tag("category", options_for_select(["foo", "bar", "other"])),
        semantic_submit_tag("Submit"),
    ])
    print(form_tag("/login", fields))

    print("\n" + "=" * 80)
    print("MODEL FORM")
    print("=" * 80)
    user = SimpleNamespace(login="bob", email="bob@example.com", mobile_number="")
    print(semantic_form_for("user", user, url="/register", block=lambda u: [
        u.fieldset(block=lambda: [
            u.text_field("login"),
            u.password_field("password"),
            u.text_field("email"),
            u.text_field("mobile_number", label="Mobile No"),
            u.password_field("invite_code", label="Invite"),
            u.submit_button(),
        ]),
    ]))

    print("\n" + "=" * 80)
    print("AJAXY FORM")
    print("=" * 80)
    print(semantic_ajaxy_form_for("user", url="/users", html={"id": "new_user"}, block=lambda u: [
        u.fieldset(block=lambda: [
            u.text_field("login"),
            semantic_submit_with_ajax_tag("Create"),
        ]),
    ]))


if __name__ == "__main__":
    main()
