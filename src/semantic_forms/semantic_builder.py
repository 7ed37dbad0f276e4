"""
Definition-list markup and the StandardBuilder.

Every semantic field is a "definition pair":

    <dt><label for="user_login">Login:</label></dt>
    <dd><input type="text" name="user[login]" id="user_login" /></dd>

and a group of pairs sits inside a fieldset:

    <fieldset>
       <legend>Account</legend>
       <dl class="standard-form">
           ...pairs...
       </dl>
    </fieldset>

StandardBuilder is the FormBuilder injected by semantic_form_for and
friends. It renders each field as a definition pair, with the label
defaulting to the titleized attribute name:

    semantic_form_for("user", url="/register", block=lambda u: [
        u.fieldset(block=lambda: [
            u.text_field("login"),
            u.password_field("password"),
            u.text_field("mobile_number", label="Mobile No"),
            u.submit_button(),
        ]),
    ])
"""

from typing import Any, Iterable, Optional

from markupsafe import Markup

from semantic_forms.config import get_style
from semantic_forms.form_builder import Block, FormBuilder, capture, resolve_block
from semantic_forms.inflection import titleize
from semantic_forms.tags import content_tag, field_set_tag


def definition_label(label_text: Any, for_id: Any) -> Markup:
    """<label for="for_id">Label:</label>, suffix taken from the active style."""
    text = Markup("%s%s") % (label_text, get_style().label_suffix)
    return content_tag("label", text, {"for": for_id})


def definition_item(label_text: Any, field_html: Any, for_id: Any) -> Markup:
    """Label in a <dt>, field in a <dd>."""
    return content_tag("dt", definition_label(label_text, for_id)) + content_tag("dd", Markup(field_html))


def button_item(button_html: Any) -> Markup:
    """
    Button pair: an empty <dt> keeps the button aligned with the fields.

        <dt class="button"></dt>
        <dd class="button"><input type="submit" ... /></dd>
    """
    button_class = get_style().button_class
    return content_tag("dt", None, {"class": button_class}) + content_tag(
        "dd", Markup(button_html), {"class": button_class}
    )


def definition_fieldset(legend: Any, content: Any) -> Markup:
    """Wrap definition pairs in <fieldset><dl class="standard-form">."""
    dl = content_tag("dl", Markup(content or ""), {"class": get_style().list_class})
    return field_set_tag(legend, dl)


class StandardBuilder(FormBuilder):
    """FormBuilder whose field methods render definition pairs."""

    def fieldset(
        self,
        legend: Any = None,
        block: Optional[Block] = None,
        caller: Optional[Block] = None,
    ) -> Markup:
        return definition_fieldset(legend, capture(resolve_block(block, caller)))

    def _item(self, method: Any, label: Any, options: dict, field_html: Markup) -> Markup:
        for_id = options.get("id") or self.field_id(method)
        return definition_item(label or titleize(method), field_html, for_id)

    def text_field(self, method: Any, label: Any = None, **options: Any) -> Markup:
        return self._item(method, label, options, super().text_field(method, **options))

    def password_field(self, method: Any, label: Any = None, **options: Any) -> Markup:
        return self._item(method, label, options, super().password_field(method, **options))

    def file_field(self, method: Any, label: Any = None, **options: Any) -> Markup:
        return self._item(method, label, options, super().file_field(method, **options))

    def text_area(self, method: Any, label: Any = None, **options: Any) -> Markup:
        return self._item(method, label, options, super().text_area(method, **options))

    def check_box(
        self,
        method: Any,
        checked_value: Any = "1",
        unchecked_value: Any = "0",
        label: Any = None,
        **options: Any,
    ) -> Markup:
        field_html = super().check_box(method, checked_value, unchecked_value, **options)
        return self._item(method, label, options, field_html)

    def select(
        self,
        method: Any,
        choices: Iterable[Any],
        selected: Any = None,
        label: Any = None,
        **options: Any,
    ) -> Markup:
        return self._item(method, label, options, super().select(method, choices, selected, **options))

    def submit_button(self, value: Any = "Submit", **options: Any) -> Markup:
        return button_item(self.submit(value, **options))
