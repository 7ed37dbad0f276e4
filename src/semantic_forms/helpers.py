"""
Semantic form helpers.

These helpers do not replace the plain tag generators; they add a set of
"standard" ones that place each field inside a definition pair (label in
a <dt>, field in a <dd>) so every form presents the same valid markup.

Without a model:

    form_tag("/login", semantic_fieldset_tag("Name", block=lambda: [
        semantic_text_field_tag("username", label="Username"),
        semantic_password_field_tag("password", label="Password"),
        semantic_check_box_tag("is_admin", label="Administrator?"),
        semantic_select_tag("category", option_values),
        semantic_submit_tag("Submit"),
    ]))

With a model, the block helpers hand a StandardBuilder to the block:

    semantic_form_for("user", url="/register", block=lambda u: [
        u.fieldset(block=lambda: [
            u.text_field("login"),
            u.password_field("password"),
            u.submit_button(),
        ]),
    ])
"""

from typing import Any, Callable, Dict, Optional

from markupsafe import Markup, escape

from semantic_forms.config import get_style
from semantic_forms.form_builder import FORM_CONSTRUCTORS, Block, capture, resolve_block
from semantic_forms.inflection import titleize
from semantic_forms.semantic_builder import (
    StandardBuilder,
    button_item,
    definition_fieldset,
    definition_item,
    definition_label,
)
from semantic_forms.tags import (
    check_box_tag,
    content_tag,
    escape_javascript,
    file_field_tag,
    password_field_tag,
    select_tag,
    submit_tag,
    tag,
    text_area_tag,
    text_field_tag,
)


class AjaxFormError(ValueError):
    """Raised when an ajaxy form is missing its identifying html id."""
    pass


# Field kind -> plain tag generator. Each kind gets a semantic_<kind>_tag.
FIELD_GENERATORS: Dict[str, Callable[..., Markup]] = {
    "text_field": text_field_tag,
    "password_field": password_field_tag,
    "check_box": check_box_tag,
    "file_field": file_field_tag,
    "text_area": text_area_tag,
}


# =============================================================================
# OPTION HANDLING
# =============================================================================


def field_tag_item_options(element_name: Any, options: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Build the options for a semantic field from the caller's options.

    element_name is the field's name, e.g. "login" or "user[login]".
    options may carry id, label and value plus any html attributes.

    Returns a new dict (the input is left untouched):
        {"id": "login", "label": "Login", "value": None, ...}
    """
    result = dict(options or {})
    if not result.get("id"):
        result["id"] = str(element_name)
    if not result.get("label"):
        result["label"] = titleize(element_name)
    result.setdefault("value", None)
    return result


# =============================================================================
# FORM FIELD HELPERS
# =============================================================================


def semantic_field_tag(kind: str, name: Any, /, **options: Any) -> Markup:
    """
    Place a <kind>_tag within definition list formatting.

        <dt><label for="login">Login:</label></dt>
        <dd><input type="text" name="login" id="login" /></dd>

    ex: semantic_field_tag("text_field", "login", label="Login")

    Raises:
        KeyError: If kind is not in FIELD_GENERATORS
    """
    generator = FIELD_GENERATORS[kind]
    options = field_tag_item_options(name, options)
    label = options.pop("label")
    value = options.pop("value")
    return definition_item(label, generator(name, value, **options), options["id"])


def _field_helper(kind: str) -> Callable[..., Markup]:
    def helper(name: Any, /, **options: Any) -> Markup:
        return semantic_field_tag(kind, name, **options)

    helper.__name__ = helper.__qualname__ = f"semantic_{kind}_tag"
    helper.__doc__ = (
        f"{kind}_tag wrapped in a definition pair.\n\n"
        f"ex: semantic_{kind}_tag(\"name\", label=\"Name\")\n\n"
        "Options: id (defaults to name), label (defaults to the titleized\n"
        "name), value, plus html attributes for the field."
    )
    return helper


semantic_text_field_tag = _field_helper("text_field")
semantic_password_field_tag = _field_helper("password_field")
semantic_check_box_tag = _field_helper("check_box")
semantic_file_field_tag = _field_helper("file_field")
semantic_text_area_tag = _field_helper("text_area")


def semantic_select_tag(name: Any, /, option_values: Any = None, **options: Any) -> Markup:
    """
    Select tag inside a definition pair.

        option_values = options_for_select(["foo", "bar", "other"])

        <dt><label for="group">Group:</label></dt>
        <dd><select name="group" id="group">...</select></dd>

    Spaces in the label become &nbsp; so it never wraps.

    ex: semantic_select_tag("group", option_values, label="Example")
    """
    label = options.pop("label", None) or titleize(name)
    element_id = options.pop("id", None) or str(name)
    label_html = Markup(str(escape(label)).replace(" ", "&nbsp;"))
    dt = content_tag("dt", definition_label(label_html, element_id))
    field_html = select_tag(name, option_values, id=element_id, **options)
    return dt + Markup("\n") + content_tag("dd", field_html)


def semantic_submit_tag(value: Any = "Submit", **options: Any) -> Markup:
    """
    Submit button in a definition pair for a standard form.

        <dt class="button"></dt>
        <dd class="button"><input type="submit" value="Caption" ... /></dd>

    ex: semantic_submit_tag("Caption")
    """
    return button_item(submit_tag(value, **options))


def semantic_submit_with_ajax_tag(value: Any = "Submit", **options: Any) -> Markup:
    """
    Submit button for a semantic_ajaxy_form_for form.

    Renders like semantic_submit_tag followed by a hidden loader; the
    form's before/complete callbacks hide the button and show the loader
    while the request runs.

    Options:
        loader_image: image url (defaults to the style's loader_image)
    """
    loader_image = options.pop("loader_image", None) or get_style().loader_image
    options.setdefault("class_", "ajax-submit")
    loader = content_tag(
        "span",
        tag("img", {"src": loader_image, "alt": "Loading..."}),
        {"class": "ajax-loader", "style": "display:none"},
    )
    return button_item(submit_tag(value, **options) + loader)


# =============================================================================
# FORM BLOCK HELPERS
# =============================================================================


def use_semantic_builder(
    constructor_name: str,
    name: Any,
    *args: Any,
    block: Optional[Block] = None,
    caller: Optional[Block] = None,
    **options: Any,
) -> Markup:
    """
    Call a form constructor (form_for, remote_form_for, fields_for) with
    StandardBuilder selected as its builder. Every other argument is
    passed through unchanged.

    ex: use_semantic_builder("form_for", "user", url="/users", block=...)

    Raises:
        KeyError: If constructor_name is not in FORM_CONSTRUCTORS
    """
    constructor = FORM_CONSTRUCTORS[constructor_name]
    options["builder"] = StandardBuilder
    return constructor(name, *args, block=resolve_block(block, caller), **options)


def semantic_form_for(
    name: Any,
    *args: Any,
    block: Optional[Block] = None,
    caller: Optional[Block] = None,
    **options: Any,
) -> Markup:
    """
    Form for a model's data using the StandardBuilder.

    ex: semantic_form_for("user", url="/users", block=lambda u: ...)
    """
    return use_semantic_builder("form_for", name, *args, block=block, caller=caller, **options)


def semantic_remote_form_for(
    name: Any,
    *args: Any,
    block: Optional[Block] = None,
    caller: Optional[Block] = None,
    **options: Any,
) -> Markup:
    """Remote (Ajax.Request) form for a model's data using the StandardBuilder."""
    return use_semantic_builder("remote_form_for", name, *args, block=block, caller=caller, **options)


def semantic_fields_for(
    name: Any,
    *args: Any,
    block: Optional[Block] = None,
    caller: Optional[Block] = None,
    **options: Any,
) -> Markup:
    """fields_for using the StandardBuilder."""
    return use_semantic_builder("fields_for", name, *args, block=block, caller=caller, **options)


def semantic_ajaxy_form_for(
    name: Any,
    *args: Any,
    block: Optional[Block] = None,
    caller: Optional[Block] = None,
    **options: Any,
) -> Markup:
    """
    Remote form that hides its submit button and shows an ajax loader
    while submitting.

    The form must carry an html id; it is handed to the before/complete
    javascript callbacks so they can find the form. Pair it with
    semantic_submit_with_ajax_tag:

        semantic_ajaxy_form_for("user", url="/users", html={"id": "new_user"},
                                block=lambda u: [
            u.text_field("login"),
            semantic_submit_with_ajax_tag("Create"),
        ])

    Caller-supplied before/complete options take precedence.

    Raises:
        AjaxFormError: If html["id"] is not given
    """
    html = options.get("html") or {}
    element_id = html.get("id")
    if not element_id:
        raise AjaxFormError("Ajax form needs an identifying html id to be specified!")

    style = get_style()
    options.setdefault("before", f"{style.ajax_before}('{escape_javascript(element_id)}')")
    options.setdefault("complete", f"{style.ajax_complete}('{escape_javascript(element_id)}')")
    return use_semantic_builder("remote_form_for", name, *args, block=block, caller=caller, **options)


def semantic_fieldset_tag(
    legend: Any = None,
    block: Optional[Block] = None,
    caller: Optional[Block] = None,
) -> Markup:
    """
    Fieldset around the content block.

        <fieldset>
           <legend>Some Context</legend>
           <dl class="standard-form">
               ...block...
           </dl>
        </fieldset>

    ex: semantic_fieldset_tag("Label", block=lambda: [...input fields...])
    """
    return definition_fieldset(legend, capture(resolve_block(block, caller)))


__all__ = [
    "AjaxFormError",
    "FIELD_GENERATORS",
    "field_tag_item_options",
    "semantic_field_tag",
    "semantic_text_field_tag",
    "semantic_password_field_tag",
    "semantic_check_box_tag",
    "semantic_file_field_tag",
    "semantic_text_area_tag",
    "semantic_select_tag",
    "semantic_submit_tag",
    "semantic_submit_with_ajax_tag",
    "use_semantic_builder",
    "semantic_form_for",
    "semantic_remote_form_for",
    "semantic_fields_for",
    "semantic_ajaxy_form_for",
    "semantic_fieldset_tag",
]
