"""
Plain HTML tag generators (the host layer the semantic helpers decorate).

Every generator returns a markupsafe.Markup string. Attribute values and
text content are escaped unless they are already Markup, so generator
output can be nested freely:

    content_tag("dd", text_field_tag("login"))

Attribute conventions:
    - A trailing underscore is stripped (class_="x" -> class="x")
    - None values are omitted
    - Boolean attributes (checked, disabled, ...) render as
      checked="checked" when truthy and are omitted when falsy
    - A "data" mapping expands to data-* attributes
"""

import re
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple, Union

from markupsafe import Markup

from semantic_forms.inflection import humanize, sanitize_id


BOOLEAN_ATTRIBUTES = frozenset(
    ["checked", "disabled", "multiple", "readonly", "selected", "autofocus", "required"]
)

Content = Union[str, Markup, None]

JAVASCRIPT_ESCAPES = {
    "\\": "\\\\",
    "\r\n": "\\n",
    "\n": "\\n",
    "\r": "\\n",
    "'": "\\'",
    '"': '\\"',
    "</": "<\\/",
}

_JAVASCRIPT_ESCAPE_RE = re.compile(r"(\\|\r\n|\n|\r|'|\"|</)")


def escape_javascript(value: Any) -> str:
    """
    Escape a value for use inside a quoted javascript string literal.

    Backslashes, quotes and line breaks are backslash-escaped and "</"
    becomes "<\\/" so the value cannot close a surrounding script tag.
    """
    if value is None:
        return ""
    return _JAVASCRIPT_ESCAPE_RE.sub(lambda m: JAVASCRIPT_ESCAPES[m.group(1)], str(value))


def _attribute_items(options: Dict[str, Any]) -> Iterable[Tuple[str, Any]]:
    for key, value in options.items():
        key = key.rstrip("_")
        if key == "data" and isinstance(value, dict):
            for data_key, data_value in value.items():
                yield f"data-{str(data_key).replace('_', '-')}", data_value
            continue
        yield key, value


def tag_attributes(options: Optional[Dict[str, Any]]) -> Markup:
    """Render an options mapping as an HTML attribute string (leading space included)."""
    if not options:
        return Markup("")
    parts = []
    for key, value in _attribute_items(options):
        if key in BOOLEAN_ATTRIBUTES:
            if value:
                parts.append(Markup('%s="%s"') % (key, key))
            continue
        if value is None:
            continue
        parts.append(Markup('%s="%s"') % (key, value))
    if not parts:
        return Markup("")
    return Markup(" ") + Markup(" ").join(parts)


def tag(name: str, options: Optional[Dict[str, Any]] = None, open: bool = False) -> Markup:
    """
    Render an empty (void) element.

    ex: tag("br") -> <br />
        tag("input", {"type": "text"}, open=True) -> <input type="text">
    """
    closer = ">" if open else " />"
    return Markup("<%s%s%s") % (name, tag_attributes(options), Markup(closer))


def content_tag(name: str, content: Content = None, options: Optional[Dict[str, Any]] = None) -> Markup:
    """
    Render an element wrapping content.

    ex: content_tag("dt", "Name", {"class": "button"}) -> <dt class="button">Name</dt>
    """
    if content is None:
        content = ""
    return Markup("<%s%s>%s</%s>") % (name, tag_attributes(options), content, name)


# =========================================================================
# FORM FIELD TAGS
# =========================================================================


def _input_tag(input_type: str, name: Any, value: Any, options: Dict[str, Any]) -> Markup:
    attrs: Dict[str, Any] = {"type": input_type, "name": str(name), "id": sanitize_id(name)}
    if value is not None:
        attrs["value"] = value
    attrs.update(options)
    return tag("input", attrs)


def text_field_tag(name: Any, value: Any = None, **options: Any) -> Markup:
    """<input type="text" name="name" id="name" value="value" />"""
    return _input_tag("text", name, value, options)


def password_field_tag(name: Any = "password", value: Any = None, **options: Any) -> Markup:
    """<input type="password" ... />"""
    return _input_tag("password", name, value, options)


def hidden_field_tag(name: Any, value: Any = None, **options: Any) -> Markup:
    """<input type="hidden" ... />"""
    return _input_tag("hidden", name, value, options)


def file_field_tag(name: Any, value: Any = None, **options: Any) -> Markup:
    """
    <input type="file" ... />

    Browsers ignore a value on file inputs, so it is never rendered.
    """
    return _input_tag("file", name, None, options)


def check_box_tag(name: Any, value: Any = "1", checked: bool = False, **options: Any) -> Markup:
    """
    <input type="checkbox" name="name" id="name" value="1" />

    A value of None falls back to "1".
    """
    if value is None:
        value = "1"
    options.setdefault("checked", checked)
    return _input_tag("checkbox", name, value, options)


def text_area_tag(name: Any, content: Any = None, **options: Any) -> Markup:
    """
    <textarea name="name" id="name">content</textarea>

    A size option of "COLSxROWS" is split into cols and rows.
    """
    size = options.pop("size", None)
    if size and "x" in str(size):
        options["cols"], options["rows"] = str(size).split("x", 1)
    attrs: Dict[str, Any] = {"name": str(name), "id": sanitize_id(name)}
    attrs.update(options)
    return content_tag("textarea", "" if content is None else str(content), attrs)


def options_for_select(
    choices: Iterable[Any],
    selected: Union[Any, Sequence[Any], None] = None,
) -> Markup:
    """
    Render <option> tags from a sequence of choices.

    Each choice is either a plain value (text == value) or a
    (text, value) pair. Mappings are treated as text -> value.

    ex: options_for_select(["foo", ("Bar", "b")], selected="b")
    """
    if isinstance(choices, dict):
        choices = list(choices.items())
    if selected is None:
        selected_values = set()
    elif isinstance(selected, (list, tuple, set)):
        selected_values = {str(s) for s in selected}
    else:
        selected_values = {str(selected)}

    option_tags = []
    for choice in choices:
        if isinstance(choice, (list, tuple)) and len(choice) == 2:
            text, value = choice
        else:
            text = value = choice
        attrs = {"value": value, "selected": str(value) in selected_values}
        option_tags.append(content_tag("option", str(text), attrs))
    return Markup("\n").join(option_tags)


def select_tag(name: Any, option_tags: Content = None, **options: Any) -> Markup:
    """
    <select name="name" id="name">option_tags</select>

    option_tags are trusted markup (usually from options_for_select).
    A multiple select gets "[]" appended to its name.
    """
    html_name = str(name)
    if options.get("multiple") and not html_name.endswith("[]"):
        html_name += "[]"
    attrs: Dict[str, Any] = {"name": html_name, "id": sanitize_id(name)}
    attrs.update(options)
    return content_tag("select", Markup(option_tags or ""), attrs)


def label_tag(name: Any, text: Content = None, **options: Any) -> Markup:
    """<label for="name">Text</label>"""
    attrs: Dict[str, Any] = {"for": sanitize_id(name)}
    attrs.update(options)
    return content_tag("label", humanize(str(name)) if text is None else text, attrs)


def submit_tag(value: Any = "Save changes", **options: Any) -> Markup:
    """
    <input type="submit" name="commit" value="Save changes" />

    disable_with="Saving..." swaps the caption and disables the button
    on click.
    """
    disable_with = options.pop("disable_with", None)
    if disable_with:
        onclick = options.get("onclick") or ""
        options["onclick"] = (
            f"this.disabled=true;this.value='{escape_javascript(disable_with)}';{onclick}"
            "this.form.submit();"
        )
    attrs: Dict[str, Any] = {"type": "submit", "name": "commit", "value": value}
    attrs.update(options)
    return tag("input", attrs)


def field_set_tag(legend: Content = None, content: Content = None, **options: Any) -> Markup:
    """<fieldset><legend>legend</legend>content</fieldset>"""
    inner = content_tag("legend", legend) if legend else Markup("")
    return content_tag("fieldset", inner + Markup(content or ""), options)


def form_tag(url: Any = "", content: Content = None, **options: Any) -> Markup:
    """
    <form action="url" method="post">content</form>

    Methods other than get/post are tunnelled through a hidden _method
    field, as browsers only submit GET and POST.
    """
    method = str(options.pop("method", "post")).lower()
    hidden = Markup("")
    if method not in ("get", "post"):
        hidden = content_tag("div", hidden_field_tag("_method", method), {"style": "margin:0;padding:0"})
        method = "post"
    if options.pop("multipart", False):
        options["enctype"] = "multipart/form-data"
    attrs: Dict[str, Any] = {"action": url, "method": method}
    attrs.update(options)
    return content_tag("form", hidden + Markup(content or ""), attrs)
