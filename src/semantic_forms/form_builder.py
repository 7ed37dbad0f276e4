"""
Model-backed form construction.

form_for / remote_form_for / fields_for hand a builder object to a content
block. The builder knows the record's name and values, so field methods
only need the attribute name:

    form_for("user", user, url="/users", block=lambda f: [
        f.text_field("login"),
        f.password_field("password"),
        f.submit("Register"),
    ])

    <form action="/users" method="post">
      <input type="text" name="user[login]" id="user_login" value="bob" />
      ...
    </form>

BLOCK CONTRACT:
    A block is any callable taking the builder. It may return a string,
    an iterable of strings, or None. The result is trusted markup (it is
    not escaped), just like captured template output.

    Every block-taking function also accepts the block as `caller` so it
    can be used directly from a Jinja2 {% call %} tag.

The builder class is selected with the `builder` option; the semantic
helpers use this seam to inject StandardBuilder.
"""

from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterable, Optional, Type

from markupsafe import Markup

from semantic_forms.inflection import humanize, sanitize_id
from semantic_forms.tags import (
    check_box_tag,
    escape_javascript,
    file_field_tag,
    form_tag,
    hidden_field_tag,
    label_tag,
    options_for_select,
    password_field_tag,
    select_tag,
    submit_tag,
    text_area_tag,
    text_field_tag,
)


Block = Callable[..., Any]

# Ajax.Request callback options, in the order they are emitted
AJAX_CALLBACKS = (
    ("loading", "onLoading"),
    ("success", "onSuccess"),
    ("failure", "onFailure"),
    ("complete", "onComplete"),
)

REMOTE_OPTIONS = ("before", "after", "condition") + tuple(key for key, _ in AJAX_CALLBACKS)


def resolve_block(block: Optional[Block], caller: Optional[Block]) -> Block:
    """Return whichever of block/caller was given."""
    resolved = block if block is not None else caller
    if resolved is None:
        raise TypeError("A content block is required")
    return resolved


def capture(block: Block, *args: Any) -> Markup:
    """Call a content block and collect its output as markup."""
    result = block(*args)
    if result is None:
        return Markup("")
    if isinstance(result, str):
        return Markup(result)
    if isinstance(result, Iterable):
        return Markup("").join(Markup(part) for part in result if part is not None)
    return Markup(str(result))


class FormBuilder:
    """
    Default builder handed to form_for / fields_for blocks.

    Field names are "object_name[method]" and ids are derived from that
    name ("user[login]" -> "user_login"). Values come from the record's
    attribute, or its key when the record is a mapping.
    """

    def __init__(self, object_name: Any, record: Any = None, options: Optional[Dict[str, Any]] = None):
        self.object_name = str(object_name)
        self.record = record
        self.options = dict(options or {})

    def field_name(self, method: Any) -> str:
        return f"{self.object_name}[{method}]"

    def field_id(self, method: Any) -> str:
        return sanitize_id(self.field_name(method))

    def value(self, method: Any) -> Any:
        if self.record is None:
            return None
        if isinstance(self.record, Mapping):
            return self.record.get(str(method))
        return getattr(self.record, str(method), None)

    def _options(self, method: Any, options: Dict[str, Any]) -> Dict[str, Any]:
        result = dict(options)
        result.setdefault("id", self.field_id(method))
        return result

    # =========================================================================
    # FIELDS
    # =========================================================================

    def label(self, method: Any, text: Any = None, **options: Any) -> Markup:
        options.setdefault("for", self.field_id(method))
        return label_tag(self.field_name(method), humanize(str(method)) if text is None else text, **options)

    def text_field(self, method: Any, **options: Any) -> Markup:
        value = options.pop("value", self.value(method))
        return text_field_tag(self.field_name(method), value, **self._options(method, options))

    def password_field(self, method: Any, **options: Any) -> Markup:
        # Passwords are never echoed back from the record
        value = options.pop("value", None)
        return password_field_tag(self.field_name(method), value, **self._options(method, options))

    def hidden_field(self, method: Any, **options: Any) -> Markup:
        value = options.pop("value", self.value(method))
        return hidden_field_tag(self.field_name(method), value, **self._options(method, options))

    def file_field(self, method: Any, **options: Any) -> Markup:
        options.pop("value", None)
        return file_field_tag(self.field_name(method), None, **self._options(method, options))

    def text_area(self, method: Any, **options: Any) -> Markup:
        content = options.pop("value", self.value(method))
        return text_area_tag(self.field_name(method), content, **self._options(method, options))

    def check_box(
        self,
        method: Any,
        checked_value: Any = "1",
        unchecked_value: Any = "0",
        **options: Any,
    ) -> Markup:
        """
        Checkbox preceded by a hidden field carrying unchecked_value, so
        an unchecked box still submits a value.
        """
        options.pop("value", None)
        current = self.value(method)
        if "checked" not in options:
            options["checked"] = current is True or (
                current is not None and current is not False and str(current) == str(checked_value)
            )
        name = self.field_name(method)
        hidden = Markup("")
        if unchecked_value is not None:
            hidden = hidden_field_tag(name, unchecked_value, id=None)
        return hidden + check_box_tag(name, checked_value, **self._options(method, options))

    def select(self, method: Any, choices: Iterable[Any], selected: Any = None, **options: Any) -> Markup:
        include_blank = options.pop("include_blank", False)
        option_tags = options_for_select(choices, self.value(method) if selected is None else selected)
        if include_blank:
            blank_text = "" if include_blank is True else include_blank
            option_tags = Markup('<option value="">%s</option>\n') % blank_text + option_tags
        return select_tag(self.field_name(method), option_tags, **self._options(method, options))

    def submit(self, value: Any = "Save changes", **options: Any) -> Markup:
        return submit_tag(value, **options)

    # =========================================================================
    # NESTING
    # =========================================================================

    def fields_for(
        self,
        record_name: Any,
        record: Any = None,
        block: Optional[Block] = None,
        caller: Optional[Block] = None,
        **options: Any,
    ) -> Markup:
        """Nested builder scoped to object_name[record_name], same builder class."""
        if record is None:
            record = self.value(record_name)
        options.setdefault("builder", type(self))
        return fields_for(
            self.field_name(record_name), record, block=resolve_block(block, caller), **options
        )


# =============================================================================
# FORM CONSTRUCTION ENTRY POINTS
# =============================================================================


def _build(builder: Optional[Type[FormBuilder]], record_name: Any, record: Any, options: Dict[str, Any]) -> FormBuilder:
    builder_class = builder or FormBuilder
    return builder_class(record_name, record, options)


def form_for(
    record_name: Any,
    record: Any = None,
    block: Optional[Block] = None,
    caller: Optional[Block] = None,
    url: Any = "",
    html: Optional[Dict[str, Any]] = None,
    builder: Optional[Type[FormBuilder]] = None,
    **options: Any,
) -> Markup:
    """
    Render a <form> around the block's content.

    Args:
        record_name: Prefix for every field name ("user" -> user[login])
        record: Object or mapping supplying field values (optional)
        block: Callable receiving the builder
        url: Form action
        html: Attributes for the <form> tag (id, class, method, multipart)
        builder: FormBuilder subclass to instantiate
        **options: Kept on the builder as builder.options
    """
    form_builder = _build(builder, record_name, record, options)
    content = capture(resolve_block(block, caller), form_builder)
    return form_tag(url, content, **dict(html or {}))


def fields_for(
    record_name: Any,
    record: Any = None,
    block: Optional[Block] = None,
    caller: Optional[Block] = None,
    builder: Optional[Type[FormBuilder]] = None,
    **options: Any,
) -> Markup:
    """Like form_for but without the <form> tag, for fields inside another form."""
    form_builder = _build(builder, record_name, record, options)
    return capture(resolve_block(block, caller), form_builder)


def remote_function(url: Any, parameters: str = "Form.serialize(this)", **options: Any) -> str:
    """
    Javascript issuing an Ajax.Request to `url`.

    Options:
        before / after: statements run around the request
        condition: request is only made when this expression is true
        loading / success / failure / complete: callback bodies
    """
    js_options = ["asynchronous:true", "evalScripts:true"]
    for key, js_name in AJAX_CALLBACKS:
        if options.get(key):
            js_options.append(f"{js_name}:function(request){{{options[key]}}}")
    js_options.append(f"parameters:{parameters}")

    function = f"new Ajax.Request('{escape_javascript(url)}', {{{', '.join(js_options)}}})"
    if options.get("before"):
        function = f"{options['before']}; {function}"
    if options.get("after"):
        function = f"{function}; {options['after']}"
    if options.get("condition"):
        function = f"if ({options['condition']}) {{ {function}; }}"
    return function


def remote_form_for(
    record_name: Any,
    record: Any = None,
    block: Optional[Block] = None,
    caller: Optional[Block] = None,
    url: Any = "",
    html: Optional[Dict[str, Any]] = None,
    builder: Optional[Type[FormBuilder]] = None,
    **options: Any,
) -> Markup:
    """
    form_for submitting through an Ajax.Request instead of a page load.

    The remote options (before, after, condition, loading, success,
    failure, complete) go into the onsubmit handler; the rest are kept on
    the builder.
    """
    remote_options = {key: options.pop(key) for key in REMOTE_OPTIONS if key in options}
    html_options = dict(html or {})
    html_options["onsubmit"] = f"{remote_function(url, **remote_options)}; return false;"
    return form_for(
        record_name,
        record,
        block=resolve_block(block, caller),
        url=url,
        html=html_options,
        builder=builder,
        **options,
    )


FORM_CONSTRUCTORS: Dict[str, Callable[..., Markup]] = {
    "form_for": form_for,
    "remote_form_for": remote_form_for,
    "fields_for": fields_for,
}
