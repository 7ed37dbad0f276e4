"""
Jinja2 integration.

    env = Environment(loader=..., autoescape=select_autoescape(["html", "xml"]))
    register_helpers(env)

Templates can then call the helpers directly. Helper output is Markup, so
autoescaping leaves it intact. Block helpers take their content from a
{% call %} tag:

    {% call semantic_fieldset_tag("Account") %}
      {{ semantic_text_field_tag("login") }}
    {% endcall %}

    {% call(u) semantic_form_for("user", url="/users") %}
      {% call u.fieldset() %}{{ u.text_field("login") }}{% endcall %}
    {% endcall %}
"""

from typing import Any, Callable, Dict

from jinja2 import Environment

from semantic_forms import helpers, tags


TAG_HELPERS = (
    "tag",
    "content_tag",
    "text_field_tag",
    "password_field_tag",
    "hidden_field_tag",
    "check_box_tag",
    "file_field_tag",
    "text_area_tag",
    "select_tag",
    "options_for_select",
    "label_tag",
    "submit_tag",
    "field_set_tag",
)


def template_globals() -> Dict[str, Callable[..., Any]]:
    """Every helper a template may call, by name."""
    names: Dict[str, Callable[..., Any]] = {name: getattr(tags, name) for name in TAG_HELPERS}
    for name in helpers.__all__:
        value = getattr(helpers, name)
        if callable(value) and not isinstance(value, type):
            names[name] = value
    return names


def register_helpers(env: Environment) -> Environment:
    """Add the tag and semantic helpers to env.globals; returns env."""
    env.globals.update(template_globals())
    return env
