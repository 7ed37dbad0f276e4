"""
Style configuration for the semantic helpers.

The class names, label suffix and ajax callback names baked into the
generated markup are collected in a FormStyle so an application can
match them to its own stylesheet and javascript:

    # forms.yml
    list_class: signup-form
    label_suffix: ""
    loader_image: /static/spinner.gif

    configure(load_style("forms.yml"))

The active style is module state, set once at application start.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Union

import yaml


class StyleConfigError(ValueError):
    """Raised when a style mapping or YAML document is malformed."""
    pass


@dataclass(frozen=True)
class FormStyle:
    """
    Markup conventions used by the semantic helpers.

    Properties:
        list_class:
            class of the <dl> wrapping a fieldset's definition pairs
        label_suffix:
            appended to every label text ("Login:")
        button_class:
            class of the <dt>/<dd> pair holding a submit button
        ajax_before / ajax_complete:
            javascript functions called with the form id around an
            ajaxy form submission
        loader_image:
            image shown while an ajaxy form is submitting
    """

    list_class: str = "standard-form"
    label_suffix: str = ":"
    button_class: str = "button"
    ajax_before: str = "ajaxyFormBefore"
    ajax_complete: str = "ajaxyFormComplete"
    loader_image: str = "/images/ajax-loader.gif"


DEFAULT_STYLE = FormStyle()

_active_style: FormStyle = DEFAULT_STYLE


def style_to_dict(style: FormStyle) -> Dict[str, Any]:
    return asdict(style)


def style_from_dict(d: Dict[str, Any] | None) -> FormStyle:
    if d is None:
        return FormStyle()
    if not isinstance(d, dict):
        raise StyleConfigError(f"Style must be a mapping, got {type(d).__name__}")
    known = {f.name for f in fields(FormStyle)}
    unknown = set(d) - known
    if unknown:
        raise StyleConfigError(f"Unknown style keys: {sorted(unknown)}")
    for key, value in d.items():
        if not isinstance(value, str):
            raise StyleConfigError(f"Style key '{key}' must be a string, got {type(value).__name__}")
    return FormStyle(**d)


def style_to_yaml(style: FormStyle) -> str:
    return yaml.safe_dump(style_to_dict(style), sort_keys=True)


def style_from_yaml(s: str) -> FormStyle:
    try:
        d = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise StyleConfigError(f"Invalid style YAML: {e}")
    return style_from_dict(d)


def load_style(path: Union[str, Path]) -> FormStyle:
    """
    Read a FormStyle from a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist
        StyleConfigError: If the document is not a valid style mapping
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Style file not found: {path}")
    return style_from_yaml(path.read_text(encoding="utf-8"))


def configure(style: FormStyle) -> FormStyle:
    """Make `style` the active style; returns the previously active one."""
    global _active_style
    previous = _active_style
    _active_style = style
    return previous


def get_style() -> FormStyle:
    return _active_style


def reset_style() -> None:
    configure(DEFAULT_STYLE)
