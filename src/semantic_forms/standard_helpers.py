"""
Deprecated "standard_*" names for the semantic helpers.

Earlier releases shipped the same helpers a second time under the
standard_ prefix (standard_text_field_tag, standard_form_for, ...). They
remain importable and behave identically, but emit a DeprecationWarning
pointing at the semantic_ name.
"""

import functools
import warnings
from typing import Any, Callable, Dict

from semantic_forms import helpers


RENAMED: Dict[str, str] = {
    "standard_text_field_tag": "semantic_text_field_tag",
    "standard_password_field_tag": "semantic_password_field_tag",
    "standard_check_box_tag": "semantic_check_box_tag",
    "standard_file_field_tag": "semantic_file_field_tag",
    "standard_text_area_tag": "semantic_text_area_tag",
    "standard_select_tag": "semantic_select_tag",
    "standard_submit_tag": "semantic_submit_tag",
    "standard_form_for": "semantic_form_for",
    "standard_remote_form_for": "semantic_remote_form_for",
    "standard_fields_for": "semantic_fields_for",
    "standard_ajaxy_form_for": "semantic_ajaxy_form_for",
    "standard_fieldset_tag": "semantic_fieldset_tag",
}


def _deprecated_alias(old_name: str, new_name: str) -> Callable[..., Any]:
    target = getattr(helpers, new_name)

    @functools.wraps(target)
    def alias(*args: Any, **kwargs: Any) -> Any:
        warnings.warn(
            f"{old_name} is deprecated, use {new_name} instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return target(*args, **kwargs)

    alias.__name__ = alias.__qualname__ = old_name
    return alias


for _old_name, _new_name in RENAMED.items():
    globals()[_old_name] = _deprecated_alias(_old_name, _new_name)


__all__ = list(RENAMED)
