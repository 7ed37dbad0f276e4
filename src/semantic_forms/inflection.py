"""
String inflections used to derive labels and DOM ids from field names.

    titleize("user_name")    -> "User Name"
    titleize("account_id")   -> "Account"
    sanitize_id("user[login]") -> "user_login"
"""

import re
from typing import Any


def underscore(word: str) -> str:
    """Convert CamelCase / dashed words to lower snake_case."""
    word = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", word)
    word = re.sub(r"([a-z\d])([A-Z])", r"\1_\2", word)
    return word.replace("-", "_").lower()


def humanize(word: str) -> str:
    """
    Turn a field name into a human readable phrase.

    Strips a trailing "_id", replaces underscores with spaces and
    capitalizes the first letter only.
    """
    word = re.sub(r"_id$", "", word)
    word = word.replace("_", " ").strip()
    if not word:
        return ""
    return word[0].upper() + word[1:]


def titleize(name: Any) -> str:
    """
    Capitalize every word of a field name.

    Accepts anything with a str() form (a field name may be a
    symbol-like object or a string such as "user[login]").
    """
    text = humanize(underscore(str(name)))
    return re.sub(r"\b([a-z])", lambda m: m.group(1).upper(), text)


def sanitize_id(name: Any) -> str:
    """
    Derive a DOM id from a field name.

    Brackets become underscores and any character not valid in an id is
    dropped: "user[login]" -> "user_login", "tags[]" -> "tags".
    """
    text = str(name).replace("]", "")
    text = re.sub(r"[^-a-zA-Z0-9:.]", "_", text)
    return text.rstrip("_")
