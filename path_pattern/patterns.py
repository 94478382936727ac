"""Regex patterns and escape table shared by the parser and the compiler."""

import re

# Characters with a meaning in Python's ``re`` syntax outside of verbose mode.
# ``-`` only matters inside a character class but the default parameter class
# is built from escaped delimiters, so it is escaped everywhere.
ESCAPE_CHARS = ".+*?=^!:${}()[]|/\\-"

escape_expr = re.compile("([" + "".join("\\" + c for c in ESCAPE_CHARS) + "])")
name_pattern = re.compile(r"\w+")
modifier_chars = "?*+"


def escape_string(text: str) -> str:
    """Escape ``text`` so it matches literally."""
    return escape_expr.sub(r"\\\1", text)


def default_pattern(delimiter: str, default_delimiter: str) -> str:
    """Return the class matching one or more non-delimiter characters."""
    excluded = delimiter
    if default_delimiter != delimiter:
        excluded += default_delimiter
    return f"[^{escape_string(excluded)}]+?"
