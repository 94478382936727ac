"""Turn a path pattern string into tokens."""

import logging
from typing import List, Optional, Tuple

from path_pattern.errors import ParseError
from path_pattern.patterns import default_pattern, modifier_chars, name_pattern
from path_pattern.types import Modifier, Options, Parameter, Static, Token

logger = logging.getLogger(__name__)


def _read_group(pattern: str, start: int) -> Tuple[str, int]:
    """Read the custom pattern opened by the parenthesis at ``start``.

    Returns the enclosed text and the index just past the closing parenthesis.
    """
    length = len(pattern)
    index = start + 1
    depth = 1
    content = ""

    if index < length and pattern[index] == "?":
        raise ParseError('Pattern cannot start with "?"', pattern, index)

    while index < length:
        char = pattern[index]

        if char == "\\":
            if index + 1 >= length:
                raise ParseError("Unterminated escape", pattern, index)
            content += pattern[index : index + 2]
            index += 2
            continue

        if char == ")":
            depth -= 1
            if depth == 0:
                break
        elif char == "(":
            depth += 1
            # nested groups would shift the capture indexes
            if pattern[index + 1 : index + 2] != "?" or pattern.startswith(
                "?P<", index + 1
            ):
                raise ParseError("Capturing groups are not allowed", pattern, index)

        content += char
        index += 1

    if depth:
        raise ParseError("Unbalanced pattern", pattern, start)
    if not content:
        raise ParseError("Missing pattern", pattern, start)

    return content, index + 1


def parse(pattern: str, options: Optional[Options] = None) -> List[Token]:
    """Parse ``pattern`` into a list of tokens.

    Raises ``ParseError`` on malformed input; no partial result is returned.
    """
    options = options or Options()
    prefix_chars = options.prefix_chars
    tokens: List[Token] = []
    length = len(pattern)
    index = 0
    key = 0
    path = ""
    escaped_last = False

    while index < length:
        char = pattern[index]

        # Escaped characters are always literal and never used as a prefix.
        if char == "\\":
            if index + 1 >= length:
                raise ParseError("Unterminated escape", pattern, index)
            path += pattern[index + 1]
            escaped_last = True
            index += 2
            continue

        if char not in ":(":
            path += char
            escaped_last = False
            index += 1
            continue

        position = index
        name = ""
        if char == ":":
            match = name_pattern.match(pattern, index + 1)
            if match is None:
                raise ParseError("Missing parameter name", pattern, position)
            name = match.group()
            index = match.end()

        custom = ""
        if index < length and pattern[index] == "(":
            custom, index = _read_group(pattern, index)

        modifier = Modifier.NONE
        if index < length and pattern[index] in modifier_chars:
            modifier = Modifier(pattern[index])
            index += 1

        prefix = ""
        if path and not escaped_last and path[-1] in prefix_chars:
            prefix = path[-1]
            path = path[:-1]

        if path:
            tokens.append(Static(path))
            path = ""
        escaped_last = False

        if not name:
            name = str(key)
            key += 1

        delimiter = prefix or options.delimiter
        tokens.append(
            Parameter(
                name=name,
                prefix=prefix,
                delimiter=delimiter,
                pattern=custom or default_pattern(delimiter, options.delimiter),
                modifier=modifier,
            )
        )

    if path:
        tokens.append(Static(path))

    logger.debug("Parsed %r into %r", pattern, tokens)
    return tokens
