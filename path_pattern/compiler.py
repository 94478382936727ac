"""Compile tokens into a regular expression."""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Pattern, Sequence, Tuple

from path_pattern.patterns import escape_string
from path_pattern.types import Options, Parameter, Static, Token

logger = logging.getLogger(__name__)

END_OF_STRING = r"\Z"


@dataclass(frozen=True)
class CompiledPattern:
    """A compiled matcher and the parameters behind its capture groups.

    ``keys[i]`` owns capture group ``i + 1``.
    """

    regexp: Pattern[str]
    keys: Tuple[Parameter, ...]
    options: Options

    @property
    def names(self) -> Tuple[str, ...]:
        """Return the parameter names in capture order."""
        return tuple(key.name for key in self.keys)

    @property
    def source(self) -> str:
        """Return the generated regular expression source."""
        return self.regexp.pattern


def _flags(options: Options) -> int:
    return 0 if options.sensitive else re.IGNORECASE


def _terminator(options: Options) -> str:
    if not options.ends_with:
        return END_OF_STRING
    ends_with = [escape_string(value) for value in sorted(options.ends_with)]
    return "(?:" + "|".join(ends_with + [END_OF_STRING]) + ")"


def _parameter_expr(token: Parameter) -> str:
    prefix = escape_string(token.prefix)
    capture = token.pattern
    if token.repeat:
        separator = escape_string(token.delimiter)
        capture = f"(?:{token.pattern})(?:{separator}(?:{token.pattern}))*"

    if token.optional:
        return f"(?:{prefix}({capture}))?"
    return f"{prefix}({capture})"


def to_regexp(
    tokens: Sequence[Token], options: Optional[Options] = None
) -> CompiledPattern:
    """Build a ``CompiledPattern`` from parsed tokens."""
    options = options or Options()
    delimiter = escape_string(options.delimiter)
    end_chars = options.prefix_chars | {options.delimiter}
    terminator = _terminator(options)
    route = "^" if options.start else ""
    keys: List[Parameter] = []
    is_end_delimited = not tokens

    for index, token in enumerate(tokens):
        if isinstance(token, Static):
            route += escape_string(token.text)
            is_end_delimited = (
                index == len(tokens) - 1 and token.text[-1:] in end_chars
            )
        elif isinstance(token, Parameter):
            route += _parameter_expr(token)
            keys.append(token)
            is_end_delimited = False
        else:
            raise TypeError(f"Unknown token type: {type(token).__name__}")

    if options.end:
        if not options.strict:
            route += f"(?:{delimiter})?"
        route += terminator if not options.ends_with else f"(?={terminator})"
    else:
        if not options.strict:
            route += f"(?:{delimiter}(?={terminator}))?"
        if not is_end_delimited:
            route += f"(?={delimiter}|{terminator})"

    logger.debug("Compiled %r into %r", tokens, route)
    return CompiledPattern(
        regexp=re.compile(route, _flags(options)),
        keys=tuple(keys),
        options=options,
    )


compile = to_regexp
