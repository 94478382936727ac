"""path_pattern: turn path patterns like ``/user/:name`` into regular expressions."""

from path_pattern.compiler import CompiledPattern, compile, to_regexp
from path_pattern.errors import MatchError, ParseError, PathPatternError
from path_pattern.log import configure_logging
from path_pattern.matcher import execute, match
from path_pattern.parser import parse
from path_pattern.routing import PathPattern, path_to_regexp
from path_pattern.types import (
    Match,
    Modifier,
    Options,
    Parameter,
    Static,
    Token,
    default_options,
)

__version__ = "1.0.0"

__all__ = [
    "CompiledPattern",
    "Match",
    "MatchError",
    "Modifier",
    "Options",
    "Parameter",
    "ParseError",
    "PathPattern",
    "PathPatternError",
    "Static",
    "Token",
    "compile",
    "configure_logging",
    "default_options",
    "execute",
    "match",
    "parse",
    "path_to_regexp",
    "to_regexp",
]
