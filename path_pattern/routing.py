"""Route patterns: parse and compile once, match many times."""

from typing import Dict, List, Optional

from path_pattern.compiler import CompiledPattern, to_regexp
from path_pattern.matcher import execute
from path_pattern.parser import parse
from path_pattern.types import Match, Options, Token


def path_to_regexp(path: str, options: Optional[Options] = None) -> CompiledPattern:
    """Parse ``path`` and compile it with the same options."""
    options = options or Options()
    return to_regexp(parse(path, options), options)


class PathPattern:
    """A route path ready for matching."""

    def __init__(self, path: str, options: Optional[Options] = None) -> None:
        """Initialize path pattern object."""
        self.path = path
        self.options = options or Options()
        self.tokens: List[Token] = parse(path, self.options)
        self.compiled = to_regexp(self.tokens, self.options)

    def __eq__(self, other) -> bool:
        """Check for equality."""
        if not isinstance(other, PathPattern):
            return NotImplemented
        return self.path == other.path and self.options == other.options

    def __hash__(self) -> int:
        return hash((self.path, self.options))

    def __repr__(self) -> str:
        return f"PathPattern({self.path!r})"

    @property
    def names(self) -> List[str]:
        """Return the parameter names in pattern order."""
        return list(self.compiled.names)

    def match(self, subject: str) -> Optional[List[Match]]:
        """Return the captures for ``subject``, or None."""
        return execute(subject, self.compiled)

    def params(self, subject: str) -> Optional[Dict[str, str]]:
        """Return the captures for ``subject`` as a dict, or None."""
        matches = self.match(subject)
        if matches is None:
            return None
        return {m.name: m.value for m in matches}
