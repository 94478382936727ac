"""path_pattern exception hierarchy."""


class PathPatternError(Exception):
    """Base for all path_pattern errors."""


class ParseError(PathPatternError, ValueError):
    """Raised when a pattern string is malformed.

    ``position`` is the 0-based index in ``pattern`` where the problem starts.
    """

    def __init__(self, message: str, pattern: str, position: int) -> None:
        super().__init__(f"{message} at position {position} in {pattern!r}")
        self.message = message
        self.pattern = pattern
        self.position = position


class MatchError(PathPatternError):
    """Raised when the regular expression engine fails during a match.

    A subject that simply does not fit the pattern is not an error.
    """
