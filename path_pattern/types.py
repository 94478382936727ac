"""Token model, options and match results."""

import enum
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional, Union

DEFAULT_DELIMITER = "/"


class Modifier(enum.Enum):
    """Cardinality marker written after a parameter."""

    NONE = ""
    OPTIONAL = "?"
    ZERO_OR_MORE = "*"
    ONE_OR_MORE = "+"


@dataclass(frozen=True)
class Static:
    """Literal text matched verbatim."""

    text: str


@dataclass(frozen=True)
class Parameter:
    """A capturing segment of a pattern.

    ``prefix`` is the delimiter character written just before the parameter
    (or ``""``); it is matched together with the capture so an optional
    parameter drops its leading separator too. ``delimiter`` separates the
    repetitions of ``*`` and ``+`` parameters.
    """

    name: str
    prefix: str = ""
    delimiter: str = DEFAULT_DELIMITER
    pattern: str = ""
    modifier: Modifier = Modifier.NONE

    @property
    def optional(self) -> bool:
        """Whether the parameter may be absent."""
        return self.modifier in (Modifier.OPTIONAL, Modifier.ZERO_OR_MORE)

    @property
    def repeat(self) -> bool:
        """Whether the parameter may match several segments."""
        return self.modifier in (Modifier.ZERO_OR_MORE, Modifier.ONE_OR_MORE)


Token = Union[Static, Parameter]


def _charset(values: Optional[Iterable[str]]) -> Optional[FrozenSet[str]]:
    if values is None:
        return None
    if isinstance(values, str):
        values = list(values)
    return frozenset(values)


@dataclass(frozen=True)
class Options:
    """Settings shared by the parser and the compiler for one pattern.

    ``ends_with`` and ``prefixes`` accept a string or any iterable of strings
    and are stored as frozensets.
    """

    sensitive: bool = False
    strict: bool = False
    end: bool = True
    start: bool = True
    delimiter: str = DEFAULT_DELIMITER
    ends_with: Optional[Iterable[str]] = None
    prefixes: Optional[Iterable[str]] = None

    def __post_init__(self) -> None:
        """Normalize character sets and validate the delimiter."""
        if not isinstance(self.delimiter, str) or len(self.delimiter) != 1:
            raise ValueError(
                f"delimiter must be a single character, got {self.delimiter!r}"
            )

        # frozen dataclass: bypass __setattr__ to store the normalized sets
        object.__setattr__(self, "ends_with", _charset(self.ends_with))
        object.__setattr__(self, "prefixes", _charset(self.prefixes))

        for value in self.ends_with or ():
            if not value:
                raise ValueError("ends_with entries must not be empty")
        for value in self.prefixes or ():
            if len(value) != 1:
                raise ValueError(
                    f"prefixes must be single characters, got {value!r}"
                )

    @property
    def prefix_chars(self) -> FrozenSet[str]:
        """Characters that can be taken as a parameter prefix."""
        if self.prefixes is None:
            return frozenset(self.delimiter)
        return frozenset(self.prefixes)


def default_options() -> Options:
    """Return the default options."""
    return Options()


@dataclass(frozen=True)
class Match:
    """One captured parameter value."""

    name: str
    value: str
