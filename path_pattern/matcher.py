"""Run a compiled pattern against a subject string."""

import logging
import re
from typing import List, Optional, Sequence

from path_pattern.compiler import CompiledPattern
from path_pattern.errors import MatchError
from path_pattern.types import Match

logger = logging.getLogger(__name__)


def _search(subject: str, compiled: CompiledPattern) -> Optional["re.Match[str]"]:
    try:
        return compiled.regexp.search(subject)
    except (re.error, RecursionError) as err:
        raise MatchError(
            f"Matching {subject!r} against {compiled.source!r} failed: {err}"
        ) from err


def match(
    subject: str,
    compiled: CompiledPattern,
    param_names: Optional[Sequence[str]] = None,
) -> Optional[List[Match]]:
    """Match ``subject`` and return its captures, or None when it does not fit.

    ``param_names`` overrides the names stored in ``compiled``; it must hold one
    name per capture group. Groups that did not take part in the match (an
    absent optional parameter) produce no entry.
    """
    names = compiled.names if param_names is None else tuple(param_names)
    if len(names) != compiled.regexp.groups:
        raise ValueError(
            f"Expected {compiled.regexp.groups} parameter names, got {len(names)}"
        )

    result = _search(subject, compiled)
    if result is None:
        logger.debug("%r does not match %r", subject, compiled.source)
        return None

    matches = []
    for group, name in enumerate(names, start=1):
        value = result.group(group)
        if value is not None:
            matches.append(Match(name=name, value=value))

    return matches


def execute(subject: str, compiled: CompiledPattern) -> Optional[List[Match]]:
    """Match ``subject`` using the parameter names stored in ``compiled``."""
    return match(subject, compiled)
