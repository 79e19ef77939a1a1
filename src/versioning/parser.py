"""Requirement string parsing.

Turns a raw NPM range such as ``>=1.0.0 <2.0.0 || 3.x`` into a
RequirementTree. Only syntax is checked here; wildcard and qualifier rules
are enforced by the translators.
"""

import logging
import re
from typing import List, Optional

from .errors import InvalidRequirementFormatError
from .models import DashClauseNode, Intersection, OperatorClauseNode, PartialVersion, RequirementTree

logger = logging.getLogger(__name__)

_XR = r"(?:0|[1-9]\d*|[xX*])"
_DOTTED = r"[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*"

PARTIAL_PATTERN = re.compile(
    rf"v?(?P<major>{_XR})"
    rf"(?:\.(?P<minor>{_XR})(?:\.(?P<patch>{_XR}))?)?"
    rf"(?:-(?P<prerelease>{_DOTTED}))?"
    rf"(?:\+(?P<build>{_DOTTED}))?"
)
OPERATOR_PATTERN = re.compile(r"[<>=~^!]+")
CLAUSE_PATTERN = re.compile(rf"(?P<operator>{OPERATOR_PATTERN.pattern})?\s*(?P<version>.+)")

UNION_SEPARATOR = "||"
DASH = "-"


def parse_partial(text: str) -> Optional[PartialVersion]:
    """Parse a (possibly partial) version like ``1``, ``1.x`` or ``1.2.3-beta+b1``.

    Returns:
        PartialVersion, or None if text is not a version.
    """
    m = PARTIAL_PATTERN.fullmatch(text)
    if not m:
        return None
    prerelease = m.group("prerelease")
    build = m.group("build")
    return PartialVersion(
        major=m.group("major"),
        minor=m.group("minor"),
        patch=m.group("patch"),
        prerelease=tuple(prerelease.split(".")) if prerelease else (),
        build=tuple(build.split(".")) if build else (),
    )


def _join_operators(tokens: List[str]) -> List[str]:
    """Attach a standalone operator token to the version after it (``>= 1.2``)."""
    joined: List[str] = []
    pending = ""
    for token in tokens:
        if OPERATOR_PATTERN.fullmatch(token):
            if pending:
                return []  # two operators in a row
            pending = token
            continue
        joined.append(pending + token)
        pending = ""
    if pending:
        return []
    return joined


def _parse_intersection(text: str, raw: str) -> Intersection:
    """Parse one ``||``-free segment into an Intersection."""
    tokens = text.split()
    if not tokens:
        return Intersection()

    joined = _join_operators(tokens)
    if not joined:
        raise InvalidRequirementFormatError(raw)

    operator_clauses: List[OperatorClauseNode] = []
    dash_clauses: List[DashClauseNode] = []
    i = 0
    while i < len(joined):
        token = joined[i]
        if i + 2 < len(joined) and joined[i + 1] == DASH:
            low = parse_partial(token)
            high = parse_partial(joined[i + 2])
            if low is None or high is None:
                raise InvalidRequirementFormatError(raw)
            dash_clauses.append(DashClauseNode(low=low, high=high))
            i += 3
            continue

        m = CLAUSE_PATTERN.fullmatch(token)
        version = parse_partial(m.group("version")) if m else None
        if version is None:
            raise InvalidRequirementFormatError(raw)
        operator_clauses.append(OperatorClauseNode(operator=m.group("operator"), version=version))
        i += 1

    return Intersection(operator_clauses=tuple(operator_clauses), dash_clauses=tuple(dash_clauses))


def parse_requirement(raw: str) -> RequirementTree:
    """Parse a raw requirement string.

    Args:
        raw: Requirement such as ``^1.2.3 || >=2.0.0 <3.0.0``.

    Returns:
        RequirementTree with one Intersection per ``||`` segment. An empty
        segment yields an empty Intersection (matches any release).

    Raises:
        InvalidRequirementFormatError: On any syntax error, carrying the
            whole raw string.
    """
    if raw is None:
        raise InvalidRequirementFormatError(str(raw))

    intersections = tuple(_parse_intersection(segment, raw) for segment in raw.split(UNION_SEPARATOR))
    logger.debug("Parsed requirement '%s' into %d intersection(s)", raw, len(intersections))
    return RequirementTree(raw=raw, intersections=intersections)
