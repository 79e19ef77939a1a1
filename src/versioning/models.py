"""Data models for requirement parsing and range evaluation."""

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union

from semantic_version import Version

from .errors import InvalidRequirementFormatError, InvalidVersionError


class Operator(Enum):
    """Comparison operator governing a single operator clause."""
    EQ = "="
    GT = ">"
    LT = "<"
    GTEQ = ">="
    LTEQ = "<="
    TILDE = "~"
    CARET = "^"

    @classmethod
    def from_symbol(cls, symbol: Optional[str]) -> Optional["Operator"]:
        """Resolve an operator symbol.

        Args:
            symbol: Raw operator token, e.g. ``">="``. ``None`` or blank means
                no operator was given.

        Returns:
            The matching Operator, or None when no symbol was supplied
            (callers treat that as EQ).

        Raises:
            InvalidRequirementFormatError: If the symbol is not a known operator.
        """
        if symbol is None or not symbol.strip():
            return None
        normalized = symbol.strip().upper()
        for operator in cls:
            if operator.value == normalized:
                return operator
        raise InvalidRequirementFormatError(symbol)


MIN_VERSION = Version(major=0, minor=0, patch=0)
# Upper sentinel for unbounded ranges.
MAX_VERSION = Version(major=sys.maxsize, minor=sys.maxsize, patch=sys.maxsize)


@dataclass(frozen=True)
class VersionRange:
    """Interval over versions with independently inclusive bounds.

    A range whose min is above its max is empty, not invalid. A max of
    MAX_VERSION means no upper bound at all.
    """
    min: Version
    max: Version
    min_inclusive: bool = True
    max_inclusive: bool = True

    def contains(self, version: Version) -> bool:
        """Return True if version lies inside the interval."""
        above = version >= self.min if self.min_inclusive else version > self.min
        if self.max is MAX_VERSION:
            return above
        below = version <= self.max if self.max_inclusive else version < self.max
        return above and below

    def __str__(self) -> str:
        low = "[" if self.min_inclusive else "("
        high = "]" if self.max_inclusive else ")"
        upper = "*" if self.max is MAX_VERSION else str(self.max)
        return f"{low}{self.min}, {upper}{high}"


ANY_RANGE = VersionRange(min=MIN_VERSION, max=MAX_VERSION)
EMPTY_RANGE = VersionRange(min=MAX_VERSION, max=MIN_VERSION)


@dataclass(frozen=True)
class PartialVersion:
    """Version as written in a requirement; components are raw text.

    ``minor`` and ``patch`` are None when omitted. Wildcards (``x``, ``X``,
    ``*``) are kept verbatim and interpreted by the translators.
    """
    major: str
    minor: Optional[str] = None
    patch: Optional[str] = None
    prerelease: Tuple[str, ...] = ()
    build: Tuple[str, ...] = ()

    def render(self) -> str:
        """Render as ``major.minor.patch-prerelease+build`` for error messages."""
        text = ".".join(part if part else "x" for part in (self.major, self.minor, self.patch))
        if self.prerelease:
            text += "-" + ".".join(self.prerelease)
        if self.build:
            text += "+" + ".".join(self.build)
        return text


@dataclass(frozen=True)
class OperatorClauseNode:
    """Parsed ``<op><version>`` clause."""
    operator: Optional[str]
    version: PartialVersion


@dataclass(frozen=True)
class DashClauseNode:
    """Parsed ``<low> - <high>`` clause."""
    low: PartialVersion
    high: PartialVersion


@dataclass(frozen=True)
class Intersection:
    """Whitespace-separated clauses that must all hold."""
    operator_clauses: Tuple[OperatorClauseNode, ...] = ()
    dash_clauses: Tuple[DashClauseNode, ...] = ()


@dataclass(frozen=True)
class RequirementTree:
    """Result of parsing a requirement: ``||``-separated intersections."""
    raw: str
    intersections: Tuple[Intersection, ...] = field(default_factory=tuple)


VersionLike = Union[Version, str]


def parse_version(value: VersionLike) -> Version:
    """Coerce a candidate into a semantic_version.Version.

    Strings may carry surrounding whitespace, then at most one ``=`` followed
    by at most one ``v``.

    Raises:
        InvalidVersionError: If the string is not a valid SemVer version.
    """
    if isinstance(value, Version):
        return value
    text = str(value).strip()
    if text.startswith("="):
        text = text[1:].lstrip()
    if text.startswith("v"):
        text = text[1:]
    try:
        return Version(text)
    except ValueError as e:
        raise InvalidVersionError(str(value)) from e
