"""NPM semver requirement parsing and matching."""

from .clauses import AndClause, Clause, OrClause, RangeClause
from .errors import InvalidRequirementFormatError, InvalidVersionError
from .models import MAX_VERSION, MIN_VERSION, Operator, VersionRange, parse_version
from .parser import parse_requirement
from .requirement import NpmVersionRequirement

__all__ = [
    "AndClause",
    "Clause",
    "OrClause",
    "RangeClause",
    "InvalidRequirementFormatError",
    "InvalidVersionError",
    "MAX_VERSION",
    "MIN_VERSION",
    "Operator",
    "VersionRange",
    "parse_version",
    "parse_requirement",
    "NpmVersionRequirement",
]
