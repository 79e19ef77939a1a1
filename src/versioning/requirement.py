"""NPM version requirement facade."""

import logging
from typing import Iterable, List, Optional

from semantic_version import Version

from common.logging_utils import extra_context, is_debug_enabled

from .clauses import OrClause, build_clause
from .errors import InvalidVersionError
from .models import VersionLike, parse_version
from .parser import parse_requirement

logger = logging.getLogger(__name__)


class NpmVersionRequirement:
    """A parsed NPM requirement such as ``^1.2.3 || >=2.0.0 <3.0.0``.

    The clause tree is built once at construction; queries only traverse it,
    so one instance can be shared freely between threads.

    Args:
        raw: Requirement string.
        include_prerelease: Let pre-release versions match ranges that do not
            name a pre-release of the same (major, minor, patch).

    Raises:
        InvalidRequirementFormatError: If the requirement is malformed.
    """

    def __init__(self, raw: str, include_prerelease: bool = False):
        tree = parse_requirement(raw)
        self._raw = raw
        self._include_prerelease = include_prerelease
        self._clause = build_clause(tree, include_prerelease)
        if is_debug_enabled(logger):
            logger.debug(
                "Built requirement",
                extra=extra_context(
                    event="requirement_built",
                    component="requirement",
                    requirement=raw,
                    clause=str(self._clause),
                    intersections=len(tree.intersections),
                ),
            )

    @property
    def raw(self) -> str:
        """The requirement string this instance was built from."""
        return self._raw

    @property
    def include_prerelease(self) -> bool:
        return self._include_prerelease

    @property
    def clause(self) -> OrClause:
        """Top-level clause: an OrClause of AndClauses."""
        return self._clause

    def is_satisfied_by(self, version: VersionLike) -> bool:
        """Return True if version satisfies the requirement.

        Args:
            version: semantic_version.Version or version string.

        Raises:
            InvalidVersionError: If a string version is not valid SemVer.
        """
        return self._clause.is_satisfied_by(parse_version(version))

    def __contains__(self, version: VersionLike) -> bool:
        return self.is_satisfied_by(version)

    def filter(self, candidates: Iterable[VersionLike]) -> List[Version]:
        """Return the satisfying candidates in input order.

        Candidates that are not valid SemVer are skipped.
        """
        matching: List[Version] = []
        for candidate in candidates:
            try:
                version = parse_version(candidate)
            except InvalidVersionError:
                logger.debug("Skipping invalid version candidate: %s", candidate)
                continue
            if self._clause.is_satisfied_by(version):
                matching.append(version)
        return matching

    def max_satisfying(self, candidates: Iterable[VersionLike]) -> Optional[Version]:
        """Return the highest satisfying candidate, or None."""
        matching = self.filter(candidates)
        if not matching:
            return None
        return max(matching)

    def __str__(self) -> str:
        return self._raw

    def __repr__(self) -> str:
        return f"NpmVersionRequirement({self._raw!r}, include_prerelease={self._include_prerelease})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, NpmVersionRequirement):
            return NotImplemented
        return (self._raw, self._include_prerelease) == (other.raw, other.include_prerelease)

    def __hash__(self) -> int:
        return hash((self._raw, self._include_prerelease))
