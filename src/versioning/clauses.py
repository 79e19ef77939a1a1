"""Clause tree evaluated against candidate versions.

Leaves are RangeClause nodes tagged with the operator that produced them;
AndClause and OrClause combine them. The tree is built once from a
RequirementTree and never mutated.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple

from semantic_version import Version

from .models import DashClauseNode, Intersection, Operator, OperatorClauseNode, RequirementTree, VersionRange
from .translators import dash_range, range_for


def _same_triple(left: Version, right: Version) -> bool:
    return (left.major, left.minor, left.patch) == (right.major, right.minor, right.patch)


class Clause(ABC):
    """Predicate over versions."""

    @abstractmethod
    def is_satisfied_by(self, version: Version) -> bool:
        """Return True if version satisfies this clause."""

    def anchors_prerelease(self, version: Version) -> bool:  # pylint: disable=unused-argument
        """Return True if this clause names a pre-release of version's triple."""
        return False


@dataclass(frozen=True)
class RangeClause(Clause):
    """Leaf clause: a single range check.

    ``operator`` is None for dash clauses. Caret leaves accept a pre-release
    only on the exact (major, minor, patch) of their lower bound.
    """
    range: VersionRange
    operator: Optional[Operator] = None
    include_prerelease: bool = False

    def is_satisfied_by(self, version: Version) -> bool:
        if self.operator is Operator.CARET and version.prerelease and not self.include_prerelease:
            # ^1.2.3-beta.2 admits 1.2.3-beta.4 but not 1.2.4-beta.2
            if not _same_triple(version, self.range.min):
                return False
        return self.range.contains(version)

    def anchors_prerelease(self, version: Version) -> bool:
        return any(
            bound.prerelease and _same_triple(bound, version)
            for bound in (self.range.min, self.range.max)
        )

    def __str__(self) -> str:
        tag = self.operator.name if self.operator else "DASH"
        return f"{tag}{self.range}"


@dataclass(frozen=True)
class AndClause(Clause):
    """Intersection: every child must hold.

    A pre-release candidate is only admitted when one of the children names
    a pre-release on the same (major, minor, patch), unless
    ``include_prerelease`` is set.
    """
    children: Tuple[Clause, ...] = ()
    include_prerelease: bool = False

    def is_satisfied_by(self, version: Version) -> bool:
        if not all(child.is_satisfied_by(version) for child in self.children):
            return False
        if not version.prerelease or self.include_prerelease:
            return True
        return self.anchors_prerelease(version)

    def anchors_prerelease(self, version: Version) -> bool:
        return any(child.anchors_prerelease(version) for child in self.children)

    def __str__(self) -> str:
        return " ".join(str(child) for child in self.children) or "*"


@dataclass(frozen=True)
class OrClause(Clause):
    """Union: at least one child must hold."""
    children: Tuple[Clause, ...] = ()

    def is_satisfied_by(self, version: Version) -> bool:
        return any(child.is_satisfied_by(version) for child in self.children)

    def __str__(self) -> str:
        return " || ".join(str(child) for child in self.children)


def operator_clause(node: OperatorClauseNode, include_prerelease: bool = False) -> RangeClause:
    """Build the leaf for an operator clause; a missing operator means EQ."""
    operator = Operator.from_symbol(node.operator) or Operator.EQ
    return RangeClause(
        range=range_for(operator, node.version, include_prerelease),
        operator=operator,
        include_prerelease=include_prerelease,
    )


def dash_clause(node: DashClauseNode, include_prerelease: bool = False) -> RangeClause:
    """Build the leaf for a ``low - high`` clause."""
    return RangeClause(range=dash_range(node, include_prerelease), include_prerelease=include_prerelease)


def intersection_clause(intersection: Intersection, include_prerelease: bool = False) -> AndClause:
    """Combine an intersection's operator clauses and dash clauses."""
    children = [operator_clause(node, include_prerelease) for node in intersection.operator_clauses]
    children.extend(dash_clause(node, include_prerelease) for node in intersection.dash_clauses)
    return AndClause(children=tuple(children), include_prerelease=include_prerelease)


def build_clause(tree: RequirementTree, include_prerelease: bool = False) -> OrClause:
    """Translate a whole RequirementTree into its top-level OrClause."""
    return OrClause(children=tuple(
        intersection_clause(intersection, include_prerelease) for intersection in tree.intersections
    ))
