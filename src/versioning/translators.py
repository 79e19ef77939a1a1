"""Translation of parsed clauses into version ranges.

Each operator maps to a pure function from a PartialVersion to a
VersionRange. Partial versions (``1``, ``1.x``, ``1.2.*``) expand to the
band of versions they stand for; ``minimum_for`` and ``maximum_for`` give
the bottom and the exclusive top of that band.
"""

from typing import Callable, Dict, Optional

from semantic_version import Version

from .errors import InvalidRequirementFormatError
from .models import (
    ANY_RANGE,
    EMPTY_RANGE,
    MAX_VERSION,
    MIN_VERSION,
    DashClauseNode,
    Operator,
    PartialVersion,
    VersionRange,
)

WILDCARDS = ("X", "*")


def is_wildcard(value: Optional[str]) -> bool:
    """Return True for an absent, blank, ``x``/``X`` or ``*`` component."""
    return value is None or not value.strip() or value.strip().upper() in WILDCARDS


def is_exact(version: PartialVersion) -> bool:
    """Return True when major, minor and patch are all given."""
    return not (is_wildcard(version.major) or is_wildcard(version.minor) or is_wildcard(version.patch))


def validate(version: PartialVersion) -> None:
    """Reject wildcard placements that do not describe a contiguous band.

    Raises:
        InvalidRequirementFormatError: For ``1.x.3``, ``x.2``, or a wildcard
            combined with pre-release or build metadata (``1.x-beta``).
    """
    minor_wildcard = is_wildcard(version.minor)
    patch_wildcard = is_wildcard(version.patch)
    if minor_wildcard and not patch_wildcard:
        raise InvalidRequirementFormatError(version.render())
    if is_wildcard(version.major) and not minor_wildcard:
        raise InvalidRequirementFormatError(version.render())
    if (minor_wildcard or patch_wildcard) and (version.prerelease or version.build):
        raise InvalidRequirementFormatError(version.render())


def _number(value: Optional[str]) -> int:
    return 0 if is_wildcard(value) else int(value)


def _build_version(source: PartialVersion, major: int, minor: int, patch: int, keep_qualifiers: bool) -> Version:
    """Construct a Version, mapping identifier errors to requirement errors."""
    prerelease = source.prerelease if keep_qualifiers else ()
    build = source.build if keep_qualifiers else ()
    try:
        return Version(major=major, minor=minor, patch=patch, prerelease=prerelease, build=build)
    except ValueError as e:
        raise InvalidRequirementFormatError(source.render()) from e


def minimum_for(version: PartialVersion) -> Version:
    """Lowest version described by a (possibly partial) version.

    Wildcards become 0. Pre-release and build are kept only for exact
    versions.
    """
    validate(version)
    return _build_version(
        version,
        _number(version.major),
        _number(version.minor),
        _number(version.patch),
        keep_qualifiers=is_exact(version),
    )


def maximum_for(version: PartialVersion) -> Version:
    """Exclusive top of the band described by a partial version.

    ``1.x`` gives ``2.0.0`` and ``1.2.x`` gives ``1.3.0``. An exact version
    is returned unchanged, qualifiers included.
    """
    validate(version)
    major, minor, patch = _number(version.major), _number(version.minor), _number(version.patch)
    if is_wildcard(version.minor):
        major, minor, patch = major + 1, 0, 0
    elif is_wildcard(version.patch):
        minor, patch = minor + 1, 0
    return _build_version(version, major, minor, patch, keep_qualifiers=is_exact(version))


def tilde_maximum_for(version: PartialVersion) -> Version:
    """Exclusive upper bound allowing patch-level changes.

    ``~1.2.3`` and ``~1.2`` stop at ``1.3.0``; ``~1`` stops at ``2.0.0``.
    """
    validate(version)
    major, minor = _number(version.major), _number(version.minor)
    if is_wildcard(version.minor):
        return Version(major=major + 1, minor=0, patch=0)
    return Version(major=major, minor=minor + 1, patch=0)


def caret_maximum_for(version: PartialVersion) -> Version:
    """Lowest version that would be a breaking change from ``version``.

    The left-most non-zero component is the one allowed to stay fixed:
    ``^1.2.3`` stops at ``2.0.0``, ``^0.2.3`` at ``0.3.0`` and ``^0.0.3`` at
    ``0.0.4``.
    """
    validate(version)
    minor_wildcard = is_wildcard(version.minor)
    patch_wildcard = is_wildcard(version.patch)
    major, minor, patch = _number(version.major), _number(version.minor), _number(version.patch)

    if major == minor == patch == 0 and minor_wildcard:
        # ^0.x := >=0.0.0 <1.0.0
        major = 1
    elif major == minor == patch == 0 and patch_wildcard:
        # ^0.0.x := >=0.0.0 <0.1.0
        minor, patch = 1, 0
    elif major > 0:
        # ^1.2.3 := >=1.2.3 <2.0.0
        major, minor, patch = major + 1, 0, 0
    elif minor == 0:
        # ^0.0.3 := >=0.0.3 <0.0.4
        patch += 1
    else:
        # ^0.2.3 := >=0.2.3 <0.3.0, ^0.2.x := >=0.2.0 <0.3.0
        minor, patch = minor + 1, 0
    return Version(major=major, minor=minor, patch=patch)


def prerelease_floor(version: Version, include_prerelease: bool) -> Version:
    """Lowest pre-release of version's triple (``X.Y.Z-0``) when pre-releases are included.

    Applied only to bounds derived from partial versions or operators, never
    to bounds written out in full by the user.
    """
    if not include_prerelease or version.prerelease:
        return version
    return Version(major=version.major, minor=version.minor, patch=version.patch, prerelease=("0",))


def _lower_for(version: PartialVersion, include_prerelease: bool) -> Version:
    """minimum_for, floored to ``-0`` when the version is partial."""
    lower = minimum_for(version)
    if is_exact(version):
        return lower
    return prerelease_floor(lower, include_prerelease)


def _equal_range(version: PartialVersion, include_prerelease: bool = False) -> VersionRange:
    if is_exact(version):
        exact = minimum_for(version)
        return VersionRange(min=exact, max=exact)
    return VersionRange(
        min=_lower_for(version, include_prerelease),
        max=prerelease_floor(maximum_for(version), include_prerelease),
        max_inclusive=False,
    )


def _greater_than_range(version: PartialVersion, include_prerelease: bool = False) -> VersionRange:
    if is_exact(version):
        return VersionRange(min=minimum_for(version), max=MAX_VERSION, min_inclusive=False)
    # >1.2 := >=1.3.0
    return VersionRange(min=prerelease_floor(maximum_for(version), include_prerelease), max=MAX_VERSION)


def _less_than_range(version: PartialVersion, include_prerelease: bool = False) -> VersionRange:
    return VersionRange(min=MIN_VERSION, max=_lower_for(version, include_prerelease), max_inclusive=False)


def _greater_than_equal_range(version: PartialVersion, include_prerelease: bool = False) -> VersionRange:
    return VersionRange(min=_lower_for(version, include_prerelease), max=MAX_VERSION)


def _less_than_equal_range(version: PartialVersion, include_prerelease: bool = False) -> VersionRange:
    if is_exact(version):
        return VersionRange(min=MIN_VERSION, max=minimum_for(version))
    # <=1.2 := <1.3.0
    return VersionRange(
        min=MIN_VERSION,
        max=prerelease_floor(maximum_for(version), include_prerelease),
        max_inclusive=False,
    )


def _tilde_range(version: PartialVersion, include_prerelease: bool = False) -> VersionRange:
    return VersionRange(
        min=_lower_for(version, include_prerelease),
        max=prerelease_floor(tilde_maximum_for(version), include_prerelease),
        max_inclusive=False,
    )


def _caret_range(version: PartialVersion, include_prerelease: bool = False) -> VersionRange:
    return VersionRange(
        min=_lower_for(version, include_prerelease),
        max=prerelease_floor(caret_maximum_for(version), include_prerelease),
        max_inclusive=False,
    )


RANGE_TRANSLATORS: Dict[Operator, Callable[[PartialVersion, bool], VersionRange]] = {
    Operator.EQ: _equal_range,
    Operator.GT: _greater_than_range,
    Operator.LT: _less_than_range,
    Operator.GTEQ: _greater_than_equal_range,
    Operator.LTEQ: _less_than_equal_range,
    Operator.TILDE: _tilde_range,
    Operator.CARET: _caret_range,
}


def range_for(operator: Optional[Operator], version: PartialVersion, include_prerelease: bool = False) -> VersionRange:
    """Translate an operator clause into its range.

    Args:
        operator: Clause operator; None means EQ.
        version: Parsed version of the clause.
        include_prerelease: Extend derived bounds down to ``-0`` so that
            pre-releases at the bottom of a band match and pre-releases of
            the excluded upper version do not (``^1.2.3`` := ``<2.0.0-0``).

    Returns:
        VersionRange for the clause. A wildcard major (``*``) matches every
        version, or none for the strict operators.
    """
    operator = operator or Operator.EQ
    if is_wildcard(version.major):
        validate(version)
        if operator in (Operator.GT, Operator.LT):
            return EMPTY_RANGE
        if include_prerelease:
            return VersionRange(min=prerelease_floor(MIN_VERSION, True), max=MAX_VERSION)
        return ANY_RANGE
    return RANGE_TRANSLATORS[operator](version, include_prerelease)


def dash_range(node: DashClauseNode, include_prerelease: bool = False) -> VersionRange:
    """Translate ``low - high`` into a range.

    The low end is inclusive. An exact high end is inclusive; a partial
    one extends to the top of its band (``1.2.3 - 2.3`` := ``<2.4.0``).
    """
    low, high = node.low, node.high
    if is_wildcard(low.major):
        validate(low)
        lower = prerelease_floor(MIN_VERSION, include_prerelease)
    else:
        lower = _lower_for(low, include_prerelease)

    if is_wildcard(high.major):
        validate(high)
        return VersionRange(min=lower, max=MAX_VERSION)
    if is_exact(high):
        return VersionRange(min=lower, max=minimum_for(high))
    return VersionRange(
        min=lower,
        max=prerelease_floor(maximum_for(high), include_prerelease),
        max_inclusive=False,
    )
