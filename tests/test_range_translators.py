"""Tests for clause-to-range translation."""

import pytest
from semantic_version import Version

from versioning.clauses import AndClause, OrClause, RangeClause
from versioning.errors import InvalidRequirementFormatError
from versioning.models import (
    ANY_RANGE,
    EMPTY_RANGE,
    MAX_VERSION,
    MIN_VERSION,
    DashClauseNode,
    Operator,
    PartialVersion,
    VersionRange,
)
from versioning.translators import (
    caret_maximum_for,
    dash_range,
    is_wildcard,
    maximum_for,
    minimum_for,
    prerelease_floor,
    range_for,
    tilde_maximum_for,
)


class TestOperator:
    """Operator symbol resolution."""

    @pytest.mark.parametrize("symbol,expected", [
        ("=", Operator.EQ),
        (">", Operator.GT),
        ("<", Operator.LT),
        (">=", Operator.GTEQ),
        ("<=", Operator.LTEQ),
        ("~", Operator.TILDE),
        ("^", Operator.CARET),
    ])
    def test_known_symbols(self, symbol, expected):
        assert Operator.from_symbol(symbol) is expected

    @pytest.mark.parametrize("symbol", [None, "", "  "])
    def test_absent_symbol(self, symbol):
        assert Operator.from_symbol(symbol) is None

    @pytest.mark.parametrize("symbol", ["==", "=>", "~>", "!"])
    def test_unknown_symbol(self, symbol):
        with pytest.raises(InvalidRequirementFormatError) as exc_info:
            Operator.from_symbol(symbol)
        assert exc_info.value.requirement == symbol


class TestWildcards:
    """Wildcard detection and bound derivation."""

    @pytest.mark.parametrize("value", [None, "", " ", "x", "X", "*"])
    def test_wildcards(self, value):
        assert is_wildcard(value)

    @pytest.mark.parametrize("value", ["0", "12"])
    def test_not_wildcards(self, value):
        assert not is_wildcard(value)

    def test_minimum_drops_qualifiers_only_for_partials(self):
        exact = PartialVersion("1", "2", "3", prerelease=("beta", "1"), build=("b7",))
        assert minimum_for(exact).prerelease == ("beta", "1")
        assert minimum_for(PartialVersion("1", "x")) == Version("1.0.0")

    @pytest.mark.parametrize("version,expected", [
        (PartialVersion("1"), "2.0.0"),
        (PartialVersion("1", "x", "x"), "2.0.0"),
        (PartialVersion("1", "2"), "1.3.0"),
        (PartialVersion("1", "2", "*"), "1.3.0"),
        (PartialVersion("1", "2", "3"), "1.2.3"),
    ])
    def test_maximum_for(self, version, expected):
        assert maximum_for(version) == Version(expected)

    @pytest.mark.parametrize("version", [
        PartialVersion("1", "x", "3"),
        PartialVersion("1", "2", prerelease=("beta",)),
        PartialVersion("1", build=("b1",)),
    ])
    def test_invalid_partials(self, version):
        with pytest.raises(InvalidRequirementFormatError):
            minimum_for(version)
        with pytest.raises(InvalidRequirementFormatError):
            maximum_for(version)

    @pytest.mark.parametrize("version,expected", [
        (PartialVersion("1", "2", "3"), "1.3.0"),
        (PartialVersion("1", "2"), "1.3.0"),
        (PartialVersion("1"), "2.0.0"),
        (PartialVersion("0", "0", "1"), "0.1.0"),
    ])
    def test_tilde_maximum(self, version, expected):
        assert tilde_maximum_for(version) == Version(expected)

    @pytest.mark.parametrize("version,expected", [
        (PartialVersion("0", "x"), "1.0.0"),
        (PartialVersion("0", "0"), "0.1.0"),
        (PartialVersion("0", "0", "x"), "0.1.0"),
        (PartialVersion("1", "2", "3"), "2.0.0"),
        (PartialVersion("1", "x"), "2.0.0"),
        (PartialVersion("2", "3", "4", prerelease=("rc",)), "3.0.0"),
        (PartialVersion("0", "0", "3"), "0.0.4"),
        (PartialVersion("0", "2", "3"), "0.3.0"),
        (PartialVersion("0", "2", "x"), "0.3.0"),
    ])
    def test_caret_maximum(self, version, expected):
        assert caret_maximum_for(version) == Version(expected)


class TestRangeFor:
    """Per-operator ranges."""

    def test_equal_exact_is_closed(self):
        exact = Version("1.2.3")
        assert range_for(None, PartialVersion("1", "2", "3")) == VersionRange(exact, exact, True, True)

    def test_equal_partial_is_half_open(self):
        assert range_for(Operator.EQ, PartialVersion("1", "2")) == VersionRange(
            Version("1.2.0"), Version("1.3.0"), True, False
        )

    def test_strict_bounds(self):
        assert range_for(Operator.GT, PartialVersion("1", "2", "3")) == VersionRange(
            Version("1.2.3"), MAX_VERSION, False, True
        )
        assert range_for(Operator.LT, PartialVersion("1", "2", "3")) == VersionRange(
            MIN_VERSION, Version("1.2.3"), True, False
        )

    def test_inclusive_bounds(self):
        assert range_for(Operator.GTEQ, PartialVersion("1", "2", "3")) == VersionRange(
            Version("1.2.3"), MAX_VERSION, True, True
        )
        assert range_for(Operator.LTEQ, PartialVersion("1", "2", "3")) == VersionRange(
            MIN_VERSION, Version("1.2.3"), True, True
        )

    def test_tilde_and_caret(self):
        assert range_for(Operator.TILDE, PartialVersion("1", "2", "3")) == VersionRange(
            Version("1.2.3"), Version("1.3.0"), True, False
        )
        assert range_for(Operator.CARET, PartialVersion("1", "2", "3")) == VersionRange(
            Version("1.2.3"), Version("2.0.0"), True, False
        )

    @pytest.mark.parametrize("operator,expected", [
        (None, ANY_RANGE),
        (Operator.GTEQ, ANY_RANGE),
        (Operator.CARET, ANY_RANGE),
        (Operator.GT, EMPTY_RANGE),
        (Operator.LT, EMPTY_RANGE),
    ])
    def test_wildcard_major(self, operator, expected):
        assert range_for(operator, PartialVersion("*")) == expected

    def test_empty_range_contains_nothing(self):
        assert not EMPTY_RANGE.contains(Version("1.0.0"))
        assert not EMPTY_RANGE.contains(MIN_VERSION)

    def test_dash_range(self):
        node = DashClauseNode(low=PartialVersion("1", "2", "3"), high=PartialVersion("2", "3", "4"))
        assert dash_range(node) == VersionRange(Version("1.2.3"), Version("2.3.4"), True, True)

    def test_dash_range_partial_high(self):
        node = DashClauseNode(low=PartialVersion("1", "2"), high=PartialVersion("2"))
        assert dash_range(node) == VersionRange(Version("1.2.0"), Version("3.0.0"), True, False)

    def test_dash_range_wildcard_ends(self):
        node = DashClauseNode(low=PartialVersion("*"), high=PartialVersion("x"))
        assert dash_range(node) == ANY_RANGE

    def test_prerelease_floor(self):
        assert prerelease_floor(Version("2.0.0"), True) == Version("2.0.0-0")
        assert prerelease_floor(Version("2.0.0"), False) == Version("2.0.0")
        assert prerelease_floor(Version("2.0.0-rc.1"), True) == Version("2.0.0-rc.1")

    def test_include_prerelease_floors_derived_bounds(self):
        caret = range_for(Operator.CARET, PartialVersion("1", "2", "3"), True)
        assert caret == VersionRange(Version("1.2.3"), Version("2.0.0-0"), True, False)
        band = range_for(None, PartialVersion("1", "x"), True)
        assert band == VersionRange(Version("1.0.0-0"), Version("2.0.0-0"), True, False)
        explicit = range_for(Operator.LT, PartialVersion("2", "0", "0"), True)
        assert explicit == VersionRange(MIN_VERSION, Version("2.0.0"), True, False)

    def test_include_prerelease_dash_range(self):
        node = DashClauseNode(low=PartialVersion("1", "2"), high=PartialVersion("2", "3"))
        assert dash_range(node, True) == VersionRange(Version("1.2.0-0"), Version("2.4.0-0"), True, False)

    def test_unbounded_max_has_no_ceiling(self):
        beyond = Version(major=MAX_VERSION.major + 1, minor=0, patch=0)
        assert ANY_RANGE.contains(beyond)
        assert range_for(Operator.GTEQ, PartialVersion("1", "0", "0")).contains(beyond)


class TestClauses:
    """Combinator evaluation."""

    def test_empty_and_is_vacuously_true(self):
        assert AndClause().is_satisfied_by(Version("1.0.0"))

    def test_empty_or_is_false(self):
        assert not OrClause().is_satisfied_by(Version("1.0.0"))

    def test_and_requires_all(self):
        low = RangeClause(range_for(Operator.GTEQ, PartialVersion("1", "0", "0")), Operator.GTEQ)
        high = RangeClause(range_for(Operator.LT, PartialVersion("2", "0", "0")), Operator.LT)
        clause = AndClause((low, high))
        assert clause.is_satisfied_by(Version("1.5.0"))
        assert not clause.is_satisfied_by(Version("2.0.0"))

    def test_or_requires_any(self):
        one = AndClause((RangeClause(range_for(None, PartialVersion("1")), Operator.EQ),))
        three = AndClause((RangeClause(range_for(None, PartialVersion("3")), Operator.EQ),))
        clause = OrClause((one, three))
        assert clause.is_satisfied_by(Version("3.1.0"))
        assert not clause.is_satisfied_by(Version("2.1.0"))

    def test_caret_leaf_restricts_prereleases(self):
        leaf = RangeClause(range_for(Operator.CARET, PartialVersion("1", "2", "3", ("beta", "2"))), Operator.CARET)
        assert leaf.is_satisfied_by(Version("1.2.3-beta.4"))
        assert not leaf.is_satisfied_by(Version("1.2.4-beta.2"))

    def test_str(self):
        leaf = RangeClause(range_for(Operator.CARET, PartialVersion("1", "2", "3")), Operator.CARET)
        assert str(leaf) == "CARET[1.2.3, 2.0.0)"
        assert str(OrClause((AndClause(),))) == "*"
