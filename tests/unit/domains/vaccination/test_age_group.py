"""
Tests for AgeGroupRule.

Covers the label grammar and permissive fallbacks.
"""

import pytest

from vaxplan.domains.vaccination.domain.value_objects import AgeGroupRule


@pytest.mark.unit
class TestAgeGroupRule:
    """Tests for AgeGroupRule.matches()."""

    def test_birth_plus_matches_every_age(self):
        """Should match any age for Birth+."""
        rule = AgeGroupRule("Birth+")
        assert all(rule.matches(age) for age in (0, 1, 45, 120))

    def test_minimum_age_rule(self):
        """Should apply N+ as an inclusive lower bound."""
        rule = AgeGroupRule("65+ years")

        assert rule.matches(65) is True
        assert rule.matches(80) is True
        assert rule.matches(64) is False

    def test_minimum_age_ignores_unit_text(self):
        """Should read '9+ months' as a bound of 9 whole years."""
        rule = AgeGroupRule("9+ months")

        assert rule.matches(9) is True
        assert rule.matches(8) is False

    def test_range_rule_is_inclusive(self):
        """Should match both ends of an N-M range."""
        rule = AgeGroupRule("11-12 years")

        assert rule.matches(11) is True
        assert rule.matches(12) is True
        assert rule.matches(10) is False
        assert rule.matches(13) is False

    def test_range_rule_with_trailing_qualifier(self):
        """Should parse the upper bound from '64 years (high' in '2-64 years (high-risk)'."""
        rule = AgeGroupRule("2-64 years (high-risk)")

        assert rule.matches(2) is True
        assert rule.matches(64) is True
        assert rule.matches(1) is False
        assert rule.matches(65) is False

    @pytest.mark.parametrize("label", ["16 years (booster)", "Adults", "+ years", "a-b years"])
    def test_unparseable_rules_are_permissive(self, label):
        """Should match any age when the label cannot be read."""
        rule = AgeGroupRule(label)
        assert rule.matches(0) is True
        assert rule.matches(99) is True

    def test_widening_a_range_never_excludes(self):
        """Should keep every matching age matching when the range widens."""
        narrow = AgeGroupRule("18-30 years")
        wide = AgeGroupRule("10-40 years")

        for age in range(0, 101):
            if narrow.matches(age):
                assert wide.matches(age)

    def test_lowering_a_minimum_never_excludes(self):
        """Should keep every matching age matching when the minimum drops."""
        strict = AgeGroupRule("65+ years")
        relaxed = AgeGroupRule("50+ years")

        for age in range(0, 101):
            if strict.matches(age):
                assert relaxed.matches(age)

    def test_str_returns_label(self):
        """Should render as the original label."""
        assert str(AgeGroupRule("12+ months")) == "12+ months"
