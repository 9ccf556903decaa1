"""
Tests for name variant generation.
"""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cpe_candidates.name_variants import (
    generate_all_sub_selections,
    generate_sub_selections,
    normalize_all_separators,
    normalize_separators,
    remove_duplicate_values,
)


class TestNormalizeSeparators:
    """Test hyphen/underscore variant generation."""

    def test_hyphenated_name(self):
        """Test that hyphens are swapped for underscores and removed."""
        assert normalize_separators("a-b") == ["a-b", "a_b", "ab"]

    def test_underscored_name(self):
        """Test that underscores are swapped for hyphens and removed."""
        assert normalize_separators("a_b") == ["a_b", "a-b", "ab"]

    def test_both_separators(self):
        """Test that a name with both separators gets both sets of variants."""
        assert normalize_separators("a-b_c") == ["a-b_c", "a_b_c", "ab_c", "a-b-c", "a-bc"]

    def test_no_separator(self):
        assert normalize_separators("nokogiri") == ["nokogiri"]

    def test_no_deduplication(self):
        """Test that results across fields are concatenated without dedup."""
        assert normalize_all_separators(["a-b", "a_b"]) == ["a-b", "a_b", "ab", "a_b", "a-b", "ab"]

    def test_empty_list(self):
        assert normalize_all_separators([]) == []


class TestSubSelections:
    """Test left-anchored sub-selection expansion."""

    def test_jenkins_plugin_name(self):
        assert generate_sub_selections("jenkins-ci-plugin") == ["jenkins", "jenkins-ci", "jenkins-ci-plugin"]

    def test_prefix_consistent(self):
        assert generate_sub_selections("a-b-c") == ["a", "a-b", "a-b-c"]

    def test_keeps_original_separators(self):
        """Test that each prefix is joined with the separator that followed it."""
        assert generate_sub_selections("a_b-c") == ["a", "a_b", "a_b-c"]

    def test_no_separator(self):
        assert generate_sub_selections("nokogiri") == ["nokogiri"]

    def test_trailing_separator_trimmed(self):
        assert generate_sub_selections("foo-") == ["foo"]

    def test_empty_run_stops_expansion(self):
        """Test that a run with nothing but separators ends the expansion."""
        assert generate_sub_selections("a--b") == ["a"]
        assert generate_sub_selections("-foo") == []

    def test_empty_string(self):
        assert generate_sub_selections("") == []

    def test_all_fields_concatenated_in_order(self):
        assert generate_all_sub_selections(["a-b", "c", "a-b"]) == ["a", "a-b", "c", "a", "a-b"]


class TestRemoveDuplicateValues:
    """Test order-preserving deduplication."""

    def test_keeps_first_occurrence(self):
        assert remove_duplicate_values(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]

    def test_case_sensitive(self):
        assert remove_duplicate_values(["RedCloth", "redcloth"]) == ["RedCloth", "redcloth"]

    def test_empty(self):
        assert remove_duplicate_values([]) == []
