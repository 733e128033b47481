"""
Tests for collection encoding (core/collection.py)
"""

import pytest

from dynamodb_codec.core.collection import encode_collection, validate_number_members
from dynamodb_codec.core.scalar import encode_binary
from dynamodb_codec.exceptions import EncodingError


class TestEncodeCollection:
    """Test member list construction."""

    def test_empty_strings_are_dropped(self):
        assert encode_collection(["a", "", "b"]) == ["a", "b"]

    def test_duplicates_keep_first_occurrence(self):
        assert encode_collection(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]

    def test_numbers_deduplicate_on_encoding(self):
        assert encode_collection([1, 2, 1.0, 3]) == ["1", "2", "3"]

    def test_none_elements_are_dropped(self):
        assert encode_collection([None, "x", None]) == ["x"]

    def test_empty_result_is_not_an_error(self):
        assert encode_collection(["", None]) == []
        assert encode_collection([]) == []

    def test_sets_are_sorted(self):
        assert encode_collection({"pear", "apple", "fig"}) == ["apple", "fig", "pear"]
        assert encode_collection(frozenset({"b", "a"})) == ["a", "b"]

    def test_tuples_keep_order(self):
        assert encode_collection(("z", "y", "x")) == ["z", "y", "x"]

    def test_custom_element_encoder(self):
        assert encode_collection(["hi", b"hi", ""], encode_binary) == ["aGk="]

    def test_element_encoding_errors_propagate(self):
        with pytest.raises(EncodingError):
            encode_collection([1.0, float("nan")])


class TestValidateNumberMembers:
    """Test NS member validation."""

    def test_numeric_members_pass(self):
        members = ["1", "-2.5", "3E+40", "1.5E-10", "0"]
        assert validate_number_members(members) == members

    def test_non_numeric_member_raises(self):
        with pytest.raises(EncodingError, match="not numeric"):
            validate_number_members(["1", "two"])
