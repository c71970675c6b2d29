"""Tests for the query shape check."""

import pytest

from howto.common.exceptions import ValidationError
from howto.domains.search.validation import is_valid_query, validate_query


class TestIsValidQuery:
    """Test is_valid_query rules."""

    @pytest.mark.parametrize("query", ["", "  ", "ab", " a ", "hi", "a1", "xy"])
    def test_short_queries_rejected(self, query):
        assert is_valid_query(query) is False

    @pytest.mark.parametrize("query", ["guitar", "a guitar", "x y z", "  cooking  "])
    def test_single_meaningful_word_rejected(self, query):
        assert is_valid_query(query) is False

    @pytest.mark.parametrize("query", [
        "fix a leaky faucet",
        "tie a tie",
        "how to tie a tie",
        "cook rice",
    ])
    def test_meaningful_queries_accepted(self, query):
        assert is_valid_query(query) is True

    def test_non_string_rejected(self):
        assert is_valid_query(None) is False
        assert is_valid_query(42) is False

    def test_tabs_and_newlines_split_words(self):
        assert is_valid_query("bake\ta\ncake") is True


class TestValidateQuery:
    """Test validate_query."""

    def test_returns_trimmed_query(self):
        assert validate_query("  fix a leaky faucet  ") == "fix a leaky faucet"

    def test_missing_query_message(self):
        with pytest.raises(ValidationError, match="Missing search query"):
            validate_query(None)

    def test_too_short_message(self):
        with pytest.raises(ValidationError, match="at least 3 characters"):
            validate_query("ab")

    def test_word_count_message(self):
        with pytest.raises(ValidationError, match="at least 2 words"):
            validate_query("guitar")

    def test_validation_error_maps_to_400(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_query("xy")
        assert exc_info.value.status_code == 400
