"""Tests for extractor module."""

import pytest

from joggl.extractor import extract_ids


class TestExtractIds:
    """Tests for extract_ids."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Fix ABC-12 bug", ["ABC-12"]),
            ("Spans ABC-1 and XYZ-2", ["ABC-1", "XYZ-2"]),
            ("lower case abc-5", ["abc-5"]),
            ("Under_score A_1-3", ["A_1-3"]),
            ("AB-10 is fine", ["AB-10"]),
            ("Unplanned work", []),
            ("", []),
        ],
    )
    def test_matches(self, text, expected):
        assert extract_ids(text) == expected

    def test_zero_number_is_not_a_match(self):
        """A ticket number never starts with zero."""
        assert extract_ids("AB-0") == []
        assert extract_ids("AB-01") == []

    def test_single_letter_key_is_not_a_match(self):
        """The project key needs at least two characters."""
        assert extract_ids("A-1") == []

    def test_match_never_starts_with_digit(self):
        """Leading digits are skipped, the match starts at the first letter."""
        assert extract_ids("9AB-3") == ["AB-3"]
        for match in extract_ids("1X2-5 42-7 B9-9"):
            assert not match[0].isdigit()

    def test_left_to_right_order(self):
        assert extract_ids("ZZ-9 then AA-1") == ["ZZ-9", "AA-1"]

    def test_input_not_modified(self):
        text = "Fix ABC-12"
        extract_ids(text)
        assert text == "Fix ABC-12"

    def test_none_returns_empty(self):
        assert extract_ids(None) == []
