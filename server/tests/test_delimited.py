"""
Tests for delimited list expansion
"""

from serialsmith.core.delimited import match_delimited_list
from serialsmith.core.models import NormalizePolicy

POLICY = NormalizePolicy()


class TestMatchDelimitedList:
    """Tests for match_delimited_list function."""

    def test_prefix_carry(self):
        """Bare numbers borrow the first item's prefix."""
        assert match_delimited_list("Desk 12, 13 & 14", POLICY) == ["Desk 12", "Desk 13", "Desk 14"]

    def test_non_numeric_items_pass_through(self):
        """Items with text are kept as typed."""
        assert match_delimited_list("Desk 12, Lamp 3, 4", POLICY) == ["Desk 12", "Lamp 3", "Desk 4"]

    def test_no_prefix_in_first_item(self):
        """Without a derivable prefix every item passes through unchanged."""
        assert match_delimited_list("Chair A, Chair B", POLICY) == ["Chair A", "Chair B"]
        assert match_delimited_list("12, 13", POLICY) == ["12", "13"]

    def test_empty_parts_dropped(self):
        """Empty items between delimiters are ignored."""
        assert match_delimited_list("Tag 7,, 8 &", POLICY) == ["Tag 7", "Tag 8"]

    def test_single_item_declined(self):
        """Fewer than two items is not a list."""
        assert match_delimited_list("Desk 12,", POLICY) is None
        assert match_delimited_list(",", POLICY) is None

    def test_no_delimiter_declined(self):
        """Lines without a comma or ampersand are declined."""
        assert match_delimited_list("Desk 12", POLICY) is None

    def test_keyword_line_declined(self):
        """Lines with a serial keyword belong to the serial list matcher."""
        assert match_delimited_list("Server SN: ABC100, 101", POLICY) is None
