"""
Tests for the normalization pipeline
"""

import time

import pytest

from serialsmith.core.config import settings
from serialsmith.core.models import NormalizePolicy
from serialsmith.core.normalize import (
    default_policy,
    matcher_chain,
    normalize,
    normalize_line,
    to_display_text,
    to_records,
)


class TestNormalize:
    """Tests for normalize function."""

    def test_empty_input(self):
        """Empty or whitespace-only input yields no lines."""
        assert normalize("") == []
        assert normalize("  \n\t\n ") == []

    def test_range_expansion(self):
        """'AB-05 to 08' expands to exactly four items."""
        assert normalize("AB-05 to 08") == ["AB-05", "AB-06", "AB-07", "AB-08"]

    def test_reversed_range_kept_verbatim(self):
        """A reversed range is not expanded."""
        assert normalize("AB-08 to 05") == ["AB-08 to 05"]

    def test_serial_prefix_carry(self):
        """Serial list abbreviations expand to full serials."""
        assert normalize("Server SN: ABC100, 101, 102") == [
            "Server SN: ABC100",
            "Server SN: ABC101",
            "Server SN: ABC102",
        ]

    def test_fallback_verbatim(self):
        """Lines no matcher handles come back trimmed."""
        assert normalize("   miscellaneous notes  ") == ["miscellaneous notes"]

    def test_block_separator(self):
        """Two blocks give one separator between them and none at the end."""
        result = normalize("AB-01 to 02\n\n\nDesk 1, 2\n\n")
        assert result == ["AB-01", "AB-02", "", "Desk 1", "Desk 2"]
        assert result.count("") == 1
        assert result[-1] != ""

    def test_block_count_preserved(self):
        """Output holds as many blocks as the input."""
        result = normalize("a\n\nb\n\nc")
        assert result == ["a", "", "b", "", "c"]

    def test_duplicates_collapse(self):
        """Identical lines in a block are expanded once."""
        assert normalize("Rack 1-2\nRack 1-2") == ["Rack 1", "Rack 2"]

    def test_lines_keep_input_order(self):
        """Records follow the order of their source lines."""
        assert normalize("Desk 3, 4\nAB-1 to 2\nnotes") == ["Desk 3", "Desk 4", "AB-1", "AB-2", "notes"]

    @pytest.mark.parametrize(
        "raw",
        [
            ";;;",
            ",",
            "&&",
            "to",
            "-",
            "SN",
            "S#",
            "1-",
            "AB-0 to 99999999",
            "999999999999999999999-999999999999999999999999",
            "Laptop SN: ...",
            "; 5 to 3 ;",
            "A1; " + "9" * 5000,
            "A1 to " + "9" * 5000,
            "Desk 1, " + "9" * 5000,
        ],
    )
    def test_total(self, raw):
        """Odd input never raises and never disappears."""
        result = normalize(raw)
        assert len(result) >= 1
        assert all(line for line in result)

    def test_idempotent(self):
        """Normalizing normalized output changes nothing."""
        raw = (
            "AB-05 to 08\n"
            "Server SN: ABC100, 101, 102\n"
            "Monitor SN: CN0A1, 2, Model P2419H\n"
            "\n"
            "Desk 12, 13 & 14\n"
            "17P-07 to 09; 11\n"
            "miscellaneous notes"
        )
        once = normalize(raw)
        assert normalize(to_display_text(once)) == once

    def test_semicolon_serial_list_keeps_description(self):
        """Semicolon-separated serials each keep the description and keyword."""
        assert normalize("Laptop SN: 5CG123; 5CG124") == [
            "Laptop SN: 5CG123",
            "Laptop SN: 5CG124",
        ]

    def test_semicolon_serial_list_with_abbreviations(self):
        """Abbreviated serials after a semicolon inherit the carried prefix."""
        assert normalize("Dock SN: XK200; XK205; 206") == [
            "Dock SN: XK200",
            "Dock SN: XK205",
            "Dock SN: XK206",
        ]

    @pytest.mark.parametrize(
        "raw",
        [
            "1" * 200000 + "x",
            "AB-" + "1" * 200000 + "x",
            "Rack " + "1 " * 100000 + "x",
            "Desk " + "1" * 200000 + "x, 2",
            "SN: " + "1" * 200000 + "x; 2",
        ],
    )
    def test_long_digit_runs_are_fast(self, raw):
        """Lines with huge digit runs are scanned in linear time."""
        started = time.perf_counter()
        result = normalize(raw)
        assert time.perf_counter() - started < 2.0
        assert len(result) >= 1


class TestMatcherChain:
    """Tests for matcher precedence."""

    def test_default_order(self):
        """Multi-segment runs before range by default."""
        names = [name for name, _ in matcher_chain(NormalizePolicy())]
        assert names == ["multi_segment", "range", "serial_list", "delimited_list"]

    def test_range_first_order(self):
        """multi_segment_first=False swaps the two range matchers."""
        names = [name for name, _ in matcher_chain(NormalizePolicy(multi_segment_first=False))]
        assert names == ["range", "multi_segment", "serial_list", "delimited_list"]

    def test_precedence_changes_result(self):
        """A line both matchers accept expands differently by precedence."""
        line = "AB-01; 03-05"
        assert normalize_line(line, NormalizePolicy()) == ["AB-01", "AB-03", "AB-04", "AB-05"]
        assert normalize_line(line, NormalizePolicy(multi_segment_first=False)) == [
            "AB-01; 03",
            "AB-01; 04",
            "AB-01; 05",
        ]

    def test_range_before_serial_list(self):
        """A keyword line holding a range is range-expanded."""
        assert normalize_line("Switch SN: ABC100 to 102", NormalizePolicy()) == [
            "Switch SN: ABC100",
            "Switch SN: ABC101",
            "Switch SN: ABC102",
        ]

    def test_oversized_range_falls_to_serial_list(self):
        """A range above the limit is left for the serial list matcher."""
        assert normalize_line("Dell SN 1234-5678", NormalizePolicy()) == ["Dell SN 1234-5678"]

    def test_blank_line(self):
        """Blank lines normalize to nothing."""
        assert normalize_line("   ", NormalizePolicy()) == []


class TestPolicyAndOutput:
    """Tests for default policy and caller-side helpers."""

    def test_default_policy_from_settings(self, monkeypatch):
        """Default policy follows settings."""
        monkeypatch.setattr(settings, "DEFAULT_KEYWORD_OCCURRENCE", "last")
        monkeypatch.setattr(settings, "DEFAULT_MAX_RANGE_ITEMS", 50)
        policy = default_policy()
        assert policy.keyword_occurrence == "last"
        assert policy.max_range_items == 50

    def test_to_records_drops_separators(self):
        """Records hold one entry per item."""
        assert to_records(["a", "", "b"]) == ["a", "b"]

    def test_display_text(self):
        """Separators become blank lines."""
        assert to_display_text(["a", "", "b"]) == "a\n\nb"
