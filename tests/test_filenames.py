"""
Tests for output file naming.
"""

import re

from coupling_visualizer import build_output_filename, sanitize_title


class TestSanitizeTitle:
    """Tests for sanitize_title."""

    def test_accents_are_folded(self):
        # NFKD folds accented letters to their base letter instead of dropping them.
        assert sanitize_title("Café Üser: v1") == "Cafe_User_v1"

    def test_allowed_characters_are_kept(self):
        assert sanitize_title("core-module_2.0") == "core-module_2.0"

    def test_disallowed_characters_are_replaced(self):
        assert sanitize_title("a/b\\c d") == "a_b_c_d"

    def test_non_ascii_without_decomposition_is_dropped(self):
        assert sanitize_title("服务 map") == "map"
        assert sanitize_title("日本") == ""


class TestBuildOutputFilename:
    """Tests for build_output_filename."""

    def test_without_title(self):
        assert build_output_filename(timestamp_ms=123) == "graph_circular_layout_123.svg"

    def test_with_title(self):
        assert build_output_filename("Core", 123) == "graph_circular_layout_Core_123.svg"

    def test_title_that_sanitizes_to_nothing_is_omitted(self):
        assert build_output_filename("日本", 123) == "graph_circular_layout_123.svg"

    def test_defaults_to_current_time(self):
        name = build_output_filename()

        assert re.fullmatch(r"graph_circular_layout_\d{13}\.svg", name)
