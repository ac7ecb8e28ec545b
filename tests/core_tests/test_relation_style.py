# tests/core_tests/test_relation_style.py

import pytest

from core.relation_style import (
    DEFAULT_RELATION_STYLE,
    RELATION_STYLES,
    color_of,
    extra_attributes_of,
    style_of,
)


class TestRelationStyle:
    """Fixed relation colors and layout hints."""

    @pytest.mark.parametrize(
        "name,color",
        [
            ("rf", "crimson"),
            ("co", "goldenrod"),
            ("fr", "limegreen"),
            ("addr", "blue2"),
            ("data", "darkgreen"),
            ("ctrl", "darkorange2"),
            ("rmw", "firebrick4"),
        ],
    )
    def test_known_relation_colors(self, name, color):
        assert color_of(name) == color

    @pytest.mark.parametrize("name", ["po", "iico", "", "RF", "rf "])
    def test_unknown_relations_are_black(self, name):
        assert color_of(name) == "black"
        assert extra_attributes_of(name) == ""
        assert style_of(name) is DEFAULT_RELATION_STYLE

    def test_only_coherence_constrains_ranking(self):
        assert extra_attributes_of("co") == ",constraint=true"
        others = [name for name in RELATION_STYLES if name != "co"]
        assert all(extra_attributes_of(name) == "" for name in others)

    def test_table_covers_seven_relations(self):
        assert set(RELATION_STYLES) == {"rf", "co", "fr", "addr", "data", "ctrl", "rmw"}
