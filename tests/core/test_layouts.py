"""
Unit Tests for CollageLayout

Tests layout metadata, canvas partitions and name resolution.
"""

import pytest

from swoosh_toolkit.core.models import CollageLayout


def _boxes(layout, width=600, height=600, **kwargs):
    return [r.box for r in layout.slot_rects(width, height, **kwargs)]


class TestLayoutMetadata:
    """Tests for labels and required counts."""

    @pytest.mark.parametrize(
        "layout,label,count",
        [
            (CollageLayout.GRID_2X2, "Grid", 4),
            (CollageLayout.VERTICAL_SPLIT, "Vertical", 2),
            (CollageLayout.HORIZONTAL_SPLIT, "Horizontal", 2),
            (CollageLayout.MAIN_WITH_SIDE, "Main + Side", 3),
        ],
    )
    def test_layout_carries_label_and_required_count(self, layout, label, count):
        assert layout.label == label
        assert layout.required_count == count
        assert list(layout.used_slots) == list(range(count))
        assert str(layout) == label

    def test_layout_set_is_closed(self):
        assert len(list(CollageLayout)) == 4


class TestSlotRects:
    """Tests for canvas partitions."""

    def test_grid_is_row_major_quadrants(self):
        assert _boxes(CollageLayout.GRID_2X2) == [
            (0, 0, 300, 300),
            (300, 0, 600, 300),
            (0, 300, 300, 600),
            (300, 300, 600, 600),
        ]

    def test_vertical_split_is_left_and_right_halves(self):
        assert _boxes(CollageLayout.VERTICAL_SPLIT) == [(0, 0, 300, 600), (300, 0, 600, 600)]

    def test_horizontal_split_is_top_and_bottom_halves(self):
        assert _boxes(CollageLayout.HORIZONTAL_SPLIT) == [(0, 0, 600, 300), (0, 300, 600, 600)]

    def test_main_with_side_uses_seventy_percent_main_column(self):
        assert _boxes(CollageLayout.MAIN_WITH_SIDE) == [
            (0, 0, 420, 600),
            (420, 0, 600, 300),
            (420, 300, 600, 600),
        ]

    def test_main_with_side_respects_custom_fraction(self):
        rects = CollageLayout.MAIN_WITH_SIDE.slot_rects(600, 600, main_fraction=0.5)
        assert rects[0].box == (0, 0, 300, 600)

    @pytest.mark.parametrize("layout", list(CollageLayout))
    def test_rects_tile_odd_canvas_exactly(self, layout):
        rects = layout.slot_rects(601, 599)
        assert sum(r.width * r.height for r in rects) == 601 * 599
        for i, a in enumerate(rects):
            for b in rects[i + 1:]:
                assert not a.overlaps(b)

    def test_slot_rects_when_canvas_too_small_then_raises_error(self):
        with pytest.raises(ValueError, match="too small"):
            CollageLayout.GRID_2X2.slot_rects(1, 600)

    def test_slot_rects_when_fraction_out_of_range_then_raises_error(self):
        with pytest.raises(ValueError, match="main_fraction"):
            CollageLayout.MAIN_WITH_SIDE.slot_rects(600, 600, main_fraction=1.0)


class TestFromName:
    """Tests for resolving layouts from text."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("grid", CollageLayout.GRID_2X2),
            ("GRID_2X2", CollageLayout.GRID_2X2),
            ("vertical", CollageLayout.VERTICAL_SPLIT),
            ("horizontal-split", CollageLayout.HORIZONTAL_SPLIT),
            ("Main + Side", CollageLayout.MAIN_WITH_SIDE),
            ("main_with_side", CollageLayout.MAIN_WITH_SIDE),
        ],
    )
    def test_from_name_resolves_names_and_labels(self, text, expected):
        assert CollageLayout.from_name(text) is expected

    def test_from_name_when_member_then_returns_it(self):
        assert CollageLayout.from_name(CollageLayout.GRID_2X2) is CollageLayout.GRID_2X2

    def test_from_name_when_unknown_then_raises_error(self):
        with pytest.raises(ValueError, match="Unknown collage layout"):
            CollageLayout.from_name("mosaic")


class TestDrawsPartial:

    def test_only_grid_draws_partially_filled(self):
        assert CollageLayout.GRID_2X2.draws_partial
        assert not CollageLayout.VERTICAL_SPLIT.draws_partial
        assert not CollageLayout.HORIZONTAL_SPLIT.draws_partial
        assert not CollageLayout.MAIN_WITH_SIDE.draws_partial
