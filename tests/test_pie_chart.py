"""Tests for chart composition and SVG rendering."""

import pytest

from svgpie.compute.core.types import DataItem, PatternSpec
from svgpie.compute.expansion import ExpansionStateMachine
from svgpie.config import ChartConfig
from svgpie.errors import MarginOverflow
from svgpie.render.pie_chart import ChartComposer, PieChartRenderer
from svgpie.render.textures import decode_pattern_href


def compose(items, state=None, **config):
    return ChartComposer(ChartConfig(**config)).compose(items, state)


def render(items, state=None, **config):
    cfg = ChartConfig(**config)
    return PieChartRenderer(cfg).render(ChartComposer(cfg).compose(items, state))


class TestChartComposer:
    """Test layout decisions."""

    def test_single_item_full_circle(self):
        """One item renders as a circle of radius view_box_size / 2."""
        chart = compose([DataItem("red", 10)])

        assert chart.view_box == "0 0 100 100"
        assert chart.single
        shape = chart.slices[0].shape
        assert shape.kind == "circle"
        assert shape.r == 50

    def test_single_visible_item_among_excluded(self):
        """Zero/negative items do not prevent the full-circle path."""
        chart = compose([DataItem("a", 0), DataItem("b", 7), DataItem("c", -2)])

        assert len(chart.slices) == 1
        assert chart.slices[0].shape.kind == "circle"
        assert chart.slices[0].item.color == "b"
        assert chart.slices[0].index == 0

    def test_no_positive_values_renders_nothing(self):
        assert compose([DataItem("a", 0), DataItem("b", -1)]) is None
        assert compose([]) is None

    def test_filtering_preserves_order_and_reindexes(self):
        chart = compose([DataItem("a", 1), DataItem("x", 0), DataItem("b", 2), DataItem("c", 3)])

        assert [s.item.color for s in chart.slices] == ["a", "b", "c"]
        assert [s.index for s in chart.slices] == [0, 1, 2]

    def test_two_items_half_each(self):
        chart = compose([DataItem("a", 1), DataItem("b", 1)])

        assert chart.slices[0].shape.d == "M 50,50 L 100,50 A 50,50 0 0,1 0,50 Z"
        assert chart.slices[1].shape.d == "M 50,50 L 0,50 A 50,50 0 0,1 100,50 Z"

    def test_offset_zero_without_expansion(self):
        chart = compose([DataItem("a", 1), DataItem("b", 1)])

        assert chart.offset == 0
        assert chart.size == 100

    def test_offset_reserved_for_hover(self):
        """expand_on_hover widens the canvas even before any hover."""
        chart = compose([DataItem("a", 1), DataItem("b", 1)], expand_on_hover=True, expand_size=5)

        assert chart.offset == 5
        assert chart.view_box == "0 0 110 110"
        assert all(not s.expanded for s in chart.slices)

    def test_static_expanded_item(self):
        chart = compose([DataItem("a", 1), DataItem("b", 1, expanded=True)])

        assert chart.offset == 3
        assert chart.slices[1].expanded
        assert chart.slices[1].radius == 53
        assert chart.slices[0].radius == 50

    def test_static_expanded_single_item(self):
        chart = compose([DataItem("a", 1, expanded=True)])

        assert chart.slices[0].shape.r == 53
        assert chart.view_box == "0 0 106 106"

    def test_excluded_static_expanded_does_not_widen(self):
        chart = compose([DataItem("a", 1), DataItem("b", 0, expanded=True), DataItem("c", 1)])

        assert chart.offset == 0

    def test_controlled_index_expands_slice(self):
        """A controlled index enlarges the slice but not the canvas."""
        state = ExpansionStateMachine(expanded_index=1)
        chart = compose([DataItem("a", 1), DataItem("b", 1)], state, expanded_index=1)

        assert chart.slices[1].expanded
        assert chart.slices[1].radius == 53
        assert chart.offset == 0
        assert chart.view_box == "0 0 100 100"

    def test_controlled_index_with_hover_reserves_offset(self):
        chart = compose(
            [DataItem("a", 1), DataItem("b", 1)], expanded_index=0, expand_on_hover=True
        )

        assert chart.slices[0].expanded
        assert chart.offset == 3

    def test_default_state_follows_config(self):
        chart = compose([DataItem("a", 1), DataItem("b", 1)], expanded_index=0)

        assert chart.slices[0].expanded

    def test_margin_overflow_propagates(self):
        with pytest.raises(MarginOverflow):
            compose([DataItem("a", 1), DataItem("b", 1)], angle_margin=180)

    def test_duplicate_pattern_ids_defined_once(self):
        """Slices sharing a pattern id reuse the first definition."""
        dots = PatternSpec(id="dots", body="<circle cx='5' cy='5' r='2'/>")
        chart = compose(
            [DataItem("red", 1, pattern=dots), DataItem("blue", 2, pattern=dots)],
            use_patterns=True,
        )

        assert [p.id for p in chart.patterns] == ["dots"]
        assert [s.fill for s in chart.slices] == ["url(#dots)", "url(#dots)"]
        assert "fill='red'" in decode_pattern_href(chart.patterns[0].href)

    def test_patterns_per_slice_index(self):
        chart = compose([DataItem("red", 1), DataItem("blue", 1)], use_patterns=True)

        assert [p.id for p in chart.patterns] == ["0", "1"]


class TestPieChartRenderer:
    """Test SVG serialization."""

    def test_render_nothing(self):
        assert PieChartRenderer().render(None) == ""

    def test_single_item_svg(self):
        svg = render([DataItem("red", 10)])

        assert 'viewBox="0 0 100 100"' in svg
        assert '<circle cx="50" cy="50" r="50" fill="red"' in svg
        assert 'transform="translate(0, 0)"' in svg
        assert "<defs>" not in svg

    def test_group_translated_by_offset(self):
        svg = render([DataItem("a", 1), DataItem("b", 2)], expand_on_hover=True, expand_size=4)

        assert 'viewBox="0 0 108 108"' in svg
        assert 'transform="translate(4, 4)"' in svg

    def test_style_passthrough(self):
        svg = render(
            [DataItem("a", 1), DataItem("b", 2)],
            stroke_color="#000",
            stroke_width=2,
            transition_duration="0.3s",
            transition_timing_function="linear",
        )

        assert 'stroke="#000"' in svg
        assert 'stroke-width="2"' in svg
        assert 'stroke-linejoin="round"' in svg
        assert "transition: all 0.3s linear" in svg

    def test_title_and_href(self):
        svg = render([DataItem("a", 1, title="A & B", href="https://example.org/a"), DataItem("b", 1)])

        assert "<title>A &amp; B</title>" in svg
        assert '<a href="https://example.org/a"' in svg
        assert svg.count("<a ") == 1

    def test_patterns_rendered_in_defs(self):
        svg = render([DataItem("red", 1), DataItem("blue", 1)], use_patterns=True)

        assert svg.count("<pattern ") == 2
        assert 'patternUnits="userSpaceOnUse" width="5" height="5"' in svg
        assert 'xlink:href="data:image/svg+xml;base64,' in svg
        assert 'fill="url(#0)"' in svg

    def test_slices_carry_index(self):
        svg = render([DataItem("a", 1), DataItem("x", 0), DataItem("b", 1)])

        assert 'data-index="0"' in svg
        assert 'data-index="1"' in svg
        assert 'data-index="2"' not in svg

    def test_idempotent_output(self):
        items = [DataItem("a", 1, pattern="<rect width='2' height='2'/>"), DataItem("b", 2.5)]

        first = render(items, use_patterns=True, angle_margin=3, start_angle=-90)
        second = render(items, use_patterns=True, angle_margin=3, start_angle=-90)
        assert first == second


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
