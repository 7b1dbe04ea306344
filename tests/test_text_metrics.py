"""
Tests for text measurement.
"""

from datetime import date

import pytest

from contribution_heatmap.grid_geometry import Size
from contribution_heatmap.models import ContributionEntry
from contribution_heatmap.render_heatmap import HeatmapRenderer
from contribution_heatmap.text_metrics import ApproximateTextMeasurer, TextStyle


class FixedMeasurer:
    """Every string measures 10 x 5."""

    def measure(self, text, style, text_scale=1.0):
        return Size(10, 5)


class TestApproximateTextMeasurer:
    """Tests for the character-count estimate."""

    def test_width_scales_with_length_and_size(self):
        measurer = ApproximateTextMeasurer()
        assert measurer.measure("Mon", TextStyle(font_size=11)).width == pytest.approx(19.8)
        assert measurer.measure("Mon", TextStyle(font_size=11)).height == pytest.approx(11)

    def test_text_scale_applies_to_both_axes(self):
        size = ApproximateTextMeasurer().measure("Jan", TextStyle(font_size=12), 2.0)
        assert size.width == pytest.approx(43.2)
        assert size.height == pytest.approx(24)

    def test_empty_text_has_no_width(self):
        assert ApproximateTextMeasurer().measure("", TextStyle()).width == 0

    def test_custom_factors(self):
        measurer = ApproximateTextMeasurer(width_factor=0.5, line_height=1.2)
        size = measurer.measure("ab", TextStyle(font_size=10))
        assert size == Size(10, 12)


class TestInjectedMeasurer:
    """The renderer reserves label space from whatever measurer it is given."""

    def test_label_space_comes_from_measurer(self):
        renderer = HeatmapRenderer(
            [ContributionEntry(date(2024, 1, 1), 1)],
            measurer=FixedMeasurer(),
        )

        geometry = renderer.geometry

        assert geometry.left_label_width == 10 + 8
        assert geometry.top_label_height == 5 + 6
