"""
Tests for overlay layer construction.
"""

import pytest
import numpy as np

from filtergram.processing.filters.models import ColorStop, GradientFill, GradientSpec, SolidFill
from filtergram.processing.filters.overlays import OverlayBuilder


class TestOverlayBuilder:
    """Test solid and gradient overlay buffers."""

    def test_solid_fill(self):
        layer = OverlayBuilder.build(12, 8, SolidFill((243, 106, 188)))
        assert layer.shape == (8, 12, 4)
        assert layer.dtype == np.float32
        np.testing.assert_allclose(layer[3, 5, :3], np.array([243, 106, 188]) / 255.0, atol=1e-6)
        np.testing.assert_array_equal(layer[..., 3], 1.0)

    def test_opacity_scales_alpha(self):
        layer = OverlayBuilder.build(12, 8, SolidFill((0, 0, 0)), 30)
        np.testing.assert_allclose(layer[..., 3], 0.3, atol=1e-6)

    def test_zero_opacity(self):
        layer = OverlayBuilder.build(12, 8, SolidFill((255, 255, 255)), 0)
        np.testing.assert_array_equal(layer[..., 3], 0.0)

    def test_gradient_alpha_is_multiplied(self):
        spec = GradientSpec.linear(ColorStop((255, 0, 0), 0.0, 0.4), ColorStop((255, 0, 0), 1.0, 0.4))
        layer = OverlayBuilder.build(10, 4, GradientFill(spec), 50)
        np.testing.assert_allclose(layer[..., 3], 0.2, atol=1e-6)

    def test_gradient_matches_image_size(self):
        spec = GradientSpec.radial(ColorStop((255, 255, 255), 0.0), ColorStop((0, 0, 0), 1.0))
        layer = OverlayBuilder.build(33, 17, GradientFill(spec))
        assert layer.shape == (17, 33, 4)

    @pytest.mark.parametrize("opacity", [-1, 100.5])
    def test_opacity_out_of_range(self, opacity):
        with pytest.raises(ValueError):
            OverlayBuilder.build(4, 4, SolidFill((0, 0, 0)), opacity)

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            OverlayBuilder.build(4, 0, SolidFill((0, 0, 0)))

    def test_unsupported_fill(self):
        with pytest.raises(ValueError):
            OverlayBuilder.build(4, 4, "red")
