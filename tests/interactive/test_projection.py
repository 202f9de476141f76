import numpy as np
import pytest

from villagescape.interactive.gl.utils import build_projection


@pytest.mark.parametrize(
    ("world", "ndc"),
    [
        ((0.0, 0.0), (-1.0, -1.0)),
        ((800.0, 600.0), (1.0, 1.0)),
        ((400.0, 300.0), (0.0, 0.0)),
        ((0.0, 600.0), (-1.0, 1.0)),
    ],
)
def test_build_projection_maps_bottom_left_origin_to_ndc(world, ndc):
    proj = build_projection(800.0, 600.0)
    assert proj.dtype == np.float32

    # ModernGL 用に転置済みなので、列ベクトル表現では転置を戻して掛ける。
    clip = proj.T @ np.array([world[0], world[1], 0.0, 1.0], dtype=np.float32)
    np.testing.assert_allclose(clip[:2], ndc, rtol=0.0, atol=1e-6)
    assert clip[3] == pytest.approx(1.0)
