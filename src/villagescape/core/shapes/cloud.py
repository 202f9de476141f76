"""雲（中点円の輪郭 4 つ）。"""

from __future__ import annotations

from villagescape.core.draw_command import DrawCommand, PointSet, rgba
from villagescape.core.raster import midpoint_circle

CLOUD_COLOR = rgba(1.0, 1.0, 1.0)

# (中心からのオフセット x, y, 半径)
_PUFFS: tuple[tuple[int, int, int], ...] = (
    (0, 0, 22),
    (25, 6, 20),
    (-25, 6, 20),
    (55, 0, 18),
)


def cloud(cx: int, cy: int) -> list[DrawCommand]:
    """(cx, cy) を基準に重なり合う円の輪郭で雲を返す。"""
    return [
        PointSet(points=midpoint_circle(cx + ox, cy + oy, r), color=CLOUD_COLOR)
        for ox, oy, r in _PUFFS
    ]
