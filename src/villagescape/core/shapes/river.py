"""
どこで: `src/villagescape/core/shapes/river.py`。
何を: 川の水面（塗り多角形）と、DDA で点描する両岸の線を生成する。
なぜ: 川岸の縁取りは自前の DDA ラスタライザで描く。
"""

from __future__ import annotations

from villagescape.core.draw_command import DrawCommand, FillPolygon, PointSet, rgba
from villagescape.core.raster import dda_line

WATER_COLOR = rgba(0.07, 0.53, 0.75)
BANK_COLOR = rgba(0.0, 0.3, 0.2)


def river() -> list[DrawCommand]:
    """水面 → 上岸 → 下岸の順に返す。"""
    return [
        FillPolygon(
            vertices=[(0, 160), (800, 130), (800, 0), (0, 0)],
            color=WATER_COLOR,
        ),
        PointSet(points=dda_line(0, 160, 800, 130), color=BANK_COLOR),
        PointSet(points=dda_line(0, 0, 800, 0), color=BANK_COLOR),
    ]
