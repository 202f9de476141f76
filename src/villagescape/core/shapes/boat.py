"""
どこで: `src/villagescape/core/shapes/boat.py`。
何を: ボート（船体・船室・マスト・帆・甲板線）と、その水面反射を生成する。
なぜ: ボートはローカル座標で組み、位置や鏡映はシーン合成側の行列で与える。
"""

from __future__ import annotations

from villagescape.core.draw_command import (
    DrawCommand,
    FillPolygon,
    LineSegments,
    PointSet,
    rgba,
)
from villagescape.core.raster import dda_line

HULL_COLOR = rgba(0.55, 0.27, 0.07)
CABIN_COLOR = rgba(0.8, 0.1, 0.1)
MAST_COLOR = rgba(0.35, 0.2, 0.1)
SAIL_COLOR = rgba(1.0, 1.0, 1.0)
DECK_COLOR = rgba(0.0, 0.0, 0.0)
REFLECTION_ALPHA = 0.4

_HULL = [(-60, 40), (60, 40), (40, 20), (-40, 20)]


def boat() -> list[DrawCommand]:
    """ローカル座標（船体中央 x=0、喫水 y=20）のボートを返す。"""
    return [
        FillPolygon(vertices=_HULL, color=HULL_COLOR),
        FillPolygon(vertices=[(-20, 50), (20, 50), (20, 75), (-20, 75)], color=CABIN_COLOR),
        LineSegments(vertices=[(0, 75), (0, 100)], color=MAST_COLOR),
        FillPolygon(vertices=[(0, 100), (40, 80), (0, 60)], color=SAIL_COLOR),
        PointSet(points=dda_line(-60, 40, 60, 40), color=DECK_COLOR),
    ]


def boat_reflection() -> list[DrawCommand]:
    """反射用の半透明な船体を返す（船室・マスト・帆は含めない）。"""
    r, g, b, _ = HULL_COLOR
    return [FillPolygon(vertices=_HULL, color=rgba(r, g, b, REFLECTION_ALPHA))]
