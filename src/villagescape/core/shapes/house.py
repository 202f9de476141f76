"""
どこで: `src/villagescape/core/shapes/house.py`。
何を: 壁・屋根・屋根の縁（DDA）・扉・窓からなる家を生成する。
なぜ: 家は位置と寸法だけが異なるため、(x, y, w, h) を受ける純粋関数にする。
"""

from __future__ import annotations

from villagescape.core.draw_command import DrawCommand, FillPolygon, PointSet, rgba
from villagescape.core.raster import dda_line

WALL_COLOR = rgba(0.78, 0.6, 0.4)
ROOF_COLOR = rgba(0.55, 0.0, 0.0)
ROOF_EDGE_COLOR = rgba(0.0, 0.0, 0.0)
DOOR_COLOR = rgba(0.35, 0.2, 0.1)
WINDOW_COLOR = rgba(0.2, 0.6, 0.9)

ROOF_OVERHANG = 10


def house(x: int, y: int, w: int, h: int) -> list[DrawCommand]:
    """左下 (x, y)、幅 w、高さ h の壁を持つ家を返す。

    Parameters
    ----------
    x, y : int
        壁の左下角。
    w, h : int
        壁の幅と高さ。屋根の高さは h // 2。

    Returns
    -------
    list[DrawCommand]
        壁 → 屋根 → 屋根の縁 2 本 → 扉 → 窓 の順。
    """
    x, y, w, h = int(x), int(y), int(w), int(h)
    eave_y = y + h
    apex = (x + w // 2, y + h + h // 2)
    left_eave = (x - ROOF_OVERHANG, eave_y)
    right_eave = (x + w + ROOF_OVERHANG, eave_y)

    return [
        FillPolygon(
            vertices=[(x, y), (x + w, y), (x + w, y + h), (x, y + h)],
            color=WALL_COLOR,
        ),
        FillPolygon(vertices=[left_eave, right_eave, apex], color=ROOF_COLOR),
        PointSet(points=dda_line(*left_eave, *apex), color=ROOF_EDGE_COLOR),
        PointSet(points=dda_line(*right_eave, *apex), color=ROOF_EDGE_COLOR),
        FillPolygon(
            vertices=[
                (x + w // 3, y),
                (x + w * 2 // 3, y),
                (x + w * 2 // 3, y + h // 2),
                (x + w // 3, y + h // 2),
            ],
            color=DOOR_COLOR,
        ),
        # 窓は壁の左上に 25x25 の正方形で置く。
        FillPolygon(
            vertices=[
                (x + 10, y + h - 30),
                (x + 10 + 25, y + h - 30),
                (x + 10 + 25, y + h - 5),
                (x + 10, y + h - 5),
            ],
            color=WINDOW_COLOR,
        ),
    ]
