"""木（幹 + 三段の三角形の葉）。ローカル座標で組み、平行移動と拡大縮小で配置する。"""

from __future__ import annotations

from villagescape.core.affine import compose, scaling, translation
from villagescape.core.draw_command import (
    DrawCommand,
    FillPolygon,
    rgba,
    transform_commands,
)

TRUNK_COLOR = rgba(0.45, 0.26, 0.07)
FOLIAGE_COLOR = rgba(0.13, 0.55, 0.13)


def _local_tree() -> list[DrawCommand]:
    return [
        FillPolygon(vertices=[(-8, 0), (8, 0), (8, 30), (-8, 30)], color=TRUNK_COLOR),
        FillPolygon(vertices=[(-40, 30), (40, 30), (0, 90)], color=FOLIAGE_COLOR),
        FillPolygon(vertices=[(-30, 50), (30, 50), (0, 110)], color=FOLIAGE_COLOR),
        FillPolygon(vertices=[(-20, 70), (20, 70), (0, 130)], color=FOLIAGE_COLOR),
    ]


def tree(x: int, y: int, scale: float) -> list[DrawCommand]:
    """幹の根元を (x, y) に置き、等方倍率 scale で拡大縮小した木を返す。"""
    placement = compose(translation(x, y), scaling(scale, scale))
    return transform_commands(_local_tree(), placement)
