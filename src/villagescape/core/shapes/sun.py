"""太陽（同心円の重ね描きによる近似塗りつぶし）。"""

from __future__ import annotations

from villagescape.core.draw_command import DrawCommand, PointSet, rgba
from villagescape.core.raster import concentric_circles

SUN_COLOR = rgba(1.0, 0.85, 0.0)


def sun(cx: int, cy: int, r: int) -> list[DrawCommand]:
    """半径 r..1 の中点円を重ねた太陽を返す。

    Notes
    -----
    真の塗りつぶしではなく輪郭の重ね描きなので、小半径付近に隙間が残りうる。
    """
    return [PointSet(points=concentric_circles(cx, cy, r), color=SUN_COLOR)]
