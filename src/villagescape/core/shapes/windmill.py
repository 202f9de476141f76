"""
どこで: `src/villagescape/core/shapes/windmill.py`。
何を: 塔・ハブ・3 枚の羽根からなる風車を生成する。
なぜ: 羽根だけが回転角に依存するため、回転をハブ中心の行列合成で表現する。
"""

from __future__ import annotations

import numpy as np

from villagescape.core.affine import compose, rotation, translation
from villagescape.core.draw_command import DrawCommand, FillPolygon, rgba

TOWER_COLOR = rgba(0.8, 0.8, 0.8)
HUB_COLOR = rgba(0.3, 0.3, 0.3)
BLADE_COLOR = rgba(0.95, 0.95, 0.95)

TOWER_HEIGHT = 100
HUB_RADIUS = 6.0
BLADE_COUNT = 3

# ハブ中心を原点としたローカル座標。先端側が幅 40 の細長い三角形。
_BLADE = np.array([(6, 0), (140, 20), (140, -20), (6, 0)], dtype=np.float32)


def _hub_vertices(cx: float, cy: float) -> np.ndarray:
    # 30° 刻みの 12 角形で円を近似する。
    angles = np.deg2rad(np.arange(0, 360, 30, dtype=np.float64))
    xs = cx + np.cos(angles) * HUB_RADIUS
    ys = cy + np.sin(angles) * HUB_RADIUS
    return np.stack([xs, ys], axis=1)


def windmill(x: int, y: int, blade_angle: float) -> list[DrawCommand]:
    """塔の根元中心を (x, y) とした風車を返す。

    Parameters
    ----------
    x, y : int
        塔の底辺中央。ハブは (x, y + 100)。
    blade_angle : float
        羽根全体の回転角 [deg]（反時計回り）。

    Returns
    -------
    list[DrawCommand]
        塔 → ハブ → 羽根 3 枚（120° 間隔）の順。
    """
    x, y = int(x), int(y)
    hub_y = y + TOWER_HEIGHT
    commands: list[DrawCommand] = [
        FillPolygon(
            vertices=[(x - 10, y), (x + 10, y), (x + 10, hub_y), (x - 10, hub_y)],
            color=TOWER_COLOR,
        ),
        FillPolygon(vertices=_hub_vertices(x, hub_y), color=HUB_COLOR),
    ]

    hub = compose(translation(x, hub_y), rotation(blade_angle))
    step = 360.0 / BLADE_COUNT
    for i in range(BLADE_COUNT):
        blade = compose(hub, rotation(step * i))
        commands.append(FillPolygon(vertices=_BLADE, color=BLADE_COLOR).transformed(blade))
    return commands
