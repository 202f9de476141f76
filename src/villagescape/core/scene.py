"""
どこで: `src/villagescape/core/scene.py`。
何を: アニメーション状態から 1 フレーム分の描画コマンド列（奥 → 手前）を合成する。
なぜ: 深度テストを使わず、描画順だけで前後関係を表現するため。
"""

from __future__ import annotations

from villagescape.core.affine import compose, scaling, translation
from villagescape.core.animation import AnimationState
from villagescape.core.draw_command import DrawCommand, transform_commands
from villagescape.core.shapes import (
    boat,
    boat_reflection,
    cloud,
    ground,
    hills,
    house,
    river,
    sky,
    sun,
    tree,
    windmill,
)

CANVAS_SIZE = (800, 600)
# 毎フレームのクリア色。空や草地に覆われない隙間だけに見える。
BACKGROUND_COLOR = (0.5, 0.8, 0.95)

SUN = (680, 520, 40)
CLOUDS: tuple[tuple[int, int], ...] = ((120, 520), (260, 560))
HOUSES: tuple[tuple[int, int, int, int], ...] = (
    (70, 180, 110, 90),
    (220, 190, 100, 80),
    (360, 185, 120, 90),
)
TREES: tuple[tuple[int, int, float], ...] = (
    (520, 180, 0.9),
    (620, 170, 0.7),
    (720, 170, 0.8),
)
WINDMILL = (470, 180)
# 反射は船体をわずかに下げ、y 方向に鏡映する。
REFLECTION_OFFSET_Y = 10.0


def compose_scene(state: AnimationState) -> list[DrawCommand]:
    """現在の状態に対する 1 フレーム分の描画コマンドを返す。

    Parameters
    ----------
    state : AnimationState
        読み取りのみ行う。

    Returns
    -------
    list[DrawCommand]
        空 → 太陽 → 雲 → 丘 → 川 → 草地 → 家 → 木 → 風車 → ボート → 反射 の順。
    """
    frame: list[DrawCommand] = []
    frame += sky()
    frame += sun(*SUN)

    clouds: list[DrawCommand] = []
    for cx, cy in CLOUDS:
        clouds += cloud(cx, cy)
    frame += transform_commands(clouds, translation(state.cloud_x, 0.0))

    frame += hills()
    frame += river()
    frame += ground()

    for x, y, w, h in HOUSES:
        frame += house(x, y, w, h)
    for x, y, s in TREES:
        frame += tree(x, y, s)

    frame += windmill(*WINDMILL, state.blade_angle)

    frame += transform_commands(boat(), translation(state.boat_x, 0.0))
    mirror = compose(translation(state.boat_x, REFLECTION_OFFSET_Y), scaling(1.0, -1.0))
    frame += transform_commands(boat_reflection(), mirror)
    return frame


__all__ = ["BACKGROUND_COLOR", "CANVAS_SIZE", "compose_scene"]
