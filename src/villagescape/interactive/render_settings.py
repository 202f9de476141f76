# どこで: `src/villagescape/interactive/render_settings.py`。
# 何を: interactive 描画設定の束を表すデータクラスを定義する。
# なぜ: `run` の引数を簡潔に保ちつつ、ウィンドウ/レンダラー側の設定を一元管理するため。

from __future__ import annotations

from dataclasses import dataclass

from villagescape.core.scene import BACKGROUND_COLOR, CANVAS_SIZE


@dataclass(frozen=True, slots=True)
class RenderSettings:
    """リアルタイム描画に用いる設定値の集合。"""

    background_color: tuple[float, float, float] = BACKGROUND_COLOR
    point_size: float = 1.5
    render_scale: float = 1.0
    canvas_size: tuple[int, int] = CANVAS_SIZE
    caption: str = "Village Scenery with Moving Boat - OpenGL Project"
