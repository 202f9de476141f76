# どこで: `src/villagescape/interactive/draw_window.py`。
# 何を: シーン描画用の pyglet ウィンドウ生成を行う。
# なぜ: interactive 依存をこの層に閉じ込め、core/export をヘッドレスに保つため。

from __future__ import annotations

from typing import TYPE_CHECKING

from villagescape.interactive.render_settings import RenderSettings

if TYPE_CHECKING:
    from pyglet.window import Window


def create_draw_window(settings: RenderSettings) -> Window:
    """設定に基づき固定サイズの描画ウィンドウを生成する。"""
    # pyglet.gl / pyglet.window は import 時にディスプレイへ接続するため、ここで読み込む。
    import pyglet
    from pyglet.gl import Config

    config = Config(double_buffer=True)  # type: ignore[abstract]
    canvas_w, canvas_h = settings.canvas_size
    window = pyglet.window.Window(  # type: ignore[abstract]
        width=int(canvas_w * settings.render_scale),
        height=int(canvas_h * settings.render_scale),
        resizable=False,
        caption=settings.caption,
        config=config,
    )
    return window
