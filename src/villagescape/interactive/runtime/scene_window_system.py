# どこで: `src/villagescape/interactive/runtime/scene_window_system.py`。
# 何を: アニメーション状態を持ち、tick での更新と 1 フレームの描画を行うサブシステムを提供する。
# なぜ: `src/villagescape/api/runner.py` を「配線」に寄せ、状態の所有と描画責務をまとめるため。

from __future__ import annotations

import logging

from villagescape.core.animation import (
    DEFAULT_PARAMS,
    AnimationParams,
    AnimationState,
    advance,
)
from villagescape.core.draw_command import DrawCommand
from villagescape.core.scene import compose_scene
from villagescape.interactive.draw_window import create_draw_window
from villagescape.interactive.gl.scene_renderer import SceneRenderer
from villagescape.interactive.render_settings import RenderSettings
from villagescape.interactive.runtime.perf import PerfCollector

_logger = logging.getLogger(__name__)


class SceneWindowSystem:
    """描画（メインウィンドウ）のサブシステム。

    Notes
    -----
    `state` を書き換えるのは `tick()` だけで、`draw_frame()` は読み取りのみ行う。
    どちらも pyglet のイベントループ（単一スレッド）から呼ばれる。
    """

    def __init__(
        self,
        *,
        settings: RenderSettings,
        state: AnimationState | None = None,
        params: AnimationParams = DEFAULT_PARAMS,
    ) -> None:
        """描画用の window/renderer を初期化する。"""

        self._settings = settings
        self.state = state if state is not None else AnimationState()
        self._params = params

        # 描画用の pyglet window を作成し、その window の OpenGL コンテキストに紐づく renderer を作る。
        self.window = create_draw_window(settings)
        self._renderer = SceneRenderer(self.window, settings)

        self._perf = PerfCollector.from_env()
        self._last_frame: list[DrawCommand] = []

    @property
    def last_frame(self) -> list[DrawCommand]:
        """最後に描画したフレームのコマンド列。"""
        return list(self._last_frame)

    def tick(self) -> None:
        """アニメーション状態を 1 tick 進める。"""
        advance(self.state, self._params)

    def _framebuffer_size(self) -> tuple[int, int]:
        getter = getattr(self.window, "get_framebuffer_size", None)
        if callable(getter):
            w, h = getter()
            return int(w), int(h)
        return int(self.window.width), int(self.window.height)

    def draw_frame(self) -> None:
        """1 フレーム分の描画を行う（`flip()` は呼ばない）。"""

        perf = self._perf
        with perf.frame():
            # 注: 呼び出し側（pyglet.window.Window.draw）が事前に self.window.switch_to() 済みである前提。
            self._renderer.ctx.screen.use()

            # HiDPI ではフレームバッファがウィンドウの論理サイズより大きいため、毎フレーム合わせる。
            fb_w, fb_h = self._framebuffer_size()
            self._renderer.viewport(fb_w, fb_h)
            self._renderer.clear(self._settings.background_color)

            with perf.section("compose"):
                frame = compose_scene(self.state)
            self._last_frame = frame

            with perf.section("render"):
                stats = self._renderer.render_frame(frame)
            perf.count("draw_calls", stats.draw_calls)
            perf.count("vertices", stats.vertices)

            if perf.enabled and perf.gpu_finish:
                with perf.section("gpu_finish"):
                    self._renderer.finish()

    def close(self) -> None:
        """GPU / window 資源を解放する。"""

        try:
            # renderer が保持している GPU リソースを破棄してから window を閉じる。
            self._renderer.release()
        except Exception:
            _logger.exception("Failed to release GPU resources")
        finally:
            self.window.close()
