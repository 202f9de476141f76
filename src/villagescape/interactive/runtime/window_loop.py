# どこで: `src/villagescape/interactive/runtime/window_loop.py`。
# 何を: 固定間隔の tick で「状態更新 → ウィンドウ描画」を回す pyglet ランナーを提供する。
# なぜ: イベント配送とバッファの flip を pyglet に任せ、tick と描画を同じスレッドで直列化するため。

from __future__ import annotations

from typing import Any, Callable

import pyglet


class TickLoop:
    """1 つのウィンドウについて、tick ごとに `on_tick()` → `window.draw()` を行う。

    tick の周期は固定で、経過時間（dt）による補正は行わない。
    """

    def __init__(
        self,
        window: Any,
        draw_frame: Callable[[], None],
        *,
        interval: float,
        on_tick: Callable[[], None] | None = None,
    ) -> None:
        """ループを初期化する。

        Parameters
        ----------
        window : pyglet.window.Window
            描画先ウィンドウ。閉じられるとループ全体が終わる。
        draw_frame : Callable[[], None]
            back buffer へ 1 フレームを描く処理（`on_draw` に登録する）。
            `switch_to()` / `flip()` は `Window.draw()` が行う。
        interval : float
            tick 間隔 [s]。`<=0` の場合はスロットリングせず可能な限り回す。
        on_tick : Callable[[], None] | None
            描画の直前に呼ぶ状態更新。
        """

        self._window = window
        self._draw_frame = draw_frame
        self._interval = float(interval)
        self._on_tick = on_tick

    def run(self) -> None:
        """ウィンドウが閉じられるまでループを実行する。"""

        window = self._window

        def request_exit(*_: object) -> None:
            # on_close は引数付きで呼ばれる場合がある。
            pyglet.app.exit()

        window.push_handlers(on_close=request_exit, on_draw=self._draw_frame)

        def tick(dt: float) -> None:
            if self._on_tick is not None:
                self._on_tick()
            # on_close から app.exit までの間に tick が来ることがあるため、閉じた後は描かない。
            if window in pyglet.app.windows:
                window.draw(dt)

        if self._interval <= 0:
            pyglet.clock.schedule(tick)
        else:
            pyglet.clock.schedule_interval(tick, self._interval)

        try:
            pyglet.app.run(interval=None)
        finally:
            pyglet.clock.unschedule(tick)
