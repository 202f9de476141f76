"""
どこで: `src/villagescape/api/runner.py`。公開 API のランナー実装。
何を: pyglet + ModernGL で村の風景をウィンドウに描画し、固定 tick でアニメーションさせる。
なぜ: `main.py` を実行して実際に風景をプレビューできる経路を用意するため。
"""

from __future__ import annotations

from pathlib import Path

import pyglet

from villagescape.core.animation import DEFAULT_PARAMS, AnimationParams, AnimationState
from villagescape.core.runtime_config import runtime_config, set_config_path
from villagescape.core.scene import BACKGROUND_COLOR
from villagescape.interactive.render_settings import RenderSettings
from villagescape.interactive.runtime.scene_window_system import SceneWindowSystem
from villagescape.interactive.runtime.window_loop import TickLoop

TICK_INTERVAL = 0.016


def run(
    *,
    config_path: str | Path | None = None,
    tick_interval: float = TICK_INTERVAL,
    render_scale: float = 1.0,
    background_color: tuple[float, float, float] = BACKGROUND_COLOR,
    point_size: float = 1.5,
    state: AnimationState | None = None,
    params: AnimationParams = DEFAULT_PARAMS,
) -> None:
    """pyglet ウィンドウを生成し、村の風景をリアルタイム描画する。

    Parameters
    ----------
    config_path : str | Path | None
        設定ファイル（config.yaml）のパス。指定した場合は探索より優先する。
    tick_interval : float
        アニメーション tick の間隔 [s]。既定は 16ms（約 60 回/秒）。
        移動量は tick あたり固定なので、間隔を変えると見かけの速さも変わる。
    render_scale : float
        キャンバス寸法に掛けるピクセル倍率。
    background_color : tuple[float, float, float]
        毎フレームのクリア色 RGB。
    point_size : float
        ラスタライズした画素を描く点の大きさ [px]（render_scale 倍される）。
    state : AnimationState | None
        初期状態。None なら既定の初期値から始める。
    params : AnimationParams
        tick あたりの増分と巻き戻し位置。

    Returns
    -------
    None
        ウィンドウを閉じると制御を返す。
    """

    set_config_path(config_path)
    cfg = runtime_config()

    # tick で描画を駆動するため、vsync による flip 待ちで tick が間延びしないようにする。
    pyglet.options["vsync"] = False

    settings = RenderSettings(
        background_color=background_color,
        point_size=point_size,
        render_scale=render_scale,
    )

    scene_window = SceneWindowSystem(settings=settings, state=state, params=params)
    scene_window.window.set_location(*cfg.window_position)

    loop = TickLoop(
        scene_window.window,
        scene_window.draw_frame,
        interval=tick_interval,
        on_tick=scene_window.tick,
    )
    try:
        loop.run()
    finally:
        scene_window.close()
