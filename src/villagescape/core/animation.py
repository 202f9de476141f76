"""
どこで: `src/villagescape/core/animation.py`。
何を: ボート・雲・風車の羽根の 3 つのアニメーション変数と、その 1 tick 更新を定義する。
なぜ: 状態をグローバル変数ではなく明示的なオブジェクトとして tick 処理とシーン合成に渡すため。
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AnimationParams:
    """1 tick あたりの増分と、画面外に出たときの巻き戻し位置。"""

    canvas_width: int = 800
    wrap_margin: float = 200.0
    boat_speed: float = 1.5
    boat_reset: float = -300.0
    cloud_speed: float = 0.6
    cloud_reset: float = -400.0
    blade_speed: float = 4.0

    @property
    def wrap_limit(self) -> float:
        """この x を超えたら巻き戻す。"""
        return float(self.canvas_width) + float(self.wrap_margin)


DEFAULT_PARAMS = AnimationParams()


@dataclass(slots=True)
class AnimationState:
    """プロセス寿命のアニメーション状態。

    Notes
    -----
    変更するのは `advance()` だけで、シーン合成は読み取りのみ。
    `blade_angle` は常に [0, 360) に収まる。
    """

    boat_x: float = -200.0
    cloud_x: float = -100.0
    blade_angle: float = 0.0


def advance(state: AnimationState, params: AnimationParams = DEFAULT_PARAMS) -> None:
    """状態を 1 tick 進める（経過時間には依存しない）。

    Parameters
    ----------
    state : AnimationState
        更新対象。その場で書き換える。
    params : AnimationParams
        増分と巻き戻し位置。
    """
    limit = params.wrap_limit

    state.boat_x += params.boat_speed
    if state.boat_x > limit:
        state.boat_x = params.boat_reset

    state.cloud_x += params.cloud_speed
    if state.cloud_x > limit:
        state.cloud_x = params.cloud_reset

    state.blade_angle += params.blade_speed
    if state.blade_angle >= 360.0:
        state.blade_angle -= 360.0


__all__ = ["AnimationParams", "AnimationState", "DEFAULT_PARAMS", "advance"]
