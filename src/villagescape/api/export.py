"""
どこで: `src/villagescape/api/export.py`。
何を: ヘッドレス export の公開導線 `Export` を提供する。
なぜ: 対話ウィンドウを立ち上げずに、任意 tick 後の 1 フレームを保存できるようにするため。
"""

from __future__ import annotations

from pathlib import Path

from villagescape.core.animation import (
    DEFAULT_PARAMS,
    AnimationParams,
    AnimationState,
    advance,
)
from villagescape.core.draw_command import DrawCommand
from villagescape.core.scene import BACKGROUND_COLOR, CANVAS_SIZE, compose_scene
from villagescape.export.image import default_output_path, export_image
from villagescape.export.svg import export_svg


class Export:
    """初期状態から `ticks` 回更新したフレームをファイルへ書き出す。"""

    def __init__(
        self,
        ticks: int,
        fmt: str,
        path: str | Path | None = None,
        *,
        background_color: tuple[float, float, float] = BACKGROUND_COLOR,
        point_size: float = 1.5,
        params: AnimationParams = DEFAULT_PARAMS,
    ) -> None:
        """export を実行する。

        Parameters
        ----------
        ticks : int
            書き出す前に進める tick 数（0 以上）。
        fmt : str
            出力フォーマット。`"svg"` または `"png"`（`"image"` も可）。
        path : str or Path or None
            出力先パス。None なら `{output_root}/{fmt}/village_{ticks:06d}.{fmt}`。
        background_color : tuple[float, float, float]
            背景色（0..1）。
        point_size : float
            点描の 1 点の大きさ。
        params : AnimationParams
            tick あたりの増分と巻き戻し位置。
        """
        n_ticks = int(ticks)
        if n_ticks < 0:
            raise ValueError(f"ticks は 0 以上である必要がある: got={ticks!r}")

        self.fmt = str(fmt).lower().strip()
        if self.fmt not in {"svg", "png", "image"}:
            raise ValueError(f"未対応の export fmt: {fmt!r}")
        ext = "svg" if self.fmt == "svg" else "png"

        self.state = AnimationState()
        for _ in range(n_ticks):
            advance(self.state, params)
        self.commands: list[DrawCommand] = compose_scene(self.state)

        self.path = Path(path) if path is not None else default_output_path(n_ticks, ext=ext)

        if ext == "svg":
            self.path = export_svg(
                self.commands,
                self.path,
                canvas_size=CANVAS_SIZE,
                background_color=background_color,
                point_size=point_size,
            )
            print(f"Saved SVG: {self.path}")
            return

        if self.path.suffix.lower() != ".png":
            raise ValueError(f"png 出力のパスは .png である必要がある: {self.path}")
        self.path = export_image(
            self.commands,
            self.path,
            canvas_size=CANVAS_SIZE,
            background_color=background_color,
            point_size=point_size,
        )
        print(f"Saved PNG: {self.path}")
