"""
どこで: `src/villagescape/core/draw_command.py`。
何を: 1 フレームを構成する描画コマンド（塗り多角形・線分・点群）のモデルを定義する。
なぜ: シーン合成（純粋関数）と描画バックエンド（GL / SVG）を同じ表現でつなぐため。
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TypeAlias

import numpy as np

from villagescape.core.affine import apply_affine

ColorRGBA = tuple[float, float, float, float]


def rgba(r: float, g: float, b: float, a: float = 1.0) -> ColorRGBA:
    """0..1 の RGBA タプルを返す。"""
    return float(r), float(g), float(b), float(a)


def rgb01_to_rgb255(rgb: tuple[float, float, float]) -> tuple[int, int, int]:
    """0..1 float の RGB を 0..255 int の RGB に変換して返す。"""

    r, g, b = rgb
    out: list[int] = []
    for v in (r, g, b):
        fv = float(v)
        fv = 0.0 if fv < 0.0 else 1.0 if fv > 1.0 else fv
        out.append(int(round(fv * 255.0)))
    return int(out[0]), int(out[1]), int(out[2])


def _frozen_xy(values: object, *, name: str) -> np.ndarray:
    arr = np.asarray(values, dtype=np.float32)
    if arr.ndim == 1 and arr.size == 0:
        arr = np.zeros((0, 2), dtype=np.float32)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"{name} は shape (N,2) の 2 次元配列である必要がある: got={arr.shape}")
    if arr.flags.writeable:
        # 呼び出し側の配列を後から書き換えられても影響しないよう複製する。
        arr = arr.copy()
    # 不変性確保のため writeable=False に設定する。
    arr.setflags(write=False)
    return arr


def _checked_color(color: Sequence[float]) -> ColorRGBA:
    try:
        values = tuple(float(c) for c in color)
    except Exception as exc:
        raise ValueError(f"color は数値のシーケンスである必要がある: {color!r}") from exc
    if len(values) == 3:
        values = values + (1.0,)
    if len(values) != 4:
        raise ValueError(f"color は RGB または RGBA である必要がある: {color!r}")
    if any(v < 0.0 or v > 1.0 for v in values):
        raise ValueError(f"color の各成分は 0..1 である必要がある: {color!r}")
    return values  # type: ignore[return-value]


@dataclass(frozen=True, slots=True)
class FillPolygon:
    """単色で塗りつぶす凸多角形。

    Parameters
    ----------
    vertices : np.ndarray
        float32 shape (N, 2) の頂点列（N >= 3）。頂点順はそのまま描画に使う。
    color : ColorRGBA
        塗り色（0..1）。alpha < 1 は背景とブレンドされる。
    """

    vertices: np.ndarray
    color: ColorRGBA

    def __post_init__(self) -> None:
        vertices = _frozen_xy(self.vertices, name="vertices")
        if vertices.shape[0] < 3:
            raise ValueError("FillPolygon は 3 頂点以上が必要")
        object.__setattr__(self, "vertices", vertices)
        object.__setattr__(self, "color", _checked_color(self.color))

    def transformed(self, matrix: np.ndarray) -> FillPolygon:
        return FillPolygon(vertices=apply_affine(matrix, self.vertices), color=self.color)


@dataclass(frozen=True, slots=True)
class LineSegments:
    """端点ペアの列で表す線分群（GL_LINES 相当）。"""

    vertices: np.ndarray
    color: ColorRGBA

    def __post_init__(self) -> None:
        vertices = _frozen_xy(self.vertices, name="vertices")
        if vertices.shape[0] % 2 != 0:
            raise ValueError("LineSegments の頂点数は偶数である必要がある")
        object.__setattr__(self, "vertices", vertices)
        object.__setattr__(self, "color", _checked_color(self.color))

    def transformed(self, matrix: np.ndarray) -> LineSegments:
        return LineSegments(vertices=apply_affine(matrix, self.vertices), color=self.color)


@dataclass(frozen=True, slots=True)
class PointSet:
    """ラスタライザが出力した画素を点として描く。"""

    points: np.ndarray
    color: ColorRGBA

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", _frozen_xy(self.points, name="points"))
        object.__setattr__(self, "color", _checked_color(self.color))

    def transformed(self, matrix: np.ndarray) -> PointSet:
        return PointSet(points=apply_affine(matrix, self.points), color=self.color)


DrawCommand: TypeAlias = FillPolygon | LineSegments | PointSet


def transform_commands(commands: Iterable[DrawCommand], matrix: np.ndarray) -> list[DrawCommand]:
    """全コマンドへ同じ行列を適用した新しいリストを返す（順序は保つ）。"""
    return [command.transformed(matrix) for command in commands]


def command_vertices(command: DrawCommand) -> np.ndarray:
    """コマンドの頂点配列（点群なら点列）を返す。"""
    if isinstance(command, PointSet):
        return command.points
    return command.vertices


__all__ = [
    "ColorRGBA",
    "DrawCommand",
    "FillPolygon",
    "LineSegments",
    "PointSet",
    "command_vertices",
    "rgb01_to_rgb255",
    "rgba",
    "transform_commands",
]
