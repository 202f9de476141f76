"""
どこで: `src/villagescape/export/svg.py`。
何を: 合成済みフレーム（描画コマンド列）を SVG として保存する関数を提供する。
なぜ: ウィンドウを開かずに 1 フレームを保存・比較できる headless 出力を用意するため。
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import numpy as np

from villagescape.core.draw_command import (
    ColorRGBA,
    DrawCommand,
    FillPolygon,
    LineSegments,
    PointSet,
    rgb01_to_rgb255,
)

_SVG_NS = "http://www.w3.org/2000/svg"
_FLOAT_DECIMALS = 3


def _fmt(value: float, *, decimals: int = _FLOAT_DECIMALS) -> str:
    """SVG 出力向けに float を決定的な文字列へ変換して返す。"""
    text = f"{float(value):.{int(decimals)}f}"
    if text.startswith("-0") and float(text) == 0.0:
        return text[1:]
    return text


def _rgb01_to_hex(rgb01: tuple[float, float, float]) -> str:
    """0..1 float RGB を #RRGGBB に変換して返す。"""
    r, g, b = rgb01_to_rgb255(rgb01)
    return f"#{r:02X}{g:02X}{b:02X}"


def _paint_attrs(kind: str, color: ColorRGBA) -> str:
    """fill / stroke と、alpha < 1 のときだけ opacity 属性を返す。"""
    attrs = f'{kind}="{_rgb01_to_hex(color[:3])}"'
    if color[3] < 1.0:
        attrs += f' {kind}-opacity="{_fmt(color[3])}"'
    return attrs


def _polygon_element(command: FillPolygon) -> str:
    points = " ".join(f"{_fmt(x)},{_fmt(y)}" for x, y in command.vertices)
    return f'    <polygon points="{points}" {_paint_attrs("fill", command.color)} />'


def _segments_element(command: LineSegments) -> str | None:
    pairs = command.vertices.reshape(-1, 2, 2)
    if pairs.shape[0] == 0:
        return None
    d = " ".join(
        f"M {_fmt(a[0])} {_fmt(a[1])} L {_fmt(b[0])} {_fmt(b[1])}" for a, b in pairs
    )
    return (
        f'    <path d="{d}" fill="none" {_paint_attrs("stroke", command.color)} '
        f'stroke-width="1" />'
    )


def _points_element(command: PointSet, *, point_size: float) -> str | None:
    if command.points.shape[0] == 0:
        return None
    half = float(point_size) / 2.0
    size = _fmt(point_size)
    # 1 点を point_size 四方の正方形として 1 本の path にまとめる。
    corners = np.asarray(command.points, dtype=np.float64) - half
    d = " ".join(f"M {_fmt(x)} {_fmt(y)} h {size} v {size} h -{size} z" for x, y in corners)
    return f'    <path d="{d}" {_paint_attrs("fill", command.color)} />'


def export_svg(
    commands: Sequence[DrawCommand],
    path: str | Path,
    *,
    canvas_size: tuple[int, int],
    background_color: tuple[float, float, float] | None = None,
    point_size: float = 1.5,
) -> Path:
    """描画コマンド列を SVG として保存する。

    Parameters
    ----------
    commands : Sequence[DrawCommand]
        奥 → 手前の順の描画コマンド。この順で要素を書き出す。
    path : str or Path
        出力先パス。
    canvas_size : tuple[int, int]
        キャンバス寸法（ワールド座標の範囲 [0,w]x[0,h]）。
    background_color : tuple[float, float, float] or None, optional
        指定した場合、キャンバス全体をこの色で塗る矩形を先頭に置く。
    point_size : float, optional
        PointSet の 1 点を描く正方形の一辺。

    Returns
    -------
    Path
        保存先パス（正規化済み）。

    Notes
    -----
    ワールド座標は左下原点なので、y を反転する group で全体を包む。
    """
    _path = Path(path)
    canvas_w, canvas_h = canvas_size
    if canvas_w <= 0 or canvas_h <= 0:
        raise ValueError("canvas_size は正の値である必要がある")
    if point_size <= 0:
        raise ValueError("point_size は正の値である必要がある")

    lines: list[str] = []
    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append(
        (
            f'<svg xmlns="{_SVG_NS}" viewBox="0 0 {int(canvas_w)} {int(canvas_h)}" '
            f'width="{int(canvas_w)}" height="{int(canvas_h)}">'
        )
    )
    if background_color is not None:
        lines.append(
            f'  <rect x="0" y="0" width="{int(canvas_w)}" height="{int(canvas_h)}" '
            f'fill="{_rgb01_to_hex(background_color)}" />'
        )
    lines.append(f'  <g transform="matrix(1 0 0 -1 0 {int(canvas_h)})">')

    for command in commands:
        element: str | None
        if isinstance(command, FillPolygon):
            element = _polygon_element(command)
        elif isinstance(command, LineSegments):
            element = _segments_element(command)
        elif isinstance(command, PointSet):
            element = _points_element(command, point_size=point_size)
        else:
            raise TypeError(f"export_svg で処理できない型: {type(command)!r}")
        if element is not None:
            lines.append(element)

    lines.append("  </g>")
    lines.append("</svg>")

    _path.parent.mkdir(parents=True, exist_ok=True)
    with _path.open("w", encoding="utf-8", newline="\n") as f:
        f.write("\n".join(lines) + "\n")

    return _path
