# どこで: `src/villagescape/core/raster.py`。
# 何を: DDA 直線と中点円のラスタライズ（整数ピクセル座標列の生成）を提供する。
# なぜ: 川岸・屋根の縁・太陽・雲を「自前のラスタライザ」で点描するため。

from __future__ import annotations

import numpy as np
from numba import njit  # type: ignore[attr-defined]


def dda_line(x0: int, y0: int, x1: int, y1: int) -> np.ndarray:
    """DDA で線分 (x0,y0)-(x1,y1) を近似する画素列を返す。

    Parameters
    ----------
    x0, y0 : int
        始点。
    x1, y1 : int
        終点。

    Returns
    -------
    np.ndarray
        int32 shape (steps+1, 2)。`steps = max(|dx|, |dy|)`。
        先頭は始点、末尾は終点。長さ 0 の線分は 1 点になる。

    Notes
    -----
    各サンプルは四捨五入（0.5 は 0 から遠い側）で整数化する。
    """
    return _dda_line_numba(int(x0), int(y0), int(x1), int(y1))


def midpoint_circle(cx: int, cy: int, r: int) -> np.ndarray:
    """中点円アルゴリズムで円周上の画素列を返す。

    Parameters
    ----------
    cx, cy : int
        中心。
    r : int
        半径（0 以上）。

    Returns
    -------
    np.ndarray
        int32 shape (8k, 2)。1 ステップごとに 8 方向対称の点をこの順で並べる:
        (+x,+y), (-x,+y), (+x,-y), (-x,-y), (+y,+x), (-y,+x), (+y,-x), (-y,-x)。
        八分円の境界では重複点を含む。

    Raises
    ------
    ValueError
        r が負の場合。
    """
    radius = int(r)
    if radius < 0:
        raise ValueError(f"r は 0 以上である必要がある: got={r!r}")
    return _midpoint_circle_numba(int(cx), int(cy), radius)


def concentric_circles(cx: int, cy: int, r: int) -> np.ndarray:
    """半径 r から 1 までの同心円を連結した画素列を返す。

    塗りつぶし円の近似（外周から順に輪郭を重ねる）。小半径で隙間が残る。
    r=0 のときは空配列を返す。
    """
    radius = int(r)
    if radius < 0:
        raise ValueError(f"r は 0 以上である必要がある: got={r!r}")
    if radius == 0:
        return np.zeros((0, 2), dtype=np.int32)
    rings = [_midpoint_circle_numba(int(cx), int(cy), rr) for rr in range(radius, 0, -1)]
    return np.concatenate(rings, axis=0)


@njit(cache=True)  # type: ignore[misc]
def _round_half_away(v: float) -> int:
    if v >= 0.0:
        return int(np.floor(v + 0.5))
    return -int(np.floor(-v + 0.5))


@njit(cache=True)  # type: ignore[misc]
def _dda_line_numba(x0: int, y0: int, x1: int, y1: int) -> np.ndarray:
    """DDA の本体（Numba 版）。"""
    dx = x1 - x0
    dy = y1 - y0
    steps = max(abs(dx), abs(dy))
    if steps == 0:
        single = np.empty((1, 2), dtype=np.int32)
        single[0, 0] = x0
        single[0, 1] = y0
        return single

    x_inc = dx / steps
    y_inc = dy / steps
    x = float(x0)
    y = float(y0)
    out = np.empty((steps + 1, 2), dtype=np.int32)
    for i in range(steps + 1):
        out[i, 0] = _round_half_away(x)
        out[i, 1] = _round_half_away(y)
        x += x_inc
        y += y_inc
    return out


@njit(cache=True)  # type: ignore[misc]
def _midpoint_circle_numba(cx: int, cy: int, r: int) -> np.ndarray:
    """中点円の本体（Numba 版）。"""
    # x は 0..r の範囲しか進まないため、反復回数は r+1 以下。
    out = np.empty((8 * (r + 1), 2), dtype=np.int32)
    x = 0
    y = r
    d = 1 - r
    n = 0
    while x <= y:
        out[n, 0] = cx + x
        out[n, 1] = cy + y
        out[n + 1, 0] = cx - x
        out[n + 1, 1] = cy + y
        out[n + 2, 0] = cx + x
        out[n + 2, 1] = cy - y
        out[n + 3, 0] = cx - x
        out[n + 3, 1] = cy - y
        out[n + 4, 0] = cx + y
        out[n + 4, 1] = cy + x
        out[n + 5, 0] = cx - y
        out[n + 5, 1] = cy + x
        out[n + 6, 0] = cx + y
        out[n + 6, 1] = cy - x
        out[n + 7, 0] = cx - y
        out[n + 7, 1] = cy - x
        n += 8

        if d < 0:
            d += 2 * x + 3
        else:
            d += 2 * (x - y) + 5
            y -= 1
        x += 1
    return out[:n]


__all__ = ["concentric_circles", "dda_line", "midpoint_circle"]
