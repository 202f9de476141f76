"""2D アフィン変換（3x3 同次座標行列）の生成・合成・適用。

行列スタック（push/translate/rotate/scale/pop）の代わりに、明示的な行列合成で
図形の配置を表現する。`compose(A, B)` は `A @ B` であり、頂点には B が先に掛かる
（固定機能パイプラインで A, B の順に呼んだ場合と同じ）。
"""

from __future__ import annotations

import math

import numpy as np


def identity() -> np.ndarray:
    """単位行列を返す。"""
    return np.eye(3, dtype=np.float64)


def translation(dx: float, dy: float) -> np.ndarray:
    """平行移動行列を返す。"""
    m = np.eye(3, dtype=np.float64)
    m[0, 2] = float(dx)
    m[1, 2] = float(dy)
    return m


def scaling(sx: float, sy: float) -> np.ndarray:
    """原点基準の拡大縮小行列を返す。負の倍率は鏡映になる。"""
    m = np.eye(3, dtype=np.float64)
    m[0, 0] = float(sx)
    m[1, 1] = float(sy)
    return m


def rotation(angle_deg: float) -> np.ndarray:
    """原点まわりの反時計回り回転行列を返す。

    Parameters
    ----------
    angle_deg : float
        回転角 [deg]。
    """
    rad = math.radians(float(angle_deg))
    c = math.cos(rad)
    s = math.sin(rad)
    return np.array(
        [[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]],
        dtype=np.float64,
    )


def compose(*matrices: np.ndarray) -> np.ndarray:
    """行列を左から順に掛け合わせる（最後の行列が頂点に最初に作用する）。"""
    out = identity()
    for m in matrices:
        out = out @ np.asarray(m, dtype=np.float64)
    return out


def apply_affine(matrix: np.ndarray, points: np.ndarray) -> np.ndarray:
    """(N, 2) の点列に行列を適用し、float32 (N, 2) を返す。"""
    m = np.asarray(matrix, dtype=np.float64)
    if m.shape != (3, 3):
        raise ValueError(f"matrix は shape (3,3) である必要がある: got={m.shape}")

    pts = np.asarray(points, dtype=np.float64)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError(f"points は shape (N,2) である必要がある: got={pts.shape}")
    if pts.shape[0] == 0:
        return np.zeros((0, 2), dtype=np.float32)

    # row-vector 表現のため線形部分は転置で適用する。
    transformed = pts @ m[:2, :2].T + m[:2, 2]
    return transformed.astype(np.float32, copy=False)


__all__ = [
    "apply_affine",
    "compose",
    "identity",
    "rotation",
    "scaling",
    "translation",
]
