"""
どこで: `src/villagescape/core/shapes/landscape.py`。
何を: 空・遠景の丘・草地といった背景の塗り多角形を生成する。
なぜ: 背景は固定配置のため、パラメータを持たない純粋関数として切り出す。
"""

from __future__ import annotations

from villagescape.core.draw_command import DrawCommand, FillPolygon, rgba

SKY_COLOR = rgba(0.53, 0.81, 0.98)
HILL_COLOR = rgba(0.22, 0.47, 0.2)
GROUND_COLOR = rgba(0.2, 0.7, 0.2)


def sky() -> list[DrawCommand]:
    """画面上半分（y=300..600）を覆う空の矩形を返す。"""
    return [
        FillPolygon(
            vertices=[(0, 600), (800, 600), (800, 300), (0, 300)],
            color=SKY_COLOR,
        )
    ]


def hills() -> list[DrawCommand]:
    """地平線上の 2 つの三角形の丘を返す。"""
    return [
        FillPolygon(vertices=[(0, 300), (200, 380), (350, 300)], color=HILL_COLOR),
        FillPolygon(vertices=[(300, 300), (450, 420), (600, 300)], color=HILL_COLOR),
    ]


def ground() -> list[DrawCommand]:
    """川岸から地平線までの草地を返す。"""
    return [
        FillPolygon(
            vertices=[(0, 300), (800, 300), (800, 160), (0, 160)],
            color=GROUND_COLOR,
        )
    ]
