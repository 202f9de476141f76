"""
どこで: `src/villagescape/export/image.py`。
何を: フレームを拡張子に応じて SVG / PNG で保存する。PNG は外部の resvg でラスタライズする。
なぜ: 常に SVG を残し、PNG は config の倍率でいつでも作り直せるようにするため。
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from pathlib import Path

from villagescape.core.draw_command import DrawCommand, rgb01_to_rgb255
from villagescape.core.runtime_config import output_root_dir, runtime_config
from villagescape.export.svg import export_svg

_RESVG = "resvg"


def export_image(
    commands: Sequence[DrawCommand],
    path: str | Path,
    *,
    canvas_size: tuple[int, int],
    background_color: tuple[float, float, float] = (1.0, 1.0, 1.0),
    point_size: float = 1.5,
) -> Path:
    """描画コマンド列を `path` の拡張子（`.svg` / `.png`）に従って保存する。

    `.png` の場合も同じ stem の `.svg` を隣に書き、それを resvg に渡す。
    """
    target = Path(path)
    suffix = target.suffix.lower()
    if suffix not in {".svg", ".png"}:
        raise ValueError(f"未対応の画像フォーマット: {suffix!r}")

    svg_path = export_svg(
        commands,
        target.with_suffix(".svg"),
        canvas_size=canvas_size,
        background_color=background_color,
        point_size=point_size,
    )
    if suffix == ".svg":
        return svg_path

    return rasterize_svg_to_png(
        svg_path,
        target,
        output_size=png_output_size(canvas_size),
        background_color_rgb01=background_color,
    )


def default_output_path(ticks: int, *, ext: str) -> Path:
    """`{output_root}/{ext}/village_{ticks:06d}.{ext}` を返す。"""

    ext = str(ext).lstrip(".") or "svg"
    return output_root_dir() / ext / f"village_{int(ticks):06d}.{ext}"


def png_output_size(canvas_size: tuple[int, int]) -> tuple[int, int]:
    """キャンバス寸法に `export.png.scale` を掛けた PNG のピクセル寸法を返す。"""

    width, height = (int(v) for v in canvas_size)
    if width <= 0 or height <= 0:
        raise ValueError(f"canvas_size は正の (width, height) である必要がある: got={canvas_size!r}")
    scale = runtime_config().png_scale
    return int(width * scale), int(height * scale)


def _resvg_command(
    *,
    input_svg: Path,
    output_png: Path,
    output_size: tuple[int, int],
    background_color_rgb01: tuple[float, float, float],
) -> list[str]:
    width, height = (int(v) for v in output_size)
    if width <= 0 or height <= 0:
        raise ValueError(f"output_size は正の (width, height) である必要がある: got={output_size!r}")
    r, g, b = rgb01_to_rgb255(background_color_rgb01)
    return [
        _RESVG,
        "--width",
        str(width),
        "--height",
        str(height),
        "--background",
        f"#{r:02X}{g:02X}{b:02X}",
        str(input_svg),
        str(output_png),
    ]


def rasterize_svg_to_png(
    svg_path: str | Path,
    png_path: str | Path,
    *,
    output_size: tuple[int, int],
    background_color_rgb01: tuple[float, float, float] = (1.0, 1.0, 1.0),
) -> Path:
    """resvg で SVG を PNG に変換する。

    Parameters
    ----------
    svg_path : str or Path
        入力 SVG。
    png_path : str or Path
        出力 PNG。親ディレクトリは無ければ作る。
    output_size : tuple[int, int]
        出力ピクセル寸法 (width, height)。
    background_color_rgb01 : tuple[float, float, float]
        透明部分を埋める背景色（0..1）。

    Returns
    -------
    Path
        出力 PNG パス。

    Raises
    ------
    RuntimeError
        resvg が PATH に無い、または非ゼロ終了した場合。
    """

    png = Path(png_path)
    cmd = _resvg_command(
        input_svg=Path(svg_path),
        output_png=png,
        output_size=output_size,
        background_color_rgb01=background_color_rgb01,
    )
    png.parent.mkdir(parents=True, exist_ok=True)

    try:
        proc = subprocess.run(cmd, capture_output=True, text=True, check=False)
    except FileNotFoundError as e:
        raise RuntimeError(
            "resvg が見つかりません（`resvg` をインストールして PATH を通してください）"
        ) from e

    if proc.returncode != 0:
        message = (proc.stderr or proc.stdout or "").strip()
        raise RuntimeError(f"resvg が失敗しました (code={proc.returncode}): {message}")
    return png
