# どこで: `src/villagescape/core/runtime_config.py`。
# 何を: config.yaml による実行時設定（探索・ロード・キャッシュ）を提供する。
# なぜ: 出力先やウィンドウ位置をコードを変えずにユーザーが指定できるようにするため。

from __future__ import annotations

import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

_PACKAGED_DEFAULT = ("resource", "default_config.yaml")
_SUPPORTED_VERSION = 1


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """villagescape の実行時設定。

    Attributes
    ----------
    config_path : Path | None
        同梱デフォルトに重ねたユーザー config（明示指定 > 探索結果）。無ければ None。
    output_dir : Path
        export の既定出力ルート。
    window_position : tuple[int, int]
        ウィンドウ左上のスクリーン座標。
    png_scale : float
        PNG 出力時にキャンバス寸法へ掛ける倍率（> 0）。
    """

    config_path: Path | None
    output_dir: Path
    window_position: tuple[int, int]
    png_scale: float


_explicit_config_path: Path | None = None
_cached_config: RuntimeConfig | None = None


def set_config_path(path: str | Path | None) -> None:
    """明示 config パスを設定し、キャッシュを破棄する。

    `path=None` で明示指定を解除し、既定の探索に戻る。
    """

    global _explicit_config_path, _cached_config
    _explicit_config_path = None if path is None else Path(str(path)).expanduser()
    _cached_config = None


def _discover_user_config() -> Path | None:
    # カレント優先、次にホーム。最初に見つかった 1 つだけを使う。
    for candidate in (
        Path.cwd() / ".villagescape" / "config.yaml",
        Path.home() / ".config" / "villagescape" / "config.yaml",
    ):
        if candidate.is_file():
            return candidate
    return None


def _parse_yaml(text: str, *, source: str) -> dict[str, Any]:
    import yaml  # type: ignore[import-untyped]

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"config.yaml の読み込みに失敗しました: source={source}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RuntimeError(f"config.yaml のトップレベルは mapping である必要があります: source={source}")
    return data


def _overlay(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    # ネストした mapping はキー単位で上書きし、部分的な config を許す。
    merged = dict(base)
    for key, value in override.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = _overlay(merged[key], value)
        else:
            merged[key] = value
    return merged


def _lookup(payload: dict[str, Any], dotted_key: str) -> Any:
    """`"export.png.scale"` のようなドット区切りキーで値を取り出す（未設定は None）。"""

    node: Any = payload
    walked: list[str] = []
    for part in dotted_key.split("."):
        if node is None:
            return None
        if not isinstance(node, dict):
            raise RuntimeError(f"{'.'.join(walked)} は mapping である必要があります: got={node!r}")
        node = node.get(part)
        walked.append(part)
    return node


def _require(payload: dict[str, Any], dotted_key: str) -> Any:
    value = _lookup(payload, dotted_key)
    if value is None:
        raise RuntimeError(f"{dotted_key} が未設定です")
    return value


def _read_output_dir(payload: dict[str, Any]) -> Path:
    text = str(_require(payload, "paths.output_dir")).strip()
    if not text:
        raise RuntimeError("paths.output_dir が空です")
    return Path(os.path.expandvars(os.path.expanduser(text)))


def _read_window_position(payload: dict[str, Any]) -> tuple[int, int]:
    value = _require(payload, "ui.window_position")
    if isinstance(value, (str, bytes)) or not hasattr(value, "__len__") or len(value) != 2:
        raise RuntimeError(f"ui.window_position は [x, y] の配列である必要があります: got={value!r}")
    try:
        return int(value[0]), int(value[1])
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"ui.window_position は整数の組である必要があります: got={value!r}") from exc


def _read_png_scale(payload: dict[str, Any]) -> float:
    value = _require(payload, "export.png.scale")
    try:
        scale = float(value)
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"export.png.scale は数値である必要があります: got={value!r}") from exc
    if scale <= 0:
        raise ValueError(f"export.png.scale は正の値である必要がある: got={scale}")
    return scale


def runtime_config() -> RuntimeConfig:
    """実行時設定をロードして返す（`set_config_path` が呼ばれるまでキャッシュ）。

    Raises
    ------
    FileNotFoundError
        明示指定した config が存在しない場合。
    RuntimeError
        YAML が壊れている、またはキーの型が不正な場合。
    ValueError
        `export.png.scale` が正でない場合。
    """

    global _cached_config
    if _cached_config is not None:
        return _cached_config

    explicit = _explicit_config_path
    if explicit is not None and not explicit.is_file():
        raise FileNotFoundError(f"config.yaml が見つかりません: {explicit}")
    discovered = _discover_user_config()

    packaged = resources.files("villagescape").joinpath(*_PACKAGED_DEFAULT)
    payload = _parse_yaml(
        packaged.read_text(encoding="utf-8"),
        source="villagescape/" + "/".join(_PACKAGED_DEFAULT),
    )
    # 後勝ち: 同梱デフォルト < 探索で見つかった config < 明示 config。
    for layer in (discovered, explicit):
        if layer is not None:
            payload = _overlay(payload, _parse_yaml(layer.read_text(encoding="utf-8"), source=str(layer)))

    version = payload.get("version")
    if version != _SUPPORTED_VERSION:
        raise RuntimeError(f"未対応の config.yaml version です: got={version!r}")

    _cached_config = RuntimeConfig(
        config_path=explicit or discovered,
        output_dir=_read_output_dir(payload),
        window_position=_read_window_position(payload),
        png_scale=_read_png_scale(payload),
    )
    return _cached_config


def output_root_dir() -> Path:
    """export の既定出力ルートディレクトリを返す。"""

    return runtime_config().output_dir


__all__ = ["RuntimeConfig", "output_root_dir", "runtime_config", "set_config_path"]
