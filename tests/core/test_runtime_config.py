from pathlib import Path

import pytest

from villagescape.core.runtime_config import output_root_dir, runtime_config, set_config_path


@pytest.fixture(autouse=True)
def _reset_runtime_config() -> None:
    set_config_path(None)
    yield
    set_config_path(None)


def _isolate_config_discovery(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))


def test_output_root_dir_uses_packaged_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    assert output_root_dir() == Path("data") / "output"
    cfg = runtime_config()
    assert cfg.config_path is None
    assert cfg.output_dir == Path("data") / "output"
    assert cfg.window_position == (200, 50)
    assert cfg.png_scale == 1.0


def test_discovered_config_overrides_packaged_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    discovered = tmp_path / ".villagescape" / "config.yaml"
    discovered.parent.mkdir(parents=True, exist_ok=True)
    discovered.write_text('paths:\n  output_dir: "./out_discovered"\n', encoding="utf-8")

    assert output_root_dir() == Path("out_discovered")
    cfg = runtime_config()
    assert cfg.config_path == discovered
    # 部分的な config は同梱デフォルトへキー単位で重ねる。
    assert cfg.window_position == (200, 50)
    assert cfg.png_scale == 1.0


def test_home_config_is_used_when_cwd_has_none(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    cwd = tmp_path / "work"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    monkeypatch.setenv("HOME", str(tmp_path))

    home_cfg = tmp_path / ".config" / "villagescape" / "config.yaml"
    home_cfg.parent.mkdir(parents=True, exist_ok=True)
    home_cfg.write_text("ui:\n  window_position: [10, 20]\n", encoding="utf-8")

    cfg = runtime_config()
    assert cfg.config_path == home_cfg
    assert cfg.window_position == (10, 20)


def test_explicit_config_overrides_discovered_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    discovered = tmp_path / ".villagescape" / "config.yaml"
    discovered.parent.mkdir(parents=True, exist_ok=True)
    discovered.write_text(
        'paths:\n  output_dir: "./out_discovered"\nexport:\n  png:\n    scale: 2\n',
        encoding="utf-8",
    )

    explicit = tmp_path / "explicit.yaml"
    explicit.write_text('paths:\n  output_dir: "./out_explicit"\n', encoding="utf-8")
    set_config_path(explicit)

    assert output_root_dir() == Path("out_explicit")
    cfg = runtime_config()
    assert cfg.config_path == explicit
    assert cfg.png_scale == 2.0


def test_runtime_config_is_cached_until_path_changes(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    first = runtime_config()
    assert runtime_config() is first

    explicit = tmp_path / "explicit.yaml"
    explicit.write_text("ui:\n  window_position: [1, 2]\n", encoding="utf-8")
    set_config_path(explicit)
    assert runtime_config() is not first
    assert runtime_config().window_position == (1, 2)


def test_explicit_config_path_missing_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    set_config_path(tmp_path / "missing.yaml")

    with pytest.raises(FileNotFoundError):
        output_root_dir()


def test_malformed_window_position_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    explicit = tmp_path / "explicit.yaml"
    explicit.write_text("ui:\n  window_position: [1, 2, 3]\n", encoding="utf-8")
    set_config_path(explicit)

    with pytest.raises(RuntimeError, match="ui.window_position"):
        runtime_config()


def test_non_positive_png_scale_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    explicit = tmp_path / "explicit.yaml"
    explicit.write_text("export:\n  png:\n    scale: 0\n", encoding="utf-8")
    set_config_path(explicit)

    with pytest.raises(ValueError, match="export.png.scale"):
        runtime_config()


def test_unsupported_version_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    explicit = tmp_path / "explicit.yaml"
    explicit.write_text("version: 2\n", encoding="utf-8")
    set_config_path(explicit)

    with pytest.raises(RuntimeError, match="version"):
        runtime_config()
