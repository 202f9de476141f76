"""公開 API `Export` のテスト。"""

from __future__ import annotations

import subprocess
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from villagescape import Export
from villagescape.core.runtime_config import set_config_path
from villagescape.export import image

_NS = {"svg": "http://www.w3.org/2000/svg"}


@pytest.fixture(autouse=True)
def _isolated_runtime_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    set_config_path(None)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    yield
    set_config_path(None)


def test_export_svg_after_ticks(tmp_path: Path) -> None:
    out = tmp_path / "frame.svg"
    exported = Export(90, "svg", out)

    assert exported.path == out
    assert exported.state.blade_angle == 0.0
    assert exported.state.boat_x == -65.0
    assert len(exported.commands) == 57

    root = ET.fromstring(out.read_text(encoding="utf-8"))
    group = root.find("svg:g", _NS)
    assert group is not None
    assert len(list(group)) == 57
    assert root.find("svg:rect", _NS) is not None


def test_export_zero_ticks_uses_initial_state(tmp_path: Path) -> None:
    exported = Export(0, "svg", tmp_path / "frame.svg")
    assert exported.state.boat_x == -200.0
    assert exported.state.cloud_x == -100.0


def test_export_defaults_to_output_dir(tmp_path: Path) -> None:
    exported = Export(3, "svg")
    assert exported.path == Path("data") / "output" / "svg" / "village_000003.svg"
    assert (tmp_path / exported.path).exists()


def test_export_png_uses_resvg(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run(cmd, **kwargs):
        Path(cmd[-1]).write_bytes(b"")
        return subprocess.CompletedProcess(args=cmd, returncode=0, stdout="", stderr="")

    monkeypatch.setattr(image.subprocess, "run", fake_run)

    out = tmp_path / "frame.png"
    exported = Export(10, "png", out)
    assert exported.path == out
    assert out.exists()
    assert out.with_suffix(".svg").exists()


def test_export_png_requires_png_suffix(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        Export(1, "image", tmp_path / "frame.svg")


def test_export_rejects_unknown_format(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        Export(1, "gif", tmp_path / "frame.gif")


def test_export_rejects_negative_ticks(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        Export(-1, "svg", tmp_path / "frame.svg")


def test_export_reports_saved_path(tmp_path: Path, capsys) -> None:
    out = tmp_path / "frame.svg"
    Export(0, "svg", out)
    assert capsys.readouterr().out.strip() == f"Saved SVG: {out}"
