"""`SceneRenderer` のコマンド → draw call 変換と `SceneWindowSystem` の tick/描画のテスト。

GL コンテキストは作らず、ctx / program / mesh と window を偽物に差し替えて検証する。
"""

from __future__ import annotations

from types import SimpleNamespace

import moderngl
import numpy as np
import pytest

from villagescape.core.animation import AnimationState
from villagescape.core.draw_command import FillPolygon, LineSegments, PointSet
from villagescape.core.scene import BACKGROUND_COLOR, compose_scene
from villagescape.interactive.gl.scene_renderer import FrameStats, SceneRenderer
from villagescape.interactive.render_settings import RenderSettings
from villagescape.interactive.runtime import scene_window_system
from villagescape.interactive.runtime.scene_window_system import SceneWindowSystem


class _FakeCtx:
    TRIANGLE_FAN = "fan"
    LINES = "lines"
    POINTS = "points"

    def __init__(self, events: list[tuple]) -> None:
        self._events = events
        self.blend_func = None

    def enable(self, flag: int) -> None:
        self._events.append(("enable", flag))

    def disable(self, flag: int) -> None:
        self._events.append(("disable", flag))


class _FakeProgram:
    def __init__(self) -> None:
        self.uniforms = {"color": SimpleNamespace(value=None)}

    def __getitem__(self, name: str) -> SimpleNamespace:
        return self.uniforms[name]


class _FakeMesh:
    def __init__(self, events: list[tuple], program: _FakeProgram) -> None:
        self.vertex_count = 0
        self._program = program

        def render(*, mode: str, vertices: int) -> None:
            events.append(("draw", mode, vertices, program["color"].value))

        self.vao = SimpleNamespace(render=render)

    def upload(self, vertices: np.ndarray) -> None:
        self.vertex_count = int(vertices.shape[0])


def _renderer(events: list[tuple]) -> SceneRenderer:
    renderer = SceneRenderer.__new__(SceneRenderer)
    program = _FakeProgram()
    renderer.ctx = _FakeCtx(events)
    renderer.program = program
    renderer._mesh = _FakeMesh(events, program)
    return renderer


def test_render_frame_maps_commands_to_draw_modes_in_order() -> None:
    events: list[tuple] = []
    renderer = _renderer(events)
    commands = [
        FillPolygon(vertices=[(0, 0), (10, 0), (10, 10), (0, 10)], color=(0.1, 0.2, 0.3)),
        LineSegments(vertices=[(0, 75), (0, 100)], color=(0.0, 0.0, 0.0)),
        PointSet(points=[(1, 1), (2, 2), (3, 3)], color=(1.0, 1.0, 1.0)),
        FillPolygon(vertices=[(0, 0), (1, 0), (1, 1)], color=(0.5, 0.5, 0.5, 0.4)),
    ]

    stats = renderer.render_frame(commands)

    draws = [e for e in events if e[0] == "draw"]
    assert draws == [
        ("draw", "fan", 4, (0.1, 0.2, 0.3, 1.0)),
        ("draw", "lines", 2, (0.0, 0.0, 0.0, 1.0)),
        ("draw", "points", 3, (1.0, 1.0, 1.0, 1.0)),
        ("draw", "fan", 3, (0.5, 0.5, 0.5, 0.4)),
    ]
    assert stats == FrameStats(draw_calls=4, vertices=12)


def test_render_frame_enables_alpha_blending_before_first_draw() -> None:
    events: list[tuple] = []
    renderer = _renderer(events)

    renderer.render_frame([FillPolygon(vertices=[(0, 0), (1, 0), (1, 1)], color=(1.0, 0.0, 0.0))])

    assert events[0] == ("enable", moderngl.BLEND)
    assert events[1][0] == "draw"
    assert events[-1] == ("disable", moderngl.BLEND)
    assert renderer.ctx.blend_func == (moderngl.SRC_ALPHA, moderngl.ONE_MINUS_SRC_ALPHA)


def test_render_frame_skips_empty_point_sets() -> None:
    events: list[tuple] = []
    renderer = _renderer(events)

    stats = renderer.render_frame([PointSet(points=np.zeros((0, 2)), color=(1.0, 1.0, 1.0))])

    assert [e for e in events if e[0] == "draw"] == []
    assert stats == FrameStats(draw_calls=0, vertices=0)


class _FakeWindow:
    width = 800
    height = 600

    def __init__(self, events: list[tuple]) -> None:
        self._events = events

    def get_framebuffer_size(self) -> tuple[int, int]:
        return 1600, 1200

    def close(self) -> None:
        self._events.append(("window_close",))


class _FakeSceneRenderer:
    def __init__(self, window: _FakeWindow, settings: RenderSettings) -> None:
        self.events: list[tuple] = window._events
        self.fail_release = False
        self.ctx = SimpleNamespace(
            screen=SimpleNamespace(use=lambda: self.events.append(("screen_use",)))
        )

    def viewport(self, width: int, height: int) -> None:
        self.events.append(("viewport", width, height))

    def clear(self, color: tuple[float, float, float]) -> None:
        self.events.append(("clear", color))

    def render_frame(self, commands) -> FrameStats:
        self.events.append(("render", len(commands)))
        return FrameStats(draw_calls=len(commands), vertices=0)

    def release(self) -> None:
        self.events.append(("release",))
        if self.fail_release:
            raise RuntimeError("lost context")

    def finish(self) -> None:
        self.events.append(("finish",))


@pytest.fixture
def system_events(monkeypatch: pytest.MonkeyPatch) -> list[tuple]:
    events: list[tuple] = []
    monkeypatch.delenv("VILLAGESCAPE_PERF", raising=False)
    monkeypatch.setattr(
        scene_window_system, "create_draw_window", lambda settings: _FakeWindow(events)
    )
    monkeypatch.setattr(scene_window_system, "SceneRenderer", _FakeSceneRenderer)
    return events


def test_scene_window_system_tick_advances_owned_state(system_events: list[tuple]) -> None:
    state = AnimationState()
    system = SceneWindowSystem(settings=RenderSettings(), state=state)

    system.tick()

    assert system.state is state
    assert state.boat_x == -198.5
    assert state.blade_angle == 4.0
    assert system_events == []


def test_scene_window_system_draw_frame_clears_then_renders_scene(
    system_events: list[tuple],
) -> None:
    system = SceneWindowSystem(settings=RenderSettings(), state=AnimationState(boat_x=0.0))

    system.draw_frame()

    assert system_events == [
        ("screen_use",),
        ("viewport", 1600, 1200),
        ("clear", BACKGROUND_COLOR),
        ("render", 57),
    ]
    expected = compose_scene(AnimationState(boat_x=0.0))
    frame = system.last_frame
    assert len(frame) == len(expected)
    np.testing.assert_allclose(frame[-1].vertices, expected[-1].vertices)


def test_scene_window_system_draw_does_not_mutate_state(system_events: list[tuple]) -> None:
    system = SceneWindowSystem(settings=RenderSettings())
    system.draw_frame()
    system.draw_frame()
    assert system.state == AnimationState()


def test_scene_window_system_close_releases_then_closes_window(
    system_events: list[tuple],
) -> None:
    system = SceneWindowSystem(settings=RenderSettings())
    system.close()
    assert system_events == [("release",), ("window_close",)]


def test_scene_window_system_close_still_closes_window_when_release_fails(
    system_events: list[tuple], caplog: pytest.LogCaptureFixture
) -> None:
    system = SceneWindowSystem(settings=RenderSettings())
    system._renderer.fail_release = True

    system.close()

    assert system_events == [("release",), ("window_close",)]
    assert "Failed to release GPU resources" in caplog.text
