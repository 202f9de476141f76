"""アニメーション状態の 1 tick 更新と巻き戻しのテスト。"""

from __future__ import annotations

import pytest

from villagescape.core.animation import AnimationParams, AnimationState, advance


def test_initial_state() -> None:
    state = AnimationState()
    assert state.boat_x == -200.0
    assert state.cloud_x == -100.0
    assert state.blade_angle == 0.0


def test_single_tick_advances_each_variable() -> None:
    state = AnimationState()
    advance(state)
    assert state.boat_x == -198.5
    assert state.cloud_x == pytest.approx(-99.4)
    assert state.blade_angle == 4.0


def test_blade_angle_wraps_to_zero_after_ninety_ticks() -> None:
    state = AnimationState()
    for _ in range(90):
        advance(state)
    assert state.blade_angle == 0.0


def test_blade_angle_stays_in_range() -> None:
    state = AnimationState()
    for _ in range(1000):
        advance(state)
        assert 0.0 <= state.blade_angle < 360.0


def test_boat_resets_on_the_tick_that_passes_the_right_edge() -> None:
    state = AnimationState()
    for _ in range(800):
        advance(state)
    # -200 + 800 * 1.5 はちょうど境界（800 + 200）で、まだ超えていない。
    assert state.boat_x == 1000.0

    advance(state)
    assert state.boat_x == -300.0

    advance(state)
    assert state.boat_x == -298.5


def test_boat_increases_by_exactly_one_and_a_half_until_wrap() -> None:
    state = AnimationState()
    for _ in range(800):
        before = state.boat_x
        advance(state)
        assert state.boat_x - before == 1.5


def test_cloud_resets_past_right_edge() -> None:
    state = AnimationState(cloud_x=999.9)
    advance(state)
    assert state.cloud_x == -400.0


def test_wrap_limit_follows_canvas_width() -> None:
    params = AnimationParams(canvas_width=100)
    assert params.wrap_limit == 300.0

    state = AnimationState(boat_x=299.0, cloud_x=299.9)
    advance(state, params)
    assert state.boat_x == -300.0
    assert state.cloud_x == -400.0
