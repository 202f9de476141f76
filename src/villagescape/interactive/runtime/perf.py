"""
どこで: `src/villagescape/interactive/runtime/perf.py`。
何を: interactive 描画向けの最小区間計測とフレーム内カウンタ（集計 + 周期出力）を提供する。
なぜ: シーン合成（CPU）と draw call 発行（GPU/ドライバ）のどちらが重いかを切り分けるため。
"""

from __future__ import annotations

import contextlib
import os
import time
from collections.abc import Iterator


def _env_flag(name: str) -> bool:
    value = os.environ.get(name)
    if value is None:
        return False
    return str(value).strip().lower() not in {"", "0", "false", "no", "off"}


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return int(default)
    try:
        return int(value)
    except ValueError:
        return int(default)


class PerfCollector:
    """フレーム区間計測の集計器。

    Notes
    -----
    無効時は全メソッドが軽量 no-op として振る舞う。
    """

    def __init__(
        self,
        *,
        enabled: bool,
        print_every: int = 60,
        gpu_finish: bool = False,
    ) -> None:
        self.enabled = bool(enabled)
        self.print_every = int(print_every) if int(print_every) > 0 else 60
        self.gpu_finish = bool(gpu_finish)

        self._window_frames = 0
        self._sum_ns: dict[str, int] = {}
        self._counts: dict[str, int] = {}

    @classmethod
    def from_env(cls) -> "PerfCollector":
        """環境変数から設定して作成する。

        - `VILLAGESCAPE_PERF=1` で有効化する。
        - `VILLAGESCAPE_PERF_EVERY=60` で何フレームごとに出力するかを指定する。
        - `VILLAGESCAPE_PERF_GPU_FINISH=1` で `ctx.finish()` を含む GPU 同期計測を有効化する。
        """
        return cls(
            enabled=_env_flag("VILLAGESCAPE_PERF"),
            print_every=_env_int("VILLAGESCAPE_PERF_EVERY", 60),
            gpu_finish=_env_flag("VILLAGESCAPE_PERF_GPU_FINISH"),
        )

    @contextlib.contextmanager
    def section(self, name: str) -> Iterator[None]:
        """`with` で囲った区間の時間を加算する。"""
        if not self.enabled:
            yield
            return
        t0 = time.perf_counter_ns()
        try:
            yield
        finally:
            self._add_time(str(name), time.perf_counter_ns() - t0)

    def count(self, name: str, value: int) -> None:
        """フレーム内のカウンタ（draw call 数など）を加算する。"""
        if not self.enabled:
            return
        self._counts[name] = int(self._counts.get(name, 0)) + int(value)

    @contextlib.contextmanager
    def frame(self) -> Iterator[None]:
        """1 フレーム全体の計測と周期出力を行う。"""
        if not self.enabled:
            yield
            return

        t0 = time.perf_counter_ns()
        try:
            yield
        finally:
            self._add_time("frame", time.perf_counter_ns() - t0)
            self._window_frames += 1
            if self._window_frames % self.print_every == 0:
                print("[villagescape-perf]", self.summary())
                self.reset()

    def _add_time(self, name: str, dt_ns: int) -> None:
        self._sum_ns[name] = int(self._sum_ns.get(name, 0)) + int(dt_ns)

    def summary(self) -> str:
        """集計窓の 1 フレーム平均を 1 行の文字列で返す。"""
        frames = int(self._window_frames)
        if frames <= 0:
            return ""

        parts: list[str] = []
        frame_ns = int(self._sum_ns.get("frame", 0))
        parts.append(f"frame={frame_ns / frames / 1_000_000.0:.3f}ms")
        for name in sorted(k for k in self._sum_ns if k != "frame"):
            parts.append(f"{name}={self._sum_ns[name] / frames / 1_000_000.0:.3f}ms")
        for name in sorted(self._counts):
            parts.append(f"{name}={self._counts[name] / frames:.1f}")
        return " ".join(parts)

    def reset(self) -> None:
        self._window_frames = 0
        self._sum_ns.clear()
        self._counts.clear()
