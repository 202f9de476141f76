# どこで: `src/villagescape/interactive/gl/scene_renderer.py`。
# 何を: 描画コマンド列を ModernGL で描くレンダラーをカプセル化する。
# なぜ: コンテキスト生成・シェーダ設定・頂点転送をウィンドウ側から分離し、責務を明確にするため。

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

import moderngl

from villagescape.core.draw_command import (
    DrawCommand,
    FillPolygon,
    LineSegments,
    PointSet,
    command_vertices,
)
from villagescape.interactive.gl import utils as render_utils
from villagescape.interactive.gl.shader import Shader
from villagescape.interactive.gl.vertex_mesh import VertexMesh
from villagescape.interactive.render_settings import RenderSettings

if TYPE_CHECKING:
    from pyglet.window import Window


@dataclass(frozen=True, slots=True)
class FrameStats:
    """1 フレームで発行した draw call と頂点数。"""

    draw_calls: int
    vertices: int


class SceneRenderer:
    """描画コマンドを順に draw call へ変換するシンプルなレンダラー。"""

    def __init__(self, window: Window, settings: RenderSettings) -> None:
        window.switch_to()
        self.ctx = moderngl.create_context(require=410)
        self.program = Shader.create_shader(self.ctx)
        # コマンドは毎フレーム作り直されるため、1 つの mesh を使い回して毎回 upload する。
        self._mesh = VertexMesh(self.ctx, self.program)
        canvas_w, canvas_h = settings.canvas_size
        # 射影行列はキャンバス寸法にのみ依存するため初期化時に一度設定する。
        projection = render_utils.build_projection(float(canvas_w), float(canvas_h))
        self.program["projection"].write(projection.tobytes())
        self.ctx.point_size = float(settings.point_size) * float(settings.render_scale)

    def viewport(self, width: int, height: int) -> None:
        """ビューポートをウィンドウサイズに合わせて更新する。"""
        self.ctx.viewport = (0, 0, int(width), int(height))

    def clear(self, color: tuple[float, float, float]) -> None:
        """背景色でクリアする。"""
        self.ctx.clear(*color, 1.0)

    def _mode_for(self, command: DrawCommand) -> int:
        if isinstance(command, FillPolygon):
            return self.ctx.TRIANGLE_FAN
        if isinstance(command, LineSegments):
            return self.ctx.LINES
        if isinstance(command, PointSet):
            return self.ctx.POINTS
        raise TypeError(f"SceneRenderer で処理できない型: {type(command)!r}")

    def render_frame(self, commands: Sequence[DrawCommand]) -> FrameStats:
        """コマンド列を先頭から順に描く（深度テストなし、後勝ち）。"""
        # alpha < 1 のコマンド（ボートの反射）だけが実際に混ざる。alpha=1 は上書きと同じ。
        self.ctx.enable(moderngl.BLEND)
        self.ctx.blend_func = moderngl.SRC_ALPHA, moderngl.ONE_MINUS_SRC_ALPHA

        draw_calls = 0
        vertices = 0
        mesh = self._mesh
        for command in commands:
            data = command_vertices(command)
            if data.shape[0] == 0:
                continue
            mode = self._mode_for(command)
            mesh.upload(data)
            self.program["color"].value = command.color
            mesh.vao.render(mode=mode, vertices=mesh.vertex_count)
            draw_calls += 1
            vertices += mesh.vertex_count

        self.ctx.disable(moderngl.BLEND)
        return FrameStats(draw_calls=draw_calls, vertices=vertices)

    def release(self) -> None:
        """GPU リソースを解放する。"""
        self._mesh.release()
        self.program.release()
        self.ctx.release()

    def finish(self) -> None:
        """GPU の完了を待つ（計測用）。"""
        self.ctx.finish()
