"""
どこで: `src/villagescape/interactive/gl/vertex_mesh.py`。
何を: VBO/VAO の確保・更新・解放を担当し、描画可能な VertexMesh を管理。
なぜ: GPU 転送の詳細を Renderer から切り離し、再確保や VAO の張り直しを一元化するため。
"""

from __future__ import annotations

from typing import Any

import numpy as np


class VertexMesh:
    """
    1 つの描画コマンド分の 2D 頂点を GPU に送り込む作業を管理
    """

    def __init__(
        self,
        ctx: Any,
        program: Any,
        # 1 コマンドの頂点は高々数千点なので初期確保は小さくてよい（既定: 256KB）。
        initial_reserve: int = 256 * 1024,
    ):
        """
        ctx: moderngl コンテキスト
        program: `in_vert`（vec2）を入力に持つシェーダープログラム
        VBO (Vertex Buffer Object): GPU に送る頂点データを格納するメモリ。
        VAO (Vertex Array Object): VBO とプログラム入力の対応を保持する。
        """
        self.ctx = ctx
        self.program = program
        self.initial_reserve = int(initial_reserve)

        self.vbo = ctx.buffer(reserve=self.initial_reserve, dynamic=True)
        self.vao = ctx.simple_vertex_array(program, self.vbo, "in_vert")

        self.vertex_count: int = 0

    def _ensure_capacity(self, vbo_size: int) -> None:
        """データが大きくなったら GPU のバッファを再確保"""
        if vbo_size <= self.vbo.size:
            return
        self.vbo.release()
        self.vbo = self.ctx.buffer(reserve=max(vbo_size, self.initial_reserve), dynamic=True)
        # VAO は VBO が差し替わるときだけ張り直す。
        self.vao.release()
        self.vao = self.ctx.simple_vertex_array(self.program, self.vbo, "in_vert")

    def upload(self, vertices: np.ndarray) -> None:
        """(N, 2) の頂点を GPU へ送る"""
        vertices_f32 = np.ascontiguousarray(vertices, dtype=np.float32)
        self._ensure_capacity(vertices_f32.nbytes)

        self.vbo.orphan()
        self.vbo.write(vertices_f32)

        self.vertex_count = int(vertices_f32.shape[0])

    def release(self) -> None:
        """GPU のメモリを解放する（終了時に使う）"""
        self.vbo.release()
        self.vao.release()
