"""
どこで: `src/villagescape/interactive/gl/shader.py`。
何を: 単色の塗り・線・点を描くための GLSL プログラムを生成する。
なぜ: 全コマンドを 1 つのプログラム（uniform の色だけ差し替え）で描くため。
"""

from __future__ import annotations

from typing import Any

VERTEX_SHADER = """
#version 410

uniform mat4 projection;

in vec2 in_vert;

void main() {
    gl_Position = projection * vec4(in_vert, 0.0, 1.0);
}
"""

FRAGMENT_SHADER = """
#version 410

uniform vec4 color;

out vec4 frag_color;

void main() {
    frag_color = color;
}
"""


class Shader:
    """シェーダプログラムのファクトリ。"""

    @staticmethod
    def create_shader(ctx: Any) -> Any:
        """`projection` と `color` を uniform に持つプログラムを返す。"""
        return ctx.program(vertex_shader=VERTEX_SHADER, fragment_shader=FRAGMENT_SHADER)
