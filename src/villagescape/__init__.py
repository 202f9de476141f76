# どこで: `src/villagescape/__init__.py`。
# 何を: ルート `villagescape` パッケージを定義する。
# なぜ: import 起点を `villagescape` に統一するため。

from __future__ import annotations

from villagescape.api import Export, run
from villagescape.core.animation import AnimationParams, AnimationState, advance
from villagescape.core.scene import compose_scene

__all__ = [
    "AnimationParams",
    "AnimationState",
    "Export",
    "advance",
    "compose_scene",
    "run",
]
