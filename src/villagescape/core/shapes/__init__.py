# どこで: `src/villagescape/core/shapes/__init__.py`。
# 何を: 村の風景を構成する図形ビルダーを再エクスポートする。
# なぜ: シーン合成側から図形を 1 箇所で import できるようにするため。

from __future__ import annotations

from .boat import boat, boat_reflection
from .cloud import cloud
from .house import house
from .landscape import ground, hills, sky
from .river import river
from .sun import sun
from .tree import tree
from .windmill import windmill

__all__ = [
    "boat",
    "boat_reflection",
    "cloud",
    "ground",
    "hills",
    "house",
    "river",
    "sky",
    "sun",
    "tree",
    "windmill",
]
