# どこで: `src/villagescape/interactive/runtime/__init__.py`。
# 何を: interactive 実行時の「ループ/サブシステム」実装をまとめるパッケージ定義。
# なぜ: `src/villagescape/api/runner.py` を配線だけに保ち、責務ごとに実装を分けるため。

from __future__ import annotations

__all__ = []
