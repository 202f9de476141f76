"""
どこで: リポジトリ直下 `main.py`。
何を: 村の風景ウィンドウを起動する。
なぜ: 動作確認用の最小エントリポイントとして利用するため。
"""

from villagescape import run

if __name__ == "__main__":
    run()
