"""時刻ソース

ゲームエンジンは `now_ms()` を通じて時刻を取得する。
テストでは任意の時刻を返すクロックに差し替える。
"""

import time
from typing import Protocol


class Clock(Protocol):
    """ミリ秒単位の単調増加クロック"""

    def now_ms(self) -> float:
        """現在時刻（ミリ秒）を返す"""
        ...


class MonotonicClock:
    """time.monotonic() ベースのクロック

    speed を指定すると経過時間を倍速にする（早送り再生用）。
    """

    def __init__(self, speed: float = 1.0) -> None:
        """初期化

        Args:
            speed: 再生速度の倍率（正の値）
        """
        if speed <= 0:
            raise ValueError(f"speed must be positive: {speed}")
        self._speed = speed
        self._origin = time.monotonic()

    @property
    def speed(self) -> float:
        return self._speed

    def now_ms(self) -> float:
        return (time.monotonic() - self._origin) * 1000.0 * self._speed
