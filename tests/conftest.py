"""共通フィクスチャ"""

import random

import pytest


class FakeClock:
    """テスト用クロック（時刻を手動で進める）"""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def now_ms(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


class FakeScheduler:
    """テスト用フレームスケジューラ（予約されたコールバックを保持するだけ）"""

    def __init__(self) -> None:
        self.callbacks = []

    def schedule(self, callback) -> None:
        self.callbacks.append(callback)

    def run_next(self) -> None:
        callback = self.callbacks.pop(0)
        callback()


@pytest.fixture
def clock():
    """時刻0から始まるテスト用クロック"""
    return FakeClock()


@pytest.fixture
def scheduler():
    """テスト用フレームスケジューラ"""
    return FakeScheduler()


@pytest.fixture
def rng():
    """固定シードの乱数生成器"""
    return random.Random(20240101)
