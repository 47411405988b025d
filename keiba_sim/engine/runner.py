"""フレームスケジューラとレース実行ループ

RaceRunner は RACING の間だけ次のフレームを予約する。
一時停止は実行中のフレームを中断せず、次のフレームの予約を止めるだけ。
"""

import logging
import time
from collections import deque
from typing import Callable, Protocol

from keiba_sim.config.tuning import FRAME_INTERVAL_SEC
from keiba_sim.engine.game import GameEngine
from keiba_sim.engine.progress import ProgressDriver, TickResult
from keiba_sim.models.game_state import GameStatus, RoundCompleted

logger = logging.getLogger(__name__)

FrameCallback = Callable[[], None]


class FrameScheduler(Protocol):
    """フレーム単位でコールバックを実行するスケジューラ"""

    def schedule(self, callback: FrameCallback) -> None:
        """次のフレームでコールバックを実行するよう予約する"""
        ...


class FrameLoop:
    """約60Hzでコールバックを実行するブロッキングなスケジューラ

    Example:
        >>> loop = FrameLoop()
        >>> runner = RaceRunner(engine, loop)
        >>> runner.start()
        >>> loop.run()
    """

    def __init__(
        self,
        interval: float = FRAME_INTERVAL_SEC,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._interval = interval
        self._sleep = sleep
        self._queue: deque[FrameCallback] = deque()

    def schedule(self, callback: FrameCallback) -> None:
        self._queue.append(callback)

    @property
    def pending(self) -> int:
        return len(self._queue)

    def run(self, max_frames: int | None = None) -> int:
        """予約されたコールバックがなくなるまで実行する

        Args:
            max_frames: 実行するフレーム数の上限（Noneの場合は無制限）

        Returns:
            実行したフレーム数
        """
        frames = 0
        while self._queue:
            if max_frames is not None and frames >= max_frames:
                break
            callback = self._queue.popleft()
            callback()
            frames += 1
            if self._queue:
                self._sleep(self._interval)
        return frames


class RaceRunner:
    """ゲームエンジンとフレームスケジューラをつなぐ実行ループ

    ラウンド完了イベントを受け取り、auto_advance が有効なら
    次のラウンドを自動で開始する。
    """

    def __init__(
        self,
        engine: GameEngine,
        scheduler: FrameScheduler,
        auto_advance: bool = True,
        on_frame: Callable[[TickResult], None] | None = None,
    ) -> None:
        """初期化

        Args:
            engine: ゲームエンジン
            scheduler: フレームスケジューラ
            auto_advance: ラウンド完了時に次のラウンドを自動開始するか
            on_frame: 各フレームの進捗計算後に呼ばれるコールバック（描画用）
        """
        self._engine = engine
        self._scheduler = scheduler
        self._driver = ProgressDriver(engine)
        self._on_frame = on_frame
        self._frame_pending = False
        self.auto_advance = auto_advance
        engine.subscribe(self._handle_round_completed)

    @property
    def frame_pending(self) -> bool:
        return self._frame_pending

    def start(self) -> bool:
        """レースを開始または再開し、フレームを予約する

        Returns:
            開始または再開した場合True
        """
        started = self._engine.start_race()
        if self._engine.is_racing:
            self._request_frame()
        return started

    def pause(self) -> bool:
        """レースを一時停止する（予約済みのフレームは1回だけ実行されて終了する）"""
        return self._engine.pause_race()

    def close(self) -> None:
        """イベントの購読を解除する"""
        self._engine.unsubscribe(self._handle_round_completed)

    def _request_frame(self) -> None:
        # 多重ループを防ぐため、予約は常に1つまで
        if self._frame_pending:
            return
        self._frame_pending = True
        self._scheduler.schedule(self._frame)

    def _frame(self) -> None:
        self._frame_pending = False
        result = self._driver.step()
        if self._on_frame is not None:
            self._on_frame(result)
        if self._engine.is_racing:
            self._request_frame()

    def _handle_round_completed(self, event: RoundCompleted) -> None:
        if not self.auto_advance:
            return
        if self._engine.game_status == GameStatus.PROGRAM_GENERATED:
            logger.debug("Auto-advancing to round index %d", self._engine.current_round_index)
            self.start()
