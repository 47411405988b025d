"""Progress Driver

経過時間から各馬の進捗率を計算し、レースの完了を検出する。

tick() は呼び出しごとの内部状態を持たず、GameState の計測情報と
現在時刻だけから進捗を再計算するため、フレームレートに依存しない。
"""

import logging
from dataclasses import dataclass

from keiba_sim.constants import PROGRESS_COMPLETE
from keiba_sim.engine.game import GameEngine
from keiba_sim.models.game_state import GameState, GameStatus
from keiba_sim.models.race import Race

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TickResult:
    """1フレーム分の進捗計算結果

    Attributes:
        running: 進捗を計算したかどうか（RACING でなければFalse）
        finished: 全馬がゴールしたかどうか
        total_elapsed: 一時停止を除いたレース経過時間（ミリ秒）
    """

    running: bool
    finished: bool
    total_elapsed: float = 0.0


NOT_RUNNING = TickResult(running=False, finished=False)


def _current_race(state: GameState) -> Race | None:
    if 0 <= state.current_round_index < len(state.race_program):
        return state.race_program[state.current_round_index]
    return None


def tick(state: GameState, now_ms: float) -> TickResult:
    """1フレーム分の進捗を計算して出走馬の position に書き込む

    RACING でない場合（フレーム間に一時停止された場合など）は何も書き込まない。
    全馬が100%に達した場合は全馬の position を 100 に揃える。

    Args:
        state: ゲーム状態
        now_ms: 現在時刻（ミリ秒）

    Returns:
        TickResult
    """
    simulation = state.current_race_simulation
    if (
        state.game_status != GameStatus.RACING
        or not simulation
        or state.race_start_time is None
    ):
        return NOT_RUNNING

    race = _current_race(state)
    if race is None:
        return NOT_RUNNING

    total_elapsed = state.elapsed_before_pause + (now_ms - state.race_start_time)
    slowest_time = max(horse.finish_time or 0.0 for horse in simulation)

    all_finished = True
    for horse in simulation:
        finish_time = horse.finish_time or slowest_time
        if finish_time > 0:
            progress = min(total_elapsed / finish_time * PROGRESS_COMPLETE, PROGRESS_COMPLETE)
        else:
            progress = PROGRESS_COMPLETE
        progress = max(progress, 0.0)

        participant = race.find_horse(horse.id)
        if participant is not None:
            participant.position = progress

        if progress < PROGRESS_COMPLETE:
            all_finished = False

    if all_finished:
        # 浮動小数点の誤差を吸収して全馬を100%に揃える
        for horse in simulation:
            participant = race.find_horse(horse.id)
            if participant is not None:
                participant.position = PROGRESS_COMPLETE

    return TickResult(running=True, finished=all_finished, total_elapsed=total_elapsed)


class ProgressDriver:
    """tick() を実行し、完了検出時にステートマシンへ通知する"""

    def __init__(self, engine: GameEngine) -> None:
        """初期化

        Args:
            engine: GameEngine
        """
        self._engine = engine

    def step(self, now_ms: float | None = None) -> TickResult:
        """1フレーム分の進捗を進める

        Args:
            now_ms: 現在時刻（Noneの場合はエンジンのクロックから取得）

        Returns:
            TickResult
        """
        if now_ms is None:
            now_ms = self._engine.clock.now_ms()

        result = tick(self._engine.state, now_ms)
        if result.finished:
            logger.debug("All horses finished at %.1fms", result.total_elapsed)
            self._engine.complete_current_race()
        return result
