"""ゲームステートマシン

ゲーム状態・ラウンド・計測状態を所有し、全ての状態遷移をコマンドとして提供する。

状態遷移:
    IDLE / COMPLETED --generate_program--> PROGRAM_GENERATED
    PROGRAM_GENERATED --start_race--> RACING
    RACING --pause_race--> PAUSED --start_race--> RACING
    RACING --complete_current_race--> PROGRAM_GENERATED / COMPLETED
    任意 --reset_game--> IDLE

前提条件を満たさないコマンドは例外を投げず、何もせずに False を返す。
"""

import logging
import random
from typing import Callable

from keiba_sim.constants import HORSES_PER_RACE, INITIAL_ROUND_INDEX
from keiba_sim.engine.clock import Clock, MonotonicClock
from keiba_sim.models.game_state import GameState, GameStatus, RoundCompleted
from keiba_sim.models.horse import Horse
from keiba_sim.models.race import Race, RaceStatus
from keiba_sim.models.race_result import RaceResult
from keiba_sim.services.outcome_simulator import build_results, simulate_race
from keiba_sim.services.program_builder import generate_race_program
from keiba_sim.services.roster_generator import generate_horses

logger = logging.getLogger(__name__)

RoundCompletedListener = Callable[[RoundCompleted], None]


class GameEngine:
    """ゲームセッションのステートマシン

    1インスタンスが1つの GameState を所有する。
    グローバルな状態は持たないため、複数のセッションを同時に扱える。
    """

    def __init__(
        self,
        clock: Clock | None = None,
        rng: random.Random | None = None,
        state: GameState | None = None,
    ) -> None:
        """初期化

        Args:
            clock: 時刻ソース（Noneの場合は MonotonicClock）
            rng: 乱数生成器（ロスター生成・出走馬抽選・結果シミュレーションで共有）
            state: 初期状態（Noneの場合は IDLE の空状態）
        """
        self._clock = clock or MonotonicClock()
        self._rng = rng or random.Random()
        self._state = state or GameState()
        self._listeners: list[RoundCompletedListener] = []

    # === 読み取りモデル ===

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def game_status(self) -> GameStatus:
        return self._state.game_status

    @property
    def all_horses(self) -> list[Horse]:
        return self._state.all_horses

    @property
    def race_program(self) -> list[Race]:
        return self._state.race_program

    @property
    def current_round_index(self) -> int:
        return self._state.current_round_index

    @property
    def completed_races(self) -> list[Race]:
        return self._state.completed_races

    @property
    def current_race(self) -> Race | None:
        """現在のラウンドのレース（範囲外の場合はNone）"""
        return self._race_at(self._state.current_round_index)

    @property
    def is_racing(self) -> bool:
        return self._state.game_status == GameStatus.RACING

    @property
    def is_paused(self) -> bool:
        return self._state.game_status == GameStatus.PAUSED

    @property
    def can_generate(self) -> bool:
        return self._state.game_status in (GameStatus.IDLE, GameStatus.COMPLETED)

    @property
    def can_start(self) -> bool:
        return self._state.game_status in (
            GameStatus.PROGRAM_GENERATED,
            GameStatus.PAUSED,
            GameStatus.RACING,
        )

    # === イベント ===

    def subscribe(self, listener: RoundCompletedListener) -> None:
        """ラウンド完了イベントのリスナーを登録する"""
        self._listeners.append(listener)

    def unsubscribe(self, listener: RoundCompletedListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # === コマンド ===

    def initialize_game(self) -> bool:
        """ロスターを生成する（生成済みの場合は何もしない）"""
        if self._state.all_horses:
            return False
        self._state.all_horses = generate_horses(self._rng)
        logger.info("Roster initialized: %d horses", len(self._state.all_horses))
        return True

    def generate_program(self) -> bool:
        """レースプログラムを生成する

        既存のプログラムと完了済みレースの履歴は破棄する。

        Returns:
            生成した場合True
        """
        state = self._state
        if not self.can_generate:
            logger.debug("generate_program ignored: status=%s", state.game_status.value)
            return False
        if not state.all_horses:
            logger.debug("generate_program ignored: roster is empty")
            return False

        state.race_program = generate_race_program(state.all_horses, rng=self._rng)
        state.current_round_index = INITIAL_ROUND_INDEX
        state.completed_races = []
        state.game_status = GameStatus.PROGRAM_GENERATED
        state.reset_race_timing()
        logger.info(
            "Program generated: %d rounds, %d horses per race",
            len(state.race_program),
            min(HORSES_PER_RACE, len(state.all_horses)),
        )
        return True

    def start_race(self) -> bool:
        """現在のラウンドを開始する、または一時停止中のレースを再開する

        RACING 中に呼ばれた場合は何もしない。

        Returns:
            開始または再開した場合True
        """
        status = self._state.game_status
        if status == GameStatus.PAUSED:
            return self._resume_race()
        if status == GameStatus.RACING:
            logger.debug("start_race ignored: already racing")
            return False
        if status != GameStatus.PROGRAM_GENERATED:
            logger.debug("start_race ignored: status=%s", status.value)
            return False

        race = self.current_race
        if race is None:
            logger.debug(
                "start_race ignored: no race at round index %d",
                self._state.current_round_index,
            )
            return False

        state = self._state
        simulation = simulate_race(race, rng=self._rng)
        race.status = RaceStatus.RUNNING
        state.current_race_simulation = simulation
        state.race_start_time = self._clock.now_ms()
        state.race_paused_time = None
        state.elapsed_before_pause = 0.0
        state.game_status = GameStatus.RACING
        logger.info("Round %d started: %dm", race.round_number, race.distance)
        return True

    def _resume_race(self) -> bool:
        state = self._state
        # 一時停止までの経過時間を累積し、計測の起点を現在時刻に移す
        if state.race_paused_time is not None and state.race_start_time is not None:
            state.elapsed_before_pause += state.race_paused_time - state.race_start_time
        state.race_start_time = self._clock.now_ms()
        state.race_paused_time = None
        state.game_status = GameStatus.RACING
        logger.info("Race resumed: elapsed_before_pause=%.1fms", state.elapsed_before_pause)
        return True

    def pause_race(self) -> bool:
        """レースを一時停止する

        Returns:
            一時停止した場合True
        """
        state = self._state
        if state.game_status != GameStatus.RACING:
            logger.debug("pause_race ignored: status=%s", state.game_status.value)
            return False
        state.race_paused_time = self._clock.now_ms()
        state.game_status = GameStatus.PAUSED
        logger.info("Race paused at %.1fms", state.race_paused_time)
        return True

    def reset_game(self) -> None:
        """ゲームを初期状態に戻す（ロスターは保持）"""
        state = self._state
        state.race_program = []
        state.current_round_index = INITIAL_ROUND_INDEX
        state.completed_races = []
        state.game_status = GameStatus.IDLE
        state.reset_race_timing()
        logger.info("Game reset")

    def complete_current_race(self) -> bool:
        """全馬ゴール後に現在のレースを確定し、次のラウンドへ進める

        Progress Driver から呼ばれる。RACING でない場合は何もしない。
        ラウンドを進めた後、RoundCompleted イベントを通知する。

        Returns:
            確定した場合True
        """
        state = self._state
        if state.game_status != GameStatus.RACING or state.current_race_simulation is None:
            logger.debug("complete_current_race ignored: status=%s", state.game_status.value)
            return False

        round_index = state.current_round_index
        results = build_results(state.current_race_simulation)
        if not self.complete_race(round_index, results):
            return False
        snapshot = state.completed_races[-1]

        self.next_round()

        winner = results[0].horse_name if results else "-"
        logger.info("Round %d completed: winner=%s", snapshot.round_number, winner)

        event = RoundCompleted(
            round_index=round_index,
            race=snapshot,
            results=tuple(results),
            game_status=state.game_status,
        )
        for listener in list(self._listeners):
            listener(event)
        return True

    # === 低レベル操作 ===

    def update_horse_position(self, round_index: int, horse_id: int, position: float) -> bool:
        """出走馬の進捗率を更新する（レースまたは馬が存在しない場合は無視）"""
        race = self._race_at(round_index)
        if race is None:
            return False
        horse = race.find_horse(horse_id)
        if horse is None:
            return False
        horse.position = position
        return True

    def complete_race(self, round_index: int, results: list[RaceResult]) -> bool:
        """レースを完了にして履歴へスナップショットを追加する

        レースが存在しない場合は無視する。
        """
        race = self._race_at(round_index)
        if race is None:
            return False
        race.status = RaceStatus.COMPLETED
        race.results = list(results)
        self._state.completed_races.append(race.snapshot())
        return True

    def next_round(self) -> None:
        """次のラウンドへ進める（最終ラウンドを超えた場合は COMPLETED）"""
        state = self._state
        # インデックスはプログラム長を超えない
        if state.current_round_index < len(state.race_program):
            state.current_round_index += 1
        state.reset_race_timing()
        if state.current_round_index >= len(state.race_program):
            state.game_status = GameStatus.COMPLETED
            logger.info("Tournament completed: %d races", len(state.completed_races))
        else:
            state.game_status = GameStatus.PROGRAM_GENERATED

    def _race_at(self, round_index: int) -> Race | None:
        if 0 <= round_index < len(self._state.race_program):
            return self._state.race_program[round_index]
        return None
