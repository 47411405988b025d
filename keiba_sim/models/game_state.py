"""GameStateモデル定義

ゲームセッション全体の状態を保持する集約。
"""

from dataclasses import dataclass, field
from enum import Enum

from keiba_sim.constants import INITIAL_ROUND_INDEX
from keiba_sim.models.horse import Horse
from keiba_sim.models.race import Race
from keiba_sim.models.race_result import RaceResult


class GameStatus(str, Enum):
    """ゲームの状態"""

    IDLE = "idle"
    PROGRAM_GENERATED = "program_generated"
    RACING = "racing"
    PAUSED = "paused"
    COMPLETED = "completed"


@dataclass
class GameState:
    """ゲーム状態

    Attributes:
        all_horses: ロスター（セッション中は保持される）
        race_program: レースプログラム
        current_round_index: 現在のラウンドインデックス
        game_status: ゲームの状態
        completed_races: 完了したレースのスナップショット
        current_race_simulation: 現在のレースのシミュレーション結果（速い順）
        race_start_time: 計測開始時刻（ミリ秒）
        race_paused_time: 一時停止した時刻（ミリ秒）
        elapsed_before_pause: 一時停止までに経過したレース時間の累計（ミリ秒）
    """

    all_horses: list[Horse] = field(default_factory=list)
    race_program: list[Race] = field(default_factory=list)
    current_round_index: int = INITIAL_ROUND_INDEX
    game_status: GameStatus = GameStatus.IDLE
    completed_races: list[Race] = field(default_factory=list)
    current_race_simulation: list[Horse] | None = None
    race_start_time: float | None = None
    race_paused_time: float | None = None
    elapsed_before_pause: float = 0.0

    def reset_race_timing(self) -> None:
        """レースの計測状態を初期化する"""
        self.current_race_simulation = None
        self.race_start_time = None
        self.race_paused_time = None
        self.elapsed_before_pause = 0.0


@dataclass(frozen=True)
class RoundCompleted:
    """ラウンド完了イベント

    Attributes:
        round_index: 完了したラウンドのインデックス
        race: 完了したレースのスナップショット
        results: レース結果
        game_status: ラウンドを進めた後のゲーム状態
    """

    round_index: int
    race: Race
    results: tuple[RaceResult, ...]
    game_status: GameStatus
