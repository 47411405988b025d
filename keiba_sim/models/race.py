"""Raceモデル定義"""

import copy
from dataclasses import dataclass, field
from enum import Enum

from keiba_sim.models.horse import Horse
from keiba_sim.models.race_result import RaceResult


class RaceStatus(str, Enum):
    """レースの状態"""

    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"


@dataclass
class Race:
    """レースモデル

    Attributes:
        round_number: ラウンド番号（1始まり）
        distance: 距離（メートル）
        horses: 出走馬（ロスターから独立したコピー）
        status: レースの状態
        results: レース結果（完了するまではNone）
    """

    round_number: int
    distance: int
    horses: list[Horse] = field(default_factory=list)
    status: RaceStatus = RaceStatus.PENDING
    results: list[RaceResult] | None = None

    def find_horse(self, horse_id: int) -> Horse | None:
        """出走馬をIDで検索する

        Args:
            horse_id: 馬ID

        Returns:
            該当する出走馬（存在しない場合はNone）
        """
        for horse in self.horses:
            if horse.id == horse_id:
                return horse
        return None

    def snapshot(self) -> "Race":
        """履歴用のディープコピーを返す"""
        return copy.deepcopy(self)

    def __repr__(self) -> str:
        return (
            f"<Race(round_number={self.round_number!r}, "
            f"distance={self.distance!r}, status={self.status.value!r})>"
        )
