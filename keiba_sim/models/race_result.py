"""RaceResultモデル定義"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RaceResult:
    """1頭分のレース結果（イミュータブル）

    Attributes:
        position: 着順（1始まり）
        horse_name: 馬名
        horse_id: 馬ID
        time: ゴールタイム（ミリ秒）
    """

    position: int
    horse_name: str
    horse_id: int
    time: float
