"""レースプログラム構築"""

import random

from keiba_sim.constants import HORSES_PER_RACE, RACE_DISTANCES
from keiba_sim.models.horse import Horse
from keiba_sim.models.race import Race, RaceStatus


def select_random_horses(
    all_horses: list[Horse],
    count: int = HORSES_PER_RACE,
    rng: random.Random | None = None,
) -> list[Horse]:
    """出走馬を非復元抽出する

    ロスターのコピーをシャッフルして先頭から選ぶ。
    呼び出し元のリストと馬は変更しない。

    Args:
        all_horses: ロスター
        count: 出走頭数（ロスターより多い場合はロスター全頭）
        rng: 乱数生成器

    Returns:
        レース単位のフィールドを初期化した馬のコピー
    """
    rng = rng or random.Random()
    shuffled = list(all_horses)
    rng.shuffle(shuffled)
    return [horse.for_race() for horse in shuffled[:count]]


def generate_race_program(
    all_horses: list[Horse], rng: random.Random | None = None
) -> list[Race]:
    """6ラウンドのレースプログラムを生成する

    Args:
        all_horses: ロスター
        rng: 乱数生成器

    Returns:
        距離昇順のレースリスト（全レース pending）
    """
    rng = rng or random.Random()
    return [
        Race(
            round_number=index + 1,
            distance=distance,
            horses=select_random_horses(all_horses, rng=rng),
            status=RaceStatus.PENDING,
            results=None,
        )
        for index, distance in enumerate(RACE_DISTANCES)
    ]
