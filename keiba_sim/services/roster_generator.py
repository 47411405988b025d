"""ロスター生成"""

import random

from keiba_sim.constants import FALLBACK_COLOR, HORSE_COLORS, HORSE_NAMES
from keiba_sim.models.horse import Horse


def generate_horses(rng: random.Random | None = None) -> list[Horse]:
    """ロスター（20頭）を生成する

    調子は1〜100の整数から独立に一様抽選する。
    表示色はロスター順にパレットから割り当て、パレットを超えた馬には
    FALLBACK_COLORを割り当てる。

    Args:
        rng: 乱数生成器（Noneの場合は新しいインスタンスを使用）

    Returns:
        ID 1〜20 の馬リスト
    """
    rng = rng or random.Random()
    return [
        Horse(
            id=index + 1,
            name=name,
            condition=rng.randint(1, 100),
            color=HORSE_COLORS[index] if index < len(HORSE_COLORS) else FALLBACK_COLOR,
        )
        for index, name in enumerate(HORSE_NAMES)
    ]
