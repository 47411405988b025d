"""レース結果シミュレーション

各馬の速度を調子・距離・乱数から計算し、ゴールタイムを求める。

速度 = 調子係数 × 距離係数 × ランダム係数
ゴールタイム = 距離 × 8ms / 速度
"""

import random
from dataclasses import replace

from keiba_sim.config.tuning import (
    BASE_TIME_MS_PER_METER,
    CONDITION_OFFSET,
    CONDITION_SCALE,
    DISTANCE_JITTER_MAX,
    DISTANCE_NORMALIZER,
    DISTANCE_PIVOT,
    DISTANCE_SLOPE,
    RANDOM_FACTOR_MIN,
    RANDOM_FACTOR_SPAN,
)
from keiba_sim.models.horse import Horse
from keiba_sim.models.race import Race
from keiba_sim.models.race_result import RaceResult


def calculate_horse_speed(
    horse: Horse, distance: int, rng: random.Random | None = None
) -> float:
    """馬の速度を計算する

    Args:
        horse: 出走馬
        distance: 距離（メートル）
        rng: 乱数生成器

    Returns:
        速度（正の値）
    """
    rng = rng or random.Random()

    # 調子係数（0.5〜1.5）
    condition_factor = horse.condition / CONDITION_SCALE + CONDITION_OFFSET

    # 距離係数（1200〜2200mを0.95〜1.05に正規化し、ジッターを加える）
    normalized_distance = (distance - DISTANCE_PIVOT) / DISTANCE_NORMALIZER
    distance_factor = 1 + normalized_distance * DISTANCE_SLOPE + rng.random() * DISTANCE_JITTER_MAX

    random_factor = RANDOM_FACTOR_MIN + rng.random() * RANDOM_FACTOR_SPAN

    return condition_factor * distance_factor * random_factor


def simulate_race(race: Race, rng: random.Random | None = None) -> list[Horse]:
    """レースをシミュレートしてゴールタイムを計算する

    入力のレースは変更しない。同タイムの場合は出走順を保つ（安定ソート）。

    Args:
        race: 対象レース
        rng: 乱数生成器

    Returns:
        ゴールタイム昇順（速い順）の馬のコピー
    """
    rng = rng or random.Random()
    base_time = race.distance * BASE_TIME_MS_PER_METER

    horses_with_times = [
        replace(
            horse,
            finish_time=base_time / calculate_horse_speed(horse, race.distance, rng),
            position=0.0,
        )
        for horse in race.horses
    ]

    return sorted(horses_with_times, key=lambda horse: horse.finish_time or 0.0)


def build_results(simulation: list[Horse]) -> list[RaceResult]:
    """シミュレーション順からレース結果を構築する

    Args:
        simulation: ゴールタイム昇順の馬リスト

    Returns:
        着順1始まりのレース結果リスト
    """
    return [
        RaceResult(
            position=index + 1,
            horse_name=horse.name,
            horse_id=horse.id,
            time=horse.finish_time or 0.0,
        )
        for index, horse in enumerate(simulation)
    ]
