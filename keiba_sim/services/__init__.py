"""サービス層

ロスター生成・プログラム構築・レース結果シミュレーション・成績集計を提供する。
"""

from keiba_sim.services.outcome_simulator import (
    build_results,
    calculate_horse_speed,
    simulate_race,
)
from keiba_sim.services.program_builder import generate_race_program, select_random_horses
from keiba_sim.services.roster_generator import generate_horses
from keiba_sim.services.standings import Standing, calculate_standings

__all__ = [
    "Standing",
    "build_results",
    "calculate_horse_speed",
    "calculate_standings",
    "generate_horses",
    "generate_race_program",
    "select_random_horses",
    "simulate_race",
]
