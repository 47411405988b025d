"""レース結果シミュレーションの調整値

経験的に決められた値のため、リテラルのまま保持する。
"""

# 基準タイム: 速度1.0のとき1メートルあたり8ミリ秒
BASE_TIME_MS_PER_METER = 8

# 調子係数 = condition / CONDITION_SCALE + CONDITION_OFFSET（0.5〜1.5）
CONDITION_SCALE = 100
CONDITION_OFFSET = 0.5

# 距離係数 = 1 + ((distance - DISTANCE_PIVOT) / DISTANCE_NORMALIZER) * DISTANCE_SLOPE + ジッター
DISTANCE_PIVOT = 1700
DISTANCE_NORMALIZER = 1000
DISTANCE_SLOPE = 0.1
DISTANCE_JITTER_MAX = 0.3  # [0, 0.3)

# ランダム係数 = RANDOM_FACTOR_MIN + random() * RANDOM_FACTOR_SPAN（[0.8, 1.2)）
RANDOM_FACTOR_MIN = 0.8
RANDOM_FACTOR_SPAN = 0.4

# フレーム間隔（約60Hz）
FRAME_INTERVAL_SEC = 1 / 60
