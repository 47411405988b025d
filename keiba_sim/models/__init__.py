"""データモデルパッケージ"""

from keiba_sim.models.game_state import GameState, GameStatus, RoundCompleted
from keiba_sim.models.horse import Horse
from keiba_sim.models.race import Race, RaceStatus
from keiba_sim.models.race_result import RaceResult

__all__ = [
    "GameState",
    "GameStatus",
    "Horse",
    "Race",
    "RaceResult",
    "RaceStatus",
    "RoundCompleted",
]
