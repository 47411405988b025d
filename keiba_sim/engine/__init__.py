"""ゲームエンジンパッケージ"""

from keiba_sim.engine.clock import Clock, MonotonicClock
from keiba_sim.engine.game import GameEngine
from keiba_sim.engine.progress import ProgressDriver, TickResult, tick
from keiba_sim.engine.runner import FrameLoop, FrameScheduler, RaceRunner

__all__ = [
    "Clock",
    "FrameLoop",
    "FrameScheduler",
    "GameEngine",
    "MonotonicClock",
    "ProgressDriver",
    "RaceRunner",
    "TickResult",
    "tick",
]
