"""Progress Driver のテスト"""

import pytest

from keiba_sim.engine.game import GameEngine
from keiba_sim.engine.progress import ProgressDriver, tick
from keiba_sim.models import GameState, GameStatus, Horse, Race, RaceStatus


def make_horse(horse_id: int, finish_time: float | None = None) -> Horse:
    """テスト用Horseを生成"""
    return Horse(
        id=horse_id,
        name=f"Horse {horse_id}",
        condition=50,
        color="#FF0000",
        finish_time=finish_time,
    )


def make_racing_state(
    finish_times: dict[int, float | None],
    rounds: int = 1,
    start: float = 0.0,
    elapsed_before_pause: float = 0.0,
) -> GameState:
    """RACING中のGameStateを生成（finish_times: 馬ID -> ゴールタイム、速い順）"""
    program = [
        Race(
            round_number=number,
            distance=1200,
            horses=[make_horse(horse_id) for horse_id in finish_times],
        )
        for number in range(1, rounds + 1)
    ]
    program[0].status = RaceStatus.RUNNING
    return GameState(
        race_program=program,
        game_status=GameStatus.RACING,
        current_race_simulation=[
            make_horse(horse_id, finish_time) for horse_id, finish_time in finish_times.items()
        ],
        race_start_time=start,
        elapsed_before_pause=elapsed_before_pause,
    )


def positions(state: GameState, round_index: int = 0) -> dict[int, float]:
    return {horse.id: horse.position for horse in state.race_program[round_index].horses}


class TestTick:
    """tick()のテスト"""

    def test_progress_is_elapsed_over_finish_time(self):
        """進捗率 = 経過時間 / ゴールタイム × 100"""
        state = make_racing_state({1: 1000.0, 2: 2000.0})

        result = tick(state, 500.0)

        assert result.running is True
        assert result.finished is False
        assert result.total_elapsed == 500.0
        assert positions(state) == {1: pytest.approx(50.0), 2: pytest.approx(25.0)}

    def test_progress_is_clamped_to_100(self):
        """先にゴールした馬は100で止まる"""
        state = make_racing_state({1: 1000.0, 2: 2000.0})

        result = tick(state, 1500.0)

        assert result.finished is False
        assert positions(state) == {1: 100.0, 2: pytest.approx(75.0)}

    def test_finished_when_all_reach_100(self):
        """全馬が100に達すると完了"""
        state = make_racing_state({1: 1000.0, 2: 2000.0})

        result = tick(state, 2000.0)

        assert result.finished is True
        assert positions(state) == {1: 100.0, 2: 100.0}

    def test_uses_elapsed_before_pause(self):
        """一時停止前の経過時間を加算する"""
        state = make_racing_state({1: 1000.0, 2: 2000.0}, start=1000.0, elapsed_before_pause=400.0)

        tick(state, 1100.0)

        assert positions(state) == {1: pytest.approx(50.0), 2: pytest.approx(25.0)}

    def test_frame_rate_independent(self):
        """途中のフレーム数に関係なく同じ時刻なら同じ進捗"""
        stepped = make_racing_state({1: 1000.0, 2: 3000.0})
        direct = make_racing_state({1: 1000.0, 2: 3000.0})

        for now in (16.0, 33.0, 300.0, 701.0):
            tick(stepped, now)
        tick(direct, 701.0)

        assert positions(stepped) == positions(direct)

    @pytest.mark.parametrize(
        "status", [GameStatus.PAUSED, GameStatus.PROGRAM_GENERATED, GameStatus.COMPLETED, GameStatus.IDLE]
    )
    def test_not_running_outside_racing(self, status):
        """RACINGでなければ何も書き込まない"""
        state = make_racing_state({1: 1000.0, 2: 2000.0})
        state.game_status = status

        result = tick(state, 5000.0)

        assert result.running is False
        assert result.finished is False
        assert positions(state) == {1: 0.0, 2: 0.0}

    def test_not_running_without_simulation(self):
        """シミュレーションがない場合は何もしない"""
        state = make_racing_state({1: 1000.0})
        state.current_race_simulation = None

        assert tick(state, 5000.0).running is False

    def test_not_running_without_start_time(self):
        """開始時刻がない場合は何もしない"""
        state = make_racing_state({1: 1000.0})
        state.race_start_time = None

        assert tick(state, 5000.0).running is False

    def test_not_running_when_round_out_of_range(self):
        """現在のラウンドが範囲外の場合は何もしない"""
        state = make_racing_state({1: 1000.0})
        state.current_round_index = 1

        assert tick(state, 5000.0).running is False

    def test_missing_finish_time_uses_slowest(self):
        """ゴールタイムがない馬は最も遅いタイムを使う"""
        state = make_racing_state({1: 1000.0, 2: 4000.0, 3: None})

        tick(state, 2000.0)

        assert positions(state)[3] == pytest.approx(50.0)

    def test_unknown_horse_is_ignored(self):
        """レースにいない馬の進捗は書き込まない"""
        state = make_racing_state({1: 1000.0})
        state.current_race_simulation.append(make_horse(99, 500.0))

        result = tick(state, 1000.0)

        assert result.finished is True
        assert positions(state) == {1: 100.0}

    def test_does_not_touch_other_rounds(self):
        """他のラウンドの出走馬は変更しない"""
        state = make_racing_state({1: 1000.0, 2: 2000.0}, rounds=2)

        tick(state, 2000.0)

        assert positions(state, 1) == {1: 0.0, 2: 0.0}

    def test_idempotent_after_finish(self):
        """完了後に再実行しても値は変わらない"""
        state = make_racing_state({1: 1000.0, 2: 2000.0})
        tick(state, 2500.0)
        before = positions(state)

        tick(state, 9000.0)

        assert positions(state) == before == {1: 100.0, 2: 100.0}


class TestProgressDriver:
    """ProgressDriverのテスト"""

    def test_completes_race_when_finished(self, clock):
        """全馬ゴールでステートマシンにレース確定を通知する"""
        state = make_racing_state({1: 1000.0, 2: 2000.0}, rounds=2)
        engine = GameEngine(clock=clock, state=state)
        driver = ProgressDriver(engine)

        result = driver.step(2000.0)

        assert result.finished is True
        assert state.race_program[0].status == RaceStatus.COMPLETED
        assert [r.horse_id for r in state.race_program[0].results] == [1, 2]
        assert engine.current_round_index == 1
        assert engine.game_status == GameStatus.PROGRAM_GENERATED

    def test_does_not_complete_before_finish(self, clock):
        """ゴール前は確定しない"""
        state = make_racing_state({1: 1000.0, 2: 2000.0})
        engine = GameEngine(clock=clock, state=state)

        ProgressDriver(engine).step(1999.0)

        assert engine.game_status == GameStatus.RACING
        assert engine.completed_races == []

    def test_repeated_step_after_finish(self, clock):
        """完了後に再実行しても位置は変わらず、二重に確定しない"""
        state = make_racing_state({1: 1000.0, 2: 2000.0})
        engine = GameEngine(clock=clock, state=state)
        events = []
        engine.subscribe(events.append)
        driver = ProgressDriver(engine)
        driver.step(2500.0)
        before = positions(state)

        result = driver.step(8000.0)

        assert result.running is False
        assert positions(state) == before == {1: 100.0, 2: 100.0}
        assert len(engine.completed_races) == 1
        assert len(events) == 1
        assert engine.game_status == GameStatus.COMPLETED

    def test_uses_engine_clock_by_default(self, clock):
        """時刻を省略するとエンジンのクロックを使う"""
        state = make_racing_state({1: 1000.0, 2: 2000.0})
        engine = GameEngine(clock=clock, state=state)
        clock.now = 1000.0

        result = ProgressDriver(engine).step()

        assert result.total_elapsed == 1000.0
        assert positions(state) == {1: 100.0, 2: pytest.approx(50.0)}

    def test_paused_step_does_not_complete(self, clock):
        """一時停止後のフレームは確定も書き込みもしない"""
        state = make_racing_state({1: 1000.0, 2: 2000.0})
        engine = GameEngine(clock=clock, state=state)
        driver = ProgressDriver(engine)
        driver.step(500.0)
        clock.now = 500.0
        engine.pause_race()

        result = driver.step(10000.0)

        assert result.running is False
        assert engine.game_status == GameStatus.PAUSED
        assert positions(state) == {1: pytest.approx(50.0), 2: pytest.approx(25.0)}
