"""トーナメント実行コマンド"""

import click

from keiba_sim.cli.utils.table_printer import print_results_table, print_standings_table
from keiba_sim.engine.clock import MonotonicClock
from keiba_sim.engine.game import GameEngine
from keiba_sim.engine.runner import FrameLoop, RaceRunner
from keiba_sim.models.game_state import GameStatus, RoundCompleted
from keiba_sim.services.standings import calculate_standings


@click.command()
@click.option(
    "--speed",
    type=click.FloatRange(min=0.0, min_open=True),
    default=1.0,
    help="再生速度の倍率（デフォルト: 1.0）",
)
@click.option("--manual", is_flag=True, help="次のラウンドを自動で開始しない（第1ラウンドのみ実行）")
def play(speed: float, manual: bool):
    """トーナメントを実時間で実行し、ラウンドごとの結果を表示する"""
    engine = GameEngine(clock=MonotonicClock(speed=speed))
    engine.initialize_game()
    engine.generate_program()

    def on_round_completed(event: RoundCompleted) -> None:
        print_results_table(event.race, event.results)
        click.echo("")

    # 結果表示を先に登録し、次ラウンドの自動開始より前に出力する
    engine.subscribe(on_round_completed)

    loop = FrameLoop()
    runner = RaceRunner(engine, loop, auto_advance=not manual)

    click.echo("=" * 46)
    click.echo(f"トーナメント開始: {len(engine.race_program)}ラウンド (x{speed:g})")
    click.echo("=" * 46)

    runner.start()
    loop.run()
    runner.close()

    if engine.game_status != GameStatus.COMPLETED:
        click.echo(
            f"{len(engine.completed_races)}/{len(engine.race_program)}ラウンド完了"
            "（残りのラウンドは未実行）"
        )

    click.echo("トーナメント成績")
    print_standings_table(calculate_standings(engine.completed_races))
