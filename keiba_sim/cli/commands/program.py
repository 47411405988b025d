"""レースプログラム表示コマンド"""

import click

from keiba_sim.cli.utils.table_printer import print_program
from keiba_sim.engine.game import GameEngine


@click.command()
def program():
    """ロスターとレースプログラムを生成して表示する"""
    engine = GameEngine()
    engine.initialize_game()
    engine.generate_program()

    click.echo(f"ロスター: {len(engine.all_horses)}頭")
    click.echo("")
    print_program(engine.race_program)
