"""ロスター表示コマンド"""

import click

from keiba_sim.cli.utils.table_printer import print_roster_table
from keiba_sim.engine.game import GameEngine


@click.command()
def roster():
    """出走馬ロスターを生成して表示する"""
    engine = GameEngine()
    engine.initialize_game()
    print_roster_table(engine.all_horses)
