"""Click CLIメインモジュール"""

import logging

import click

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    help="ログレベル（デフォルト: WARNING）",
)
def main(log_level: str):
    """競馬トーナメントシミュレータCLI"""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# コマンドの登録
from keiba_sim.cli.commands.play import play
from keiba_sim.cli.commands.program import program
from keiba_sim.cli.commands.roster import roster

main.add_command(roster)
main.add_command(program)
main.add_command(play)


__all__ = ["main"]
