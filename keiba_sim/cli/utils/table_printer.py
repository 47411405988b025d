"""テーブル表示ユーティリティ"""

import click

from keiba_sim.models.horse import Horse
from keiba_sim.models.race import Race
from keiba_sim.models.race_result import RaceResult
from keiba_sim.services.standings import Standing


def _truncate(name: str, width: int = 20) -> str:
    return name[:width] if len(name) > width else name


def format_time(time_ms: float) -> str:
    """ミリ秒を「秒.小数1桁」の文字列にする

    Args:
        time_ms: タイム（ミリ秒）

    Returns:
        例: 12345.6 -> "12.3s"
    """
    return f"{time_ms / 1000:.1f}s"


def print_roster_table(horses: list[Horse]) -> None:
    """ロスターテーブルを表示する

    Args:
        horses: ロスター
    """
    click.echo(f"{'ID':^4} | {'馬名':^20} | {'調子':^4} | {'色':^8}")
    click.echo("-" * 46)

    for horse in horses:
        click.echo(
            f"{horse.id:^4} | {_truncate(horse.name):<20} | {horse.condition:^4} | {horse.color:^8}"
        )


def print_program(program: list[Race]) -> None:
    """レースプログラムを表示する

    Args:
        program: レースプログラム
    """
    for race in program:
        click.echo(f"第{race.round_number}ラウンド {race.distance}m ({len(race.horses)}頭)")
        names = ", ".join(horse.name for horse in race.horses)
        click.echo(f"  {names}")


def print_results_table(race: Race, results: list[RaceResult] | tuple[RaceResult, ...]) -> None:
    """レース結果テーブルを表示する

    Args:
        race: 対象レース
        results: レース結果（着順順）
    """
    click.echo(f"第{race.round_number}ラウンド {race.distance}m 結果")
    click.echo(f"{'着順':^4} | {'ID':^4} | {'馬名':^20} | {'タイム':^8}")
    click.echo("-" * 46)

    for result in results:
        click.echo(
            f"{result.position:^4} | {result.horse_id:^4} | "
            f"{_truncate(result.horse_name):<20} | {format_time(result.time):>8}"
        )


def print_standings_table(standings: list[Standing]) -> None:
    """トーナメント成績テーブルを表示する

    Args:
        standings: 成績リスト（上位順）
    """
    click.echo(f"{'順位':^4} | {'馬名':^20} | {'出走':^4} | {'1着':^4} | {'3着内':^5} | {'最速':^8}")
    click.echo("-" * 62)

    for rank, standing in enumerate(standings, 1):
        click.echo(
            f"{rank:^4} | {_truncate(standing.horse_name):<20} | {standing.starts:^4} | "
            f"{standing.wins:^4} | {standing.top3:^5} | {format_time(standing.best_time):>8}"
        )
