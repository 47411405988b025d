"""トーナメント成績集計"""

from dataclasses import dataclass

from keiba_sim.models.race import Race


@dataclass(frozen=True)
class Standing:
    """1頭分のトーナメント成績（イミュータブル）

    Attributes:
        horse_id: 馬ID
        horse_name: 馬名
        starts: 出走数
        wins: 1着数
        top3: 3着以内数
        best_time: 最速タイム（ミリ秒）
    """

    horse_id: int
    horse_name: str
    starts: int
    wins: int
    top3: int
    best_time: float


def calculate_standings(completed_races: list[Race]) -> list[Standing]:
    """完了したレースから馬ごとの成績を集計する

    勝利数、3着以内数、出走数の昇順（少ない方が上位）、馬IDの順に並べる。

    Args:
        completed_races: 完了したレースのリスト

    Returns:
        成績リスト（上位順）
    """
    totals: dict[int, dict] = {}

    for race in completed_races:
        for result in race.results or []:
            entry = totals.setdefault(
                result.horse_id,
                {"name": result.horse_name, "starts": 0, "wins": 0, "top3": 0, "best": None},
            )
            entry["starts"] += 1
            if result.position == 1:
                entry["wins"] += 1
            if result.position <= 3:
                entry["top3"] += 1
            if entry["best"] is None or result.time < entry["best"]:
                entry["best"] = result.time

    standings = [
        Standing(
            horse_id=horse_id,
            horse_name=entry["name"],
            starts=entry["starts"],
            wins=entry["wins"],
            top3=entry["top3"],
            best_time=entry["best"] or 0.0,
        )
        for horse_id, entry in totals.items()
    ]
    return sorted(standings, key=lambda s: (-s.wins, -s.top3, s.starts, s.horse_id))
