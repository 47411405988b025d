"""Constants for keiba tournament simulator."""

# 出走馬の名前（ロスター順）
HORSE_NAMES: tuple[str, ...] = (
    "Ada Lovelace",
    "Grace Hopper",
    "Alan Turing",
    "Margaret Hamilton",
    "Donald Knuth",
    "John von Neumann",
    "Claude Shannon",
    "Barbara Liskov",
    "Edsger Dijkstra",
    "Frances Allen",
    "Tim Berners-Lee",
    "Dennis Ritchie",
    "Ken Thompson",
    "Joan Clarke",
    "Hedy Lamarr",
    "Katherine Johnson",
    "Annie Easley",
    "Ada Yonath",
    "Rear Admiral Hopper",
    "Dorothy Vaughan",
)

# 表示色パレット（ロスター順に割り当て）
HORSE_COLORS: tuple[str, ...] = (
    "#FF6B6B",  # Red
    "#4ECDC4",  # Teal
    "#FFE66D",  # Yellow
    "#A8E6CF",  # Mint
    "#FF8B94",  # Pink
    "#C7CEEA",  # Lavender
    "#FFDAC1",  # Peach
    "#B4F8C8",  # Light Green
    "#FBE7C6",  # Cream
    "#A0E7E5",  # Aqua
    "#FFAEBC",  # Rose
    "#B4A7D6",  # Purple
    "#FFD3B6",  # Apricot
    "#DCEDC1",  # Lime
    "#FFA8A8",  # Coral
    "#A8DADC",  # Sky Blue
    "#F4ACB7",  # Salmon
    "#D4A5A5",  # Dusty Rose
    "#9EE09E",  # Sage
    "#FFB6B9",  # Blush
)

# パレット外の馬に割り当てる色
FALLBACK_COLOR = "#999999"

# 各ラウンドの距離（メートル）
RACE_DISTANCES: tuple[int, ...] = (1200, 1400, 1600, 1800, 2000, 2200)

# 1レースあたりの出走頭数
HORSES_PER_RACE = 10

# 進捗率の上限（%）
PROGRESS_COMPLETE = 100.0

INITIAL_ROUND_INDEX = 0
