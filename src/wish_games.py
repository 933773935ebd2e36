# Per-game install layout and the signature of the wish history URL.
# To support another title, add a row to GAMES.

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class GameLayout:
    key: str
    title: str
    data_dir: str
    marker: str
    url_start: str
    url_end: str


GENSHIN_GLOBAL = GameLayout(
    key="genshin",
    title="Genshin Impact",
    data_dir="GenshinImpact_Data",
    marker="e20190909gacha-v3",
    url_start="https://gs.hoyoverse.com/",
    url_end="game_biz=hk4e_global",
)
ZZZ_GLOBAL = GameLayout(
    key="zzz",
    title="Zenless Zone Zero",
    data_dir="ZenlessZoneZero_Data",
    marker="e20230424gacha",
    url_start="https://gs.hoyoverse.com/",
    url_end="game_biz=nap_global",
)

GAMES: tuple[GameLayout, ...] = (GENSHIN_GLOBAL, ZZZ_GLOBAL)


def game_keys() -> list[str]:
    return [g.key for g in GAMES]


def find_game(key: str) -> GameLayout:
    k = (key or "").strip().lower()
    for g in GAMES:
        if g.key == k:
            return g
    raise KeyError(f"Unknown game: {key!r} (known: {', '.join(game_keys())})")


def detect_game(install_dir: Path) -> Optional[GameLayout]:
    for g in GAMES:
        if (install_dir / g.data_dir).is_dir():
            return g
    return None
