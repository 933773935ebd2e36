from __future__ import annotations

import logging
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from wish_errors import ExtractError, InvalidInstallDirectory, LogFileNotFound, ReadError, UrlNotFound
from wish_games import GAMES, GameLayout, detect_game
from wish_webcache import find_data2_file

__all__ = [
    "ExtractError",
    "ExtractResult",
    "InvalidInstallDirectory",
    "LogFileNotFound",
    "ReadError",
    "UrlNotFound",
    "extract",
    "find_latest_url",
    "find_urls",
    "run_extract",
]

log = logging.getLogger(__name__)

# RFC 3986 unreserved + reserved characters, plus "%" for escapes.
URL_CHARS = rb"A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%"
MAX_URL_LENGTH = 2048


@dataclass(frozen=True)
class ExtractResult:
    url: str
    game: GameLayout
    source: Path


def _url_re(url_start: str) -> re.Pattern[bytes]:
    # A candidate ends where the next one starts, and never runs past MAX_URL_LENGTH.
    start = re.escape(url_start.encode("ascii"))
    room = max(0, MAX_URL_LENGTH - len(url_start))
    return re.compile(start + b"(?:(?!" + start + b")[" + URL_CHARS + b"]){0," + str(room).encode() + b"}")


def find_urls(content: bytes, url_start: str) -> list[str]:
    """
    Every URL beginning with url_start in content, in file order.

    The cache file is binary; each match stops at the first byte that
    can't be part of a URL, or where the next url_start begins.
    """
    return [m.group(0).decode("ascii") for m in _url_re(url_start).finditer(content)]


def find_latest_url(
    content: bytes,
    url_start: str,
    *,
    marker: Optional[str] = None,
    url_end: Optional[str] = None,
) -> Optional[str]:
    urls = find_urls(content, url_start)
    log.info("%d candidate URL(s) starting with %s", len(urls), url_start)
    # Newest entries are appended at the end of the cache file.
    for url in reversed(urls):
        if url_end:
            i = url.rfind(url_end)
            if i < 0:
                continue
            url = url[: i + len(url_end)]
        if marker and marker not in url:
            continue
        return url
    return None


def _read_bytes(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        raise ReadError(f"Failed to read cache file: {path} ({e})") from e


def extract(install_dir: Path, game: Optional[GameLayout] = None) -> ExtractResult:
    install_dir = Path(install_dir)
    if not install_dir.is_dir():
        raise InvalidInstallDirectory(f"Install directory not found: {install_dir}")

    if game is None:
        game = detect_game(install_dir)
        if game is None:
            dirs = " ".join(g.data_dir for g in GAMES)
            raise InvalidInstallDirectory(
                f"Failed to find one of the following directories under {install_dir}:\n{dirs}"
            )
    elif not (install_dir / game.data_dir).is_dir():
        raise InvalidInstallDirectory(f"{game.title} data directory not found: {install_dir / game.data_dir}")

    log.info("game: %s", game.title)
    data2 = find_data2_file(install_dir / game.data_dir)
    log.info("cache file: %s", data2)

    content = _read_bytes(data2)
    log.info("read %d bytes", len(content))

    url = find_latest_url(content, game.url_start, marker=game.marker, url_end=game.url_end)
    if url is None:
        raise UrlNotFound(
            f"No wish history URL in {data2}\n"
            f"(looked for {game.url_start}...{game.marker}...{game.url_end}). "
            "Open the wish history page in game and retry."
        )
    return ExtractResult(url, game, data2)


def run_extract(*, install_dir: Path, game: Optional[GameLayout]) -> int:
    try:
        result = extract(install_dir, game)
    except ExtractError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return e.exit_code

    print(result.url)
    return 0
