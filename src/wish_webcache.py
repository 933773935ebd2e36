from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from wish_errors import LogFileNotFound, ReadError

log = logging.getLogger(__name__)

WEB_CACHE_DIR_NAME = "webCaches"
RELATIVE_PATH_TO_DATA2 = ("Cache", "Cache_Data", "data_2")

Version = tuple[int, int, int, int]


@dataclass(frozen=True)
class VersionedDir:
    path: Path
    version: Version


def parse_version(name: str) -> Optional[Version]:
    # Cache folders are named after the client version, e.g. "4.5.0.0".
    parts = name.split(".")
    if len(parts) != 4:
        return None
    if not all(p.isdigit() for p in parts):
        return None
    a, b, c, d = (int(p) for p in parts)
    return (a, b, c, d)


def list_versioned_dirs(web_cache_dir: Path) -> list[VersionedDir]:
    """Versioned cache directories under web_cache_dir, newest first.

    A missing directory gives an empty list; any other OSError is a ReadError.
    """
    try:
        children = list(web_cache_dir.iterdir())
    except (FileNotFoundError, NotADirectoryError):
        return []
    except OSError as e:
        raise ReadError(f"Failed to list cache directory: {web_cache_dir} ({e})") from e

    out: list[VersionedDir] = []
    for p in children:
        v = parse_version(p.name)
        if v is None or not p.is_dir():
            continue
        out.append(VersionedDir(p, v))
    out.sort(key=lambda d: d.version, reverse=True)
    return out


def find_data2_file(data_dir: Path) -> Path:
    web_cache_dir = data_dir / WEB_CACHE_DIR_NAME
    if not web_cache_dir.is_dir():
        raise LogFileNotFound(f"Web cache directory not found: {web_cache_dir}")

    versioned = list_versioned_dirs(web_cache_dir)
    if not versioned:
        raise LogFileNotFound(f"No versioned cache directories (like 4.5.0.0) under: {web_cache_dir}")

    # Only the newest one is live; older folders are left behind by updates.
    latest = versioned[0]
    log.info("cache version: %s", ".".join(str(n) for n in latest.version))
    data2 = latest.path.joinpath(*RELATIVE_PATH_TO_DATA2)
    if not data2.is_file():
        raise LogFileNotFound(f"Cache file not found: {data2}")
    return data2
