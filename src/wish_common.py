from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv


def pause_exit(enabled: bool) -> None:
    if not enabled:
        return
    try:
        input("Press Enter to exit...")
    except (EOFError, KeyboardInterrupt):
        pass


def exe_dir() -> Path:
    # Directory of the frozen exe, or of this script when run from source.
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parent


def _find_env_file() -> Path | None:
    for p in (Path.cwd() / ".env", exe_dir() / ".env"):
        if p.is_file():
            return p
    return None


def load_env() -> None:
    # Values already in the environment win over the .env file.
    path = _find_env_file()
    if path is None:
        return
    load_dotenv(path, override=False)


def env_setting(key: str) -> str:
    return (os.getenv(key) or "").strip()


def setup_logger(verbose: bool) -> logging.Logger:
    # stdout is reserved for the URL, diagnostics go to stderr.
    h = logging.StreamHandler(stream=sys.stderr)
    h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))

    for name in ("extract_wish_url", "wish_url_lib", "wish_webcache"):
        lg = logging.getLogger(name)
        lg.setLevel(logging.INFO if verbose else logging.WARNING)
        lg.propagate = False
        lg.handlers.clear()
        lg.addHandler(h)
    return logging.getLogger("extract_wish_url")
