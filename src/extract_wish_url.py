import argparse
from pathlib import Path

from wish_common import env_setting, load_env, pause_exit, setup_logger
from wish_games import find_game, game_keys
from wish_url_lib import run_extract


def main(argv: list[str] | None = None) -> int:
    load_env()

    ap = argparse.ArgumentParser(
        prog="extract-wish-url",
        description="Print the wish history URL cached by the game client (offline, read-only).",
    )
    ap.add_argument(
        "install_dir",
        nargs="?",
        default=None,
        help="Game install directory (the one containing GenshinImpact_Data or ZenlessZoneZero_Data). "
        "Defaults to GAME_INSTALL_DIR from the environment or .env.",
    )
    ap.add_argument(
        "--game",
        choices=["auto", *game_keys()],
        default=None,
        help="Game layout to use instead of auto-detection (default: WISH_GAME or auto).",
    )
    ap.add_argument("--verbose", action="store_true", help="Print diagnostics to stderr.")

    pause_group = ap.add_mutually_exclusive_group()
    pause_group.add_argument("--pause", dest="pause", action="store_true", help="Wait for Enter before exit.")
    pause_group.add_argument("--no-pause", dest="pause", action="store_false", help=argparse.SUPPRESS)
    ap.set_defaults(pause=False)
    args = ap.parse_args(argv)

    raw_dir = args.install_dir or env_setting("GAME_INSTALL_DIR")
    if not raw_dir:
        ap.error("install directory is required (or set GAME_INSTALL_DIR)")

    game_key = args.game or env_setting("WISH_GAME").lower() or "auto"
    if game_key != "auto" and game_key not in game_keys():
        ap.error(f"WISH_GAME must be one of: auto, {', '.join(game_keys())}")

    logger = setup_logger(args.verbose)
    install_dir = Path(raw_dir).expanduser()
    logger.info("install dir: %s", install_dir)

    game = None if game_key == "auto" else find_game(game_key)
    code = run_extract(install_dir=install_dir, game=game)
    pause_exit(args.pause)
    return code


if __name__ == "__main__":
    raise SystemExit(main())
