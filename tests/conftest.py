import logging
from pathlib import Path

import pytest

GENSHIN_URL = (
    "https://gs.hoyoverse.com/genshin/event/e20190909gacha-v3/index.html"
    "?authkey_ver=1&sign_type=2&authkey=abc%2Fdef%3D&lang=en&game_biz=hk4e_global"
)
ZZZ_URL = (
    "https://gs.hoyoverse.com/nap/event/e20230424gacha/index.html"
    "?authkey_ver=1&authkey=zzz%2B123&lang=en&game_biz=nap_global"
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    # setenv first so teardown also undoes values loaded from a .env file.
    for key in ("GAME_INSTALL_DIR", "WISH_GAME"):
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    # Keep a stray .env in the repo from leaking into tests.
    monkeypatch.chdir(tmp_path)
    yield
    for name in ("extract_wish_url", "wish_url_lib", "wish_webcache"):
        lg = logging.getLogger(name)
        lg.handlers.clear()
        lg.setLevel(logging.NOTSET)
        lg.propagate = True


def make_install(root: Path, data_dir: str = "GenshinImpact_Data", version: str = "4.5.0.0", content: bytes | None = b"") -> Path:
    """Build <root>/<data_dir>/webCaches/<version>/Cache/Cache_Data/data_2."""
    cache_data = root / data_dir / "webCaches" / version / "Cache" / "Cache_Data"
    cache_data.mkdir(parents=True, exist_ok=True)
    if content is not None:
        (cache_data / "data_2").write_bytes(content)
    return root


@pytest.fixture
def install(tmp_path):
    def _make(content: bytes | None = b"", **kw) -> Path:
        return make_install(tmp_path / "game", content=content, **kw)

    return _make
