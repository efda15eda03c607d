from pathlib import Path

import pytest

import concertscout.config as cfg_module


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start without overrides; monkeypatch restores anything .env loading writes."""
    for name in ("CONCERTSCOUT_DB", "CONCERTSCOUT_URL"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_missing_file_gives_defaults(tmp_path):
    cfg = cfg_module.load(tmp_path / "nope.toml", tmp_path / ".env")
    assert cfg_module.get_database_path(cfg) == Path("data/concerts.db")
    assert cfg_module.get_scraper(cfg) == {}
    assert cfg_module.get_cheap_max_price(cfg) == 10000


def test_toml_sections(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(
        '[database]\npath = "db/x.db"\n'
        '[scraper]\nurl = "https://example.com/list"\nrender = false\n'
        '[site]\ncheap_max_price = 20000\n',
        encoding="utf-8",
    )
    cfg = cfg_module.load(path, tmp_path / ".env")
    assert cfg_module.get_database_path(cfg) == Path("db/x.db")
    assert cfg_module.get_scraper(cfg) == {"url": "https://example.com/list", "render": False}
    assert cfg_module.get_cheap_max_price(cfg) == 20000


def test_env_file_overrides_toml(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[database]\npath = "db/x.db"\n', encoding="utf-8")
    env = tmp_path / ".env"
    env.write_text('# local overrides\nCONCERTSCOUT_DB="other.db"\nCONCERTSCOUT_URL=https://example.com/env\n')

    cfg = cfg_module.load(path, env)
    assert cfg_module.get_database_path(cfg) == Path("other.db")
    assert cfg_module.get_scraper(cfg)["url"] == "https://example.com/env"


def test_shell_env_beats_env_file(tmp_path, monkeypatch):
    monkeypatch.setenv("CONCERTSCOUT_DB", "shell.db")
    env = tmp_path / ".env"
    env.write_text("CONCERTSCOUT_DB=file.db\n")

    cfg = cfg_module.load(tmp_path / "nope.toml", env)
    assert cfg_module.get_database_path(cfg) == Path("shell.db")
