import os
import tomllib
from pathlib import Path
from typing import Any

from concertscout.models import CHEAP_MAX_PRICE

_DEFAULT_CONFIG_PATH = Path("config.toml")
_DEFAULT_ENV_PATH = Path(".env")


def load(path: Path = _DEFAULT_CONFIG_PATH, env_path: Path = _DEFAULT_ENV_PATH) -> dict[str, Any]:
    """Load config from TOML (defaults if the file is missing), then overlay .env values."""
    cfg: dict[str, Any] = {}
    if path.exists():
        with open(path, "rb") as f:
            cfg = tomllib.load(f)
    _load_env(env_path, cfg)
    return cfg


def _load_env(env_path: Path, cfg: dict) -> None:
    """
    Parse a .env file and inject values into the config dict.

    Supported variable names:
      CONCERTSCOUT_URL  -> cfg["scraper"]["url"]
      CONCERTSCOUT_DB   -> cfg["database"]["path"]

    Shell environment variables take precedence over .env values.
    """
    # Pick up anything already set in the shell first
    _apply_env_vars(cfg)

    if not env_path.exists():
        return

    with open(env_path) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, _, value = line.partition("=")
            key = key.strip()
            value = value.strip().strip('"').strip("'")
            # Shell environment takes precedence over .env file
            if key not in os.environ:
                os.environ[key] = value

    _apply_env_vars(cfg)


def _apply_env_vars(cfg: dict) -> None:
    if v := os.environ.get("CONCERTSCOUT_URL"):
        cfg.setdefault("scraper", {})["url"] = v
    if v := os.environ.get("CONCERTSCOUT_DB"):
        cfg.setdefault("database", {})["path"] = v


def get_site(cfg: dict) -> dict:
    return cfg.get("site", {})


def get_database_path(cfg: dict) -> Path:
    return Path(cfg.get("database", {}).get("path", "data/concerts.db"))


def get_scraper(cfg: dict) -> dict:
    return cfg.get("scraper", {})


def get_cheap_max_price(cfg: dict) -> int:
    return int(get_site(cfg).get("cheap_max_price", CHEAP_MAX_PRICE))
