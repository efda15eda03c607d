import json
import sqlite3
from datetime import date
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

import concertscout.config as cfg_module
import concertscout.service as service
from concertscout.models import Concert

_TEMPLATE_DIR = Path(__file__).parent / "templates"


def _concert_to_dict(concert: Concert, max_price: int) -> dict:
    """Serialise a Concert to a plain dict for JSON embedding in the template."""
    return {
        "id": concert.id,
        "title": concert.title,
        "artist": concert.artist,
        "venue": concert.venue,
        "date": concert.date.isoformat(),
        "price": concert.price,
        "price_label": _price_label(concert.price),
        "cheap": concert.is_cheap(max_price),
        "url": concert.url,
        "source": concert.source,
    }


def _price_label(price: int) -> str:
    return "무료" if price == 0 else f"{price:,}원"


def build_site(conn: sqlite3.Connection, cfg: dict, output_dir: Path) -> Path:
    site_cfg = cfg_module.get_site(cfg)
    site_title = site_cfg.get("title", "저렴한 콘서트")
    max_price = cfg_module.get_cheap_max_price(cfg)

    concerts = service.all_concerts(conn)
    cheap = service.cheap_concerts(conn, max_price)

    output_dir.mkdir(parents=True, exist_ok=True)

    env = Environment(
        loader=FileSystemLoader(_TEMPLATE_DIR),
        autoescape=select_autoescape(["html"]),
    )
    env.filters["price"] = _price_label
    env.globals["site_title"] = site_title
    env.globals["generated_date"] = date.today().isoformat()

    concerts_json = json.dumps(
        [_concert_to_dict(c, max_price) for c in concerts],
        ensure_ascii=False,
    ).replace("</", "<\\/")   # embedded in a <script> block

    dest = output_dir / "index.html"
    _render(env, "index.html", dest, {
        "concerts": concerts,
        "cheap": cheap,
        "max_price": max_price,
        "concerts_json": concerts_json,
        "page_title": site_title,
    })
    return dest


def _render(env: Environment, template_name: str, dest: Path, context: dict) -> None:
    template = env.get_template(template_name)
    dest.write_text(template.render(**context), encoding="utf-8")
