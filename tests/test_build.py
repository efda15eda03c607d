import json
import re
from datetime import date

import concertscout.db as db_module
from concertscout.generator.build import build_site
from concertscout.models import Concert
from concertscout.samples import sample_concerts


def _embedded_json(html: str) -> list[dict]:
    match = re.search(r'<script id="concerts-data" type="application/json">(.*?)</script>', html, re.S)
    return json.loads(match.group(1))


def test_build_site_lists_concerts(conn, tmp_path, today):
    db_module.replace_all(conn, sample_concerts(today))
    out = tmp_path / "output"

    dest = build_site(conn, {"site": {"title": "Cheap Gigs"}}, out)

    html = dest.read_text(encoding="utf-8")
    assert dest == out / "index.html"
    assert "<title>Cheap Gigs</title>" in html
    assert "서울 재즈 페스티벌" in html
    assert "50,000원" in html

    data = _embedded_json(html)
    assert len(data) == 6
    assert [d["date"] for d in data] == sorted(d["date"] for d in data)
    kpop = next(d for d in data if d["price"] == 50000)
    assert kpop["cheap"] is False
    assert kpop["source"] == "Sample"


def test_build_site_escapes_markup(conn, tmp_path):
    db_module.replace_all(conn, [
        Concert(title="<b>Loud</b></script>", venue="Hall", date=date(2025, 1, 2), price=0, source="Test"),
    ])

    html = build_site(conn, {}, tmp_path).read_text(encoding="utf-8")

    assert "<b>Loud</b>" not in html
    assert "&lt;b&gt;Loud&lt;/b&gt;" in html
    assert _embedded_json(html)[0]["title"] == "<b>Loud</b></script>"


def test_cheap_threshold_from_config(conn, tmp_path, today):
    db_module.replace_all(conn, sample_concerts(today))

    html = build_site(conn, {"site": {"cheap_max_price": 0}}, tmp_path).read_text(encoding="utf-8")

    cheap_section = html.split('<section id="all">')[0]
    assert "거리 공연" in cheap_section
    assert "인디 밴드의 밤" not in cheap_section
