from datetime import date

import pytest

from concertscout.models import DEFAULT_ARTIST, Concert


def test_defaults():
    c = Concert(title="Gig", venue="Club", date=date(2025, 1, 1))
    assert c.artist == DEFAULT_ARTIST
    assert c.price == 0
    assert c.url == ""
    assert c.id is None


def test_empty_title_rejected():
    with pytest.raises(ValueError):
        Concert(title="", venue="Club", date=date(2025, 1, 1))


def test_negative_price_rejected():
    with pytest.raises(ValueError):
        Concert(title="Gig", venue="Club", date=date(2025, 1, 1), price=-1)


@pytest.mark.parametrize("price, cheap", [(0, True), (10000, True), (10001, False)])
def test_is_cheap(price, cheap):
    assert Concert(title="Gig", venue="Club", date=date(2025, 1, 1), price=price).is_cheap() is cheap


def test_is_cheap_custom_threshold():
    assert Concert(title="Gig", venue="Club", date=date(2025, 1, 1), price=20000).is_cheap(30000)
