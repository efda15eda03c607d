"""Fixed sample concerts used when a scrape comes back empty."""

from datetime import date, timedelta
from typing import Optional

from concertscout.models import Concert

SAMPLE_SOURCE = "Sample"

# (title, artist, venue, days from today, price, url)
_SAMPLES = [
    ("서울 재즈 페스티벌", "Various Artists", "올림픽공원", 10, 0,
     "https://example.com/jazz-festival"),
    ("인디 밴드의 밤", "The Local Band", "홍대 라이브홀", 15, 5000,
     "https://example.com/indie-night"),
    ("클래식 피아노 리사이틀", "김예진", "예술의전당 콘서트홀", 20, 8000,
     "https://example.com/piano-recital"),
    ("거리 공연", "버스킹 크루", "이태원 거리", 7, 0,
     "https://example.com/busking"),
    ("K-POP 콘서트", "신예 아이돌", "잠실 실내체육관", 30, 50000,
     "https://example.com/kpop"),
    ("아마추어 밴드 경연", "여러 팀", "강남 클럽", 5, 3000,
     "https://example.com/band-battle"),
]


def sample_concerts(today: Optional[date] = None) -> list[Concert]:
    today = today or date.today()
    return [
        Concert(
            title=title,
            artist=artist,
            venue=venue,
            date=today + timedelta(days=offset),
            price=price,
            url=url,
            source=SAMPLE_SOURCE,
        )
        for title, artist, venue, offset, price, url in _SAMPLES
    ]
