from dataclasses import dataclass, field
from datetime import date
from typing import Optional

DEFAULT_ARTIST = "Various"
CHEAP_MAX_PRICE = 10000   # KRW
MAX_RECORDS = 20          # per scrape


@dataclass
class Concert:
    title: str
    venue: str
    date: date
    artist: str = DEFAULT_ARTIST
    price: int = 0             # KRW, 0 means free or unknown
    url: str = ""
    source: str = ""           # e.g. "Interpark", "Sample"
    # Populated by DB layer after insert
    id: Optional[int] = field(default=None, repr=False)

    def __post_init__(self):
        if not self.title:
            raise ValueError("Concert title must not be empty")
        if self.price < 0:
            raise ValueError(f"Concert price must not be negative (got {self.price})")

    def is_cheap(self, max_price: int = CHEAP_MAX_PRICE) -> bool:
        return self.price <= max_price
