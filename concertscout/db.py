import sqlite3
from datetime import date
from pathlib import Path
from typing import Iterable

from concertscout.models import Concert


def connect(db_path: Path) -> sqlite3.Connection:
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    _create_schema(conn)
    return conn


def _create_schema(conn: sqlite3.Connection) -> None:
    conn.executescript("""
        CREATE TABLE IF NOT EXISTS concerts (
            id      INTEGER PRIMARY KEY AUTOINCREMENT,
            title   TEXT NOT NULL,
            artist  TEXT NOT NULL,
            venue   TEXT NOT NULL,
            date    TEXT NOT NULL,
            price   INTEGER NOT NULL DEFAULT 0 CHECK (price >= 0),
            url     TEXT NOT NULL DEFAULT '',
            source  TEXT NOT NULL
        );
    """)
    conn.commit()


def replace_all(conn: sqlite3.Connection, concerts: Iterable[Concert]) -> int:
    """Delete every stored concert and insert `concerts` in their place, atomically."""
    rows = [
        {
            "title":  c.title,
            "artist": c.artist,
            "venue":  c.venue,
            "date":   c.date.isoformat(),
            "price":  c.price,
            "url":    c.url,
            "source": c.source,
        }
        for c in concerts
    ]
    with conn:
        conn.execute("DELETE FROM concerts")
        conn.executemany(
            """
            INSERT INTO concerts (title, artist, venue, date, price, url, source)
            VALUES (:title, :artist, :venue, :date, :price, :url, :source)
            """,
            rows,
        )
    return len(rows)


def query_cheap(conn: sqlite3.Connection, max_price: int) -> list[Concert]:
    """Concerts priced at or below `max_price`, cheapest first."""
    rows = conn.execute(
        """
        SELECT id, title, artist, venue, date, price, url, source
        FROM concerts
        WHERE price <= ?
        ORDER BY price, id
        """,
        (max_price,),
    ).fetchall()
    return [_row_to_concert(r) for r in rows]


def query_all(conn: sqlite3.Connection) -> list[Concert]:
    """All concerts, earliest date first."""
    rows = conn.execute(
        """
        SELECT id, title, artist, venue, date, price, url, source
        FROM concerts
        ORDER BY date, id
        """
    ).fetchall()
    return [_row_to_concert(r) for r in rows]


def _row_to_concert(row: sqlite3.Row) -> Concert:
    return Concert(
        id=row["id"],
        title=row["title"],
        artist=row["artist"],
        venue=row["venue"],
        date=date.fromisoformat(row["date"]),
        price=row["price"],
        url=row["url"],
        source=row["source"],
    )
