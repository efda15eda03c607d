import argparse
import logging
import sqlite3
import sys
from pathlib import Path

from concertscout import __version__
import concertscout.config as cfg_module
import concertscout.db as db_module
import concertscout.service as service
from concertscout.generator.build import build_site
from concertscout.models import Concert
from concertscout.samples import SAMPLE_SOURCE
from concertscout.scrapers import DEFAULT_SOURCE, SCRAPERS


def _connect(cfg) -> sqlite3.Connection:
    return db_module.connect(cfg_module.get_database_path(cfg))


def _print_concerts(concerts: list[Concert]) -> None:
    for c in concerts:
        price = "free" if c.price == 0 else f"{c.price:,}원"
        print(f"  {c.date.isoformat()}  {price:>10}  {c.title} @ {c.venue}")


def _scrape(args, cfg):
    scraper_cfg = cfg_module.get_scraper(cfg)
    key = scraper_cfg.get("source", DEFAULT_SOURCE)
    if key not in SCRAPERS:
        print(f"Error: no scraper registered for source '{key}'.", file=sys.stderr)
        print(f"Available scrapers: {', '.join(sorted(SCRAPERS))}", file=sys.stderr)
        sys.exit(1)

    scraper = SCRAPERS[key](scraper_cfg)
    conn = _connect(cfg)
    print(f"Scraping {scraper.source_name} ...", end=" ", flush=True)
    concerts = service.run(conn, scraper)
    if all(c.source == SAMPLE_SOURCE for c in concerts):
        print(f"nothing found, {len(concerts)} sample concerts saved.")
    else:
        print(f"{len(concerts)} concerts saved.")


def _sample(args, cfg):
    conn = _connect(cfg)
    concerts = service.run_samples(conn)
    print(f"{len(concerts)} sample concerts saved.")


def _list(args, cfg):
    conn = _connect(cfg)
    if args.cheap or args.max_price is not None:
        max_price = args.max_price if args.max_price is not None else cfg_module.get_cheap_max_price(cfg)
        concerts = service.cheap_concerts(conn, max_price)
        print(f"{len(concerts)} concerts at or under {max_price:,}원:")
    else:
        concerts = service.all_concerts(conn)
        print(f"{len(concerts)} concerts:")
    _print_concerts(concerts)


def _generate(args, cfg):
    site_cfg = cfg_module.get_site(cfg)
    conn = _connect(cfg)
    output_dir = Path(site_cfg.get("output_dir", "output"))
    build_site(conn, cfg, output_dir)
    print(f"Site generated in '{output_dir}/'.")


def main():
    parser = argparse.ArgumentParser(
        prog="cs",
        description="Scrape concert listings and keep the cheap ones handy",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--config", default="config.toml", metavar="PATH",
        help="Path to config.toml (default: config.toml)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("scrape", help="Scrape the listing and replace the stored concerts")
    subparsers.add_parser("sample", help="Replace the stored concerts with the sample set")

    sp_list = subparsers.add_parser("list", help="Print stored concerts")
    sp_list.add_argument("--cheap", action="store_true", help="Only concerts at or under the cheap price")
    sp_list.add_argument("--max-price", type=int, metavar="WON", help="Only concerts at or under this price")

    subparsers.add_parser("generate", help="Generate the static page from the database")
    subparsers.add_parser("run", help="Scrape then generate the page")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )
    cfg = cfg_module.load(Path(args.config))

    try:
        if args.command == "scrape":
            _scrape(args, cfg)
        elif args.command == "sample":
            _sample(args, cfg)
        elif args.command == "list":
            _list(args, cfg)
        elif args.command == "generate":
            _generate(args, cfg)
        elif args.command == "run":
            _scrape(args, cfg)
            _generate(args, cfg)
    except sqlite3.Error as exc:
        print(f"FAILED ({exc})", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
