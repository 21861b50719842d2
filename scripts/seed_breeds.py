"""
CLI helper to load dog-breed records from a JSON file into the breed database.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from breeders.config import get_settings
from breeders.db import SqlBreedStore
from breeders.errors import LookupUnavailableError
from breeders.models import Breed

logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed the dog breed table")
    parser.add_argument("path", type=Path, help="JSON file holding a list of breeds")
    parser.add_argument(
        "--dsn",
        type=str,
        default=None,
        help="SQLAlchemy database URL (defaults to DATABASE_URL)",
    )
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(message)s")

    settings = get_settings()
    dsn = args.dsn or settings.database_url
    if not dsn:
        logger.error("No database URL given; pass --dsn or set DATABASE_URL")
        return 2

    records = json.loads(args.path.read_text(encoding="utf-8"))
    try:
        store = SqlBreedStore(
            dsn,
            pool_size=settings.db_pool_size,
            max_lifetime_seconds=settings.db_max_lifetime_seconds,
        )
        for record in records:
            saved = store.add_breed(Breed.from_dict(record))
            logger.info("Saved breed %s (id=%s)", saved.breed, saved.id)
    except LookupUnavailableError as exc:
        logger.error("Seeding failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
