"""
Build step: fetch the card list once and write data/cards.json.

The page never talks to the API itself; it only reads the snapshot written
here. If the fetch fails nothing is written and the error propagates.
"""

import json
import logging
from pathlib import Path

import requests

from etl.fetch_cards import fetch_cards
from gallery.models import Card

DATA_DIR = Path(__file__).parent.parent / "data"
CARDS_FILE = DATA_DIR / "cards.json"

log = logging.getLogger(__name__)


def run(session: requests.Session | None = None, output: Path = CARDS_FILE) -> list[Card]:
    """Fetch cards, save them as a JSON array, return them."""
    cards = fetch_cards(session)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(
        json.dumps([c.model_dump() for c in cards], indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    log.info("Saved %d cards → %s", len(cards), output.name)
    return cards


def load(path: Path = CARDS_FILE) -> list[Card]:
    """Read and validate the snapshot; FileNotFoundError if it was never built."""
    records = json.loads(path.read_text(encoding="utf-8"))
    cards = [Card.model_validate(r) for r in records]
    log.info("Loaded %d cards from %s", len(cards), path.name)
    return cards


def ensure(path: Path = CARDS_FILE) -> list[Card]:
    """Load the snapshot, building it first if it does not exist yet."""
    if not path.exists():
        log.info("%s missing, fetching from the card API…", path.name)
        return run(output=path)
    return load(path)
