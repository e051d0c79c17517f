"""
Fetcher for the Triad card API (triad.raelys.com).

The API is a single unauthenticated JSON endpoint with no parameters and no
pagination:

    GET https://triad.raelys.com/api/cards  →  {"results": [Card, ...]}

One request per build. There is no retry and no fallback data: a transport
error, an HTTP error status, a non-JSON body or an unexpected shape all
propagate to the caller and fail the build.
"""

import logging

import requests

from gallery.models import Card, CardsEnvelope

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

CARDS_API_URL = "https://triad.raelys.com/api/cards"

REQUEST_TIMEOUT = 15  # seconds

log = logging.getLogger(__name__)

SESSION = requests.Session()
SESSION.headers["User-Agent"] = "Triad-Card-Gallery/1.0"


# ---------------------------------------------------------------------------
# Fetch
# ---------------------------------------------------------------------------

def fetch_cards(session: requests.Session | None = None) -> list[Card]:
    """GET the card list and unwrap the `results` envelope."""
    session = session or SESSION
    log.info("GET %s", CARDS_API_URL)
    resp = session.get(CARDS_API_URL, timeout=REQUEST_TIMEOUT)
    resp.raise_for_status()

    envelope = CardsEnvelope.model_validate(resp.json())
    log.info("Fetched %d cards.", len(envelope.results))
    return envelope.results
