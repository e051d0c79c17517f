"""
Client-side card filtering.

Two predicates are chained in a fixed order:
    1. star rating: exact match on Card.stars (skipped when no rating)
    2. name search: case-insensitive substring of Card.name (skipped when empty)

Both keep the input order, so the result is always a subsequence of the input.
"""

from collections.abc import Iterable

from gallery.models import Card

STAR_RATINGS = (1, 2, 3, 4, 5)


def filter_by_stars(cards: Iterable[Card], rating: int | None) -> list[Card]:
    """Keep cards whose stars equal rating; keep everything when rating is None."""
    if rating is None:
        return list(cards)
    return [c for c in cards if c.stars == rating]


def filter_by_name(cards: Iterable[Card], text: str) -> list[Card]:
    """Keep cards whose name contains text, ignoring case; keep everything when text is empty."""
    if not text:
        return list(cards)
    needle = text.casefold()
    return [c for c in cards if needle in c.name.casefold()]


def filter_cards(cards: Iterable[Card], rating: int | None = None, text: str = "") -> list[Card]:
    return filter_by_name(filter_by_stars(cards, rating), text)
