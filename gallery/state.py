"""
Filter and selection state for the gallery page.

Holds the three independent values the page works with (star rating, search
text, active card) and derives the visible card list from them on every read.

Two variants:
    GalleryState(cards)                    filters never touch the active card
    GalleryState(cards, auto_select=True)  every filter change clears the
                                           active card, then selects the sole
                                           visible card if exactly one remains
"""

import logging

from gallery.filters import STAR_RATINGS, filter_cards
from gallery.models import Card

log = logging.getLogger(__name__)


class GalleryState:
    def __init__(self, cards: list[Card], auto_select: bool = False):
        self.cards = list(cards)
        self.auto_select = auto_select
        self.star_rating: int | None = None
        self.search_text: str = ""
        self.active_card: Card | None = None

    # ------------------------------------------------------------------
    # Derived view
    # ------------------------------------------------------------------

    @property
    def visible(self) -> list[Card]:
        return filter_cards(self.cards, self.star_rating, self.search_text)

    # ------------------------------------------------------------------
    # Filters
    # ------------------------------------------------------------------

    def set_star_rating(self, rating: int | None) -> None:
        if rating is not None and (
            not isinstance(rating, int) or isinstance(rating, bool) or rating not in STAR_RATINGS
        ):
            raise ValueError(f"Star rating must be one of {STAR_RATINGS}, got {rating!r}")
        self.star_rating = rating
        self._filters_changed()

    def set_search_text(self, text: str) -> None:
        self.search_text = text
        self._filters_changed()

    def reset(self) -> None:
        """Clear rating and search text together."""
        self.star_rating = None
        self.search_text = ""
        self._filters_changed()

    def _filters_changed(self) -> None:
        if not self.auto_select:
            return
        self.active_card = None
        visible = self.visible
        if len(visible) == 1:
            self.active_card = visible[0]
            log.debug("Auto-selected card %d (%s)", visible[0].id, visible[0].name)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select(self, card: Card) -> None:
        self.active_card = card

    def select_by_id(self, card_id: int) -> Card:
        """Make the card with card_id active and return it; KeyError if unknown."""
        for card in self.cards:
            if card.id == card_id:
                self.select(card)
                return card
        raise KeyError(card_id)

    def is_active(self, card: Card) -> bool:
        return self.active_card is not None and self.active_card.id == card.id
