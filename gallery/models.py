"""
Card schema.

Mirrors the payload served by https://triad.raelys.com/api/cards:

    {"results": [{"id": 1, "name": "...", "description": "...",
                  "image": "https://...", "icon": "https://...", "stars": 3}, ...]}

Cards are immutable. Extra keys in the payload are ignored. Validation is
strict: a missing key, a value of the wrong JSON type or a star rating
outside 1-5 fails it.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Card(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    id: int
    name: str
    description: str
    image: str
    icon: str
    stars: int = Field(ge=1, le=5)


class CardsEnvelope(BaseModel):
    results: list[Card]

    @field_validator("results")
    @classmethod
    def _unique_ids(cls, cards: list[Card]) -> list[Card]:
        seen: set[int] = set()
        for card in cards:
            if card.id in seen:
                raise ValueError(f"duplicate card id {card.id}")
            seen.add(card.id)
        return cards
