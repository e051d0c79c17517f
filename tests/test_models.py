import pytest
from pydantic import ValidationError

from gallery.models import Card, CardsEnvelope


class TestCardValidation:
    """Test the Card schema against API-shaped records."""

    def test_extra_keys_ignored(self, api_payload):
        """Test that unknown API fields do not fail validation."""
        card = Card.model_validate(api_payload["results"][0])
        assert card.id == 1
        assert not hasattr(card, "patch")

    @pytest.mark.parametrize("stars", [0, 6, -1])
    def test_stars_out_of_range(self, api_payload, stars):
        """Test that stars outside 1-5 is rejected."""
        record = {**api_payload["results"][0], "stars": stars}
        with pytest.raises(ValidationError):
            Card.model_validate(record)

    @pytest.mark.parametrize(
        "field, value",
        [
            ("stars", True),
            ("stars", "3"),
            ("stars", 3.0),
            ("id", "1"),
            ("id", 1.0),
            ("name", 42),
        ],
    )
    def test_wrong_type_not_coerced(self, api_payload, field, value):
        """Test that values of the wrong JSON type are rejected, not converted."""
        record = {**api_payload["results"][0], field: value}
        with pytest.raises(ValidationError):
            Card.model_validate(record)

    def test_missing_field(self, api_payload):
        """Test that a record without a name is rejected."""
        record = dict(api_payload["results"][0])
        del record["name"]
        with pytest.raises(ValidationError):
            Card.model_validate(record)

    def test_cards_are_immutable(self, sample_cards):
        """Test that a card cannot be mutated after construction."""
        with pytest.raises(ValidationError):
            sample_cards[0].stars = 1


class TestEnvelope:
    """Test unwrapping of the {results: [...]} envelope."""

    def test_results_in_order(self, api_payload):
        """Test that results keep API order."""
        envelope = CardsEnvelope.model_validate(api_payload)
        assert [c.name for c in envelope.results] == ["Chocobo", "Behemoth"]

    def test_missing_results_key(self):
        """Test that a body without results is rejected."""
        with pytest.raises(ValidationError):
            CardsEnvelope.model_validate({"cards": []})

    def test_duplicate_ids_rejected(self, api_payload):
        """Test that two cards sharing an id are rejected."""
        first = api_payload["results"][0]
        with pytest.raises(ValidationError):
            CardsEnvelope.model_validate({"results": [first, {**first, "name": "Copy"}]})
